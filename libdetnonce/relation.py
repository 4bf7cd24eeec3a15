#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# the nonce relation: (secret + H(secret, digest)) * G == claimed

import logging

from libdetnonce.curve import Point
from libdetnonce.defs import Defs
from libdetnonce.nonce import ByteHashNonce, NonceDerivation, get_strategy
from libdetnonce.scalar import NonCanonicalError, ScalarField
from libdetnonce.scalarmul import mul_g

logger = logging.getLogger(__name__)

class RelationChecker(object):
    def __init__(self, strategy=None, rec=None):
        if strategy is None:
            strategy = ByteHashNonce()
        elif isinstance(strategy, str):
            strategy = get_strategy(strategy)
        assert isinstance(strategy, NonceDerivation), "strategy must be a NonceDerivation"

        self.strategy = strategy
        self.rec = rec
        self.sfield = ScalarField(rec)

    def nonce(self, secret, digest):
        return self.strategy.derive(secret, digest)

    # both operands go big-endian -> little-endian before the add
    def aggregate_scalar(self, secret, digest, nonce=None):
        if nonce is None:
            nonce = self.nonce(secret, digest)
        sval = self.sfield.from_bytes(secret, 'big')
        nval = self.sfield.from_bytes(nonce, 'big')
        return self.sfield.add(sval, nval)

    def aggregate_point(self, secret, digest):
        return mul_g(self.aggregate_scalar(secret, digest), self.rec)

    # claimed_x and claimed_y are 32-byte little-endian coordinates
    def check(self, secret, digest, claimed_x, claimed_y):
        try:
            claimed = Point.from_le_bytes(claimed_x, claimed_y)
        except NonCanonicalError as e:
            logger.warning("rejecting claimed point: %s", e)
            return False

        if Defs.check_claimed and not claimed.on_curve():
            logger.warning("rejecting claimed point: not on the curve")
            return False

        ok = self.aggregate_point(secret, digest) == claimed
        logger.debug("relation with %s nonce: %s", self.strategy.name, "pass" if ok else "fail")
        return ok

    def check_all(self, items):
        return [ self.check(*item) for item in items ]

def check_relation(secret, digest, claimed_x, claimed_y, strategy=None):
    return RelationChecker(strategy).check(secret, digest, claimed_x, claimed_y)
