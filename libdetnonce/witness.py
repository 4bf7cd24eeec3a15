#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# witness and public inputs for a proving backend

import json

from libdetnonce.nonce import PoseidonNonce
from libdetnonce.relation import RelationChecker
from libdetnonce.scalar import ScalarField
from libdetnonce.scalarmul import mul_g

def make_witness(secret, digest, strategy=None):
    checker = RelationChecker(strategy)
    nonce = checker.nonce(secret, digest)
    agg = checker.aggregate_scalar(secret, digest, nonce)
    (cx, cy) = mul_g(agg).to_le_bytes()

    out = { "strategy": checker.strategy.name
          , "private": { "secret": bytes(secret).hex() }
          , "public": { "claimed_x": cx.hex(), "claimed_y": cy.hex() }
          , "debug": { "nonce": nonce.hex(), "aggregate": ScalarField.to_bytes(agg, 'big').hex() }
          }

    if isinstance(checker.strategy, PoseidonNonce):
        (hi, lo) = PoseidonNonce.digest_halves(digest)
        out["public"]["message_digest"] = ["0x%032x" % hi, "0x%032x" % lo]
    else:
        out["public"]["message_digest"] = bytes(digest).hex()

    return out

def dump_witness(witness, fp=None):
    if fp is not None:
        json.dump(witness, fp, indent=4, sort_keys=True)
        return None
    return json.dumps(witness, indent=4, sort_keys=True)
