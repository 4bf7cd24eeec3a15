#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# deterministic nonce derivation: nonce = H(secret, digest)

import hashlib

from libdetnonce.defs import Defs
from libdetnonce.poseidon import BN254_R, Poseidon
import libdetnonce.util as util

class NonceDerivation(object):
    name = None

    def __init__(self, rec=None):
        self.rec = rec

    # secret is 32 bytes big-endian; returns a 32-byte big-endian nonce
    def derive(self, secret, digest):
        raise NotImplementedError

    def __call__(self, secret, digest):
        return self.derive(secret, digest)

class ByteHashNonce(NonceDerivation):
    name = 'bytes'

    def __init__(self, hash_name=None, rec=None):
        super(ByteHashNonce, self).__init__(rec)
        if hash_name is None:
            hash_name = Defs.byte_hash

        if hash_name not in hashlib.algorithms_available or hashlib.new(hash_name).digest_size != Defs.nbytes:
            raise ValueError("%s is not a %d-byte hashlib digest" % (hash_name, Defs.nbytes))
        self.hash_name = hash_name

    def derive(self, secret, digest):
        buf = util.check_len(secret) + util.check_len(digest)
        if self.rec is not None:
            self.rec.did_hash()
        return hashlib.new(self.hash_name, buf).digest()

class PoseidonNonce(NonceDerivation):
    name = 'poseidon'

    def __init__(self, rec=None):
        super(PoseidonNonce, self).__init__(rec)
        self.hasher = Poseidon()

    # digest is 32 bytes or (hi, lo) 128-bit field elements
    @staticmethod
    def digest_halves(digest):
        if isinstance(digest, (tuple, list)):
            assert len(digest) == 2, "digest halves must be a (hi, lo) pair"
            (hi, lo) = digest
            if not (0 <= hi < 2 ** util.HALF_BITS and 0 <= lo < 2 ** util.HALF_BITS):
                raise ValueError("digest halves must be 128-bit values")
            return (hi, lo)
        return util.split_halves(digest)

    def derive(self, secret, digest):
        (s_hi, s_lo) = util.split_halves(secret)
        (m_hi, m_lo) = self.digest_halves(digest)
        if self.rec is not None:
            self.rec.did_hash()
        out = self.hasher.hash([s_hi, s_lo, m_hi, m_lo])
        assert out < BN254_R
        return util.num_to_be(out)

_strategies = {
    ByteHashNonce.name: ByteHashNonce,
    PoseidonNonce.name: PoseidonNonce,
}

def get_strategy(name, **kwargs):
    if name not in _strategies:
        raise ValueError("unknown nonce strategy %s" % name)
    return _strategies[name](**kwargs)
