#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# Defs for the nonce relation: curve constants, knobs, op counting

import random

class Defs(object):
    # secp256k1: y^2 = x^3 + 7 over GF(prime), group of prime order
    prime = 2 ** 256 - 2 ** 32 - 977
    order = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    curve_b = 7

    # generator, 32-byte little-endian coordinates
    gx_le = (0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798).to_bytes(32, 'little')
    gy_le = (0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8).to_bytes(32, 'little')

    nbytes = 32
    nbits = 256
    rand = None

    byte_hash = 'sha256'
    canonical = 'reject'
    check_claimed = True

    _fArith = None
    track_fArith = False

    @classmethod
    def fArith(cls):
        if Defs.track_fArith:
            if cls._fArith is None:
                cls._fArith = cls.FArith()
            return cls._fArith
        return None

    @classmethod
    def reset_fArith(cls):
        cls._fArith = None

    @classmethod
    def gen_random(cls):
        if cls.rand is None:
            cls.rand = random.SystemRandom()

        # random nonzero scalar
        return cls.rand.randint(1, cls.order - 1)

    @classmethod
    def gen_random_bytes(cls, nbytes=None):
        if cls.rand is None:
            cls.rand = random.SystemRandom()

        if nbytes is None:
            nbytes = cls.nbytes
        return bytes( cls.rand.randint(0, 255) for _ in range(0, nbytes) )

    class FArith(object):
        def __init__(self):
            self.add_count = {}
            self.mul_count = {}
            self.sub_count = {}

            self.inv_count = {}
            self.sel_count = {}
            self.hash_count = {}

            self.cats = {}

        def __str__(self):
            oStr = ""
            for cat in self.cats:
                oStr += cat + ' ' + str(self.cats[cat]) + '\n'

            totals = [0, 0, 0, 0, 0, 0]
            for (idx, count) in enumerate((self.add_count, self.mul_count, self.sub_count, self.inv_count, self.sel_count, self.hash_count)):
                for c in count:
                    totals[idx] += count[c]

            oStr += "Totals: add: %d  mul: %d  sub: %d  inv: %d  sel: %d  hash: %d" % tuple(totals)
            return oStr

        def new_cat(self, cat):
            if cat in self.cats:
                return self.cats[cat]

            ncat = self._FArithCat(self, cat)
            self.cats[cat] = ncat
            return ncat

        class _FArithCat(object):
            def __init__(self, parent, cat):
                self.parent = parent
                self.cat = cat

            def __str__(self):
                return "add: %d  mul: %d  sub: %d  inv: %d  sel: %d  hash: %d" % self.get_counts()

            def get_counts(self):
                add = self.parent.add_count.get(self.cat, 0)
                mul = self.parent.mul_count.get(self.cat, 0)
                sub = self.parent.sub_count.get(self.cat, 0)
                inv = self.parent.inv_count.get(self.cat, 0)
                sel = self.parent.sel_count.get(self.cat, 0)
                hsh = self.parent.hash_count.get(self.cat, 0)
                return (add, mul, sub, inv, sel, hsh)

            def did_add(self, n=1):
                self.parent.add_count[self.cat] = self.parent.add_count.get(self.cat, 0) + n

            def did_mul(self, n=1):
                self.parent.mul_count[self.cat] = self.parent.mul_count.get(self.cat, 0) + n

            def did_sub(self, n=1):
                self.parent.sub_count[self.cat] = self.parent.sub_count.get(self.cat, 0) + n

            def did_inv(self, n=1):
                self.parent.inv_count[self.cat] = self.parent.inv_count.get(self.cat, 0) + n

            def did_sel(self, n=1):
                self.parent.sel_count[self.cat] = self.parent.sel_count.get(self.cat, 0) + n

            def did_hash(self, n=1):
                self.parent.hash_count[self.cat] = self.parent.hash_count.get(self.cat, 0) + n
