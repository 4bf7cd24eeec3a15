#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# prime field arithmetic on plain integers
#
# curve.py and scalarmul.py only talk to a field through add, sub, mul,
# div, div0, select, and const, so the same formulas run here or on
# trace wires (see trace.py)

from libdetnonce.defs import Defs
import libdetnonce.util as util

class DegenerateInputError(ArithmeticError):
    pass

class PrimeField(object):
    def __init__(self, q=None, rec=None):
        if q is None:
            q = Defs.prime
        self.q = q
        self.rec = rec

    def const(self, val):
        return val % self.q

    def add(self, x, y):
        if self.rec is not None:
            self.rec.did_add()
        return (x + y) % self.q

    def sub(self, x, y):
        if self.rec is not None:
            self.rec.did_sub()
        return (x - y) % self.q

    def mul(self, x, y):
        if self.rec is not None:
            self.rec.did_mul()
        return (x * y) % self.q

    def inv(self, x):
        if x % self.q == 0:
            raise DegenerateInputError("inverse of zero mod %d" % self.q)
        return util.invert_modp(x, self.q, self.rec)

    def div(self, x, y):
        return self.mul(x, self.inv(y))

    # zero divisor gives zero; only for values that get discarded by a select
    def div0(self, x, y):
        if y % self.q == 0:
            if self.rec is not None:
                self.rec.did_inv()
                self.rec.did_mul()
            return 0
        return self.div(x, y)

    # c must be 0 or 1
    def select(self, c, a, b):
        assert c in (0, 1), "selector must be a bit"
        if self.rec is not None:
            self.rec.did_sel()
        return (b + c * (a - b)) % self.q

    def neg(self, x):
        return self.sub(0, x)
