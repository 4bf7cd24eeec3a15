#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# affine points on secp256k1

from libdetnonce.defs import Defs
from libdetnonce.field import DegenerateInputError, PrimeField
from libdetnonce.scalar import NonCanonicalError
import libdetnonce.util as util

## field-generic formulas, shared by Point and the ladder

# s = 3x^2 / 2y, x' = s^2 - 2x, y' = s(x - x') - y
def affine_double(F, x, y):
    s = F.div(F.mul(F.const(3), F.mul(x, x)), F.mul(F.const(2), y))
    xo = F.sub(F.mul(s, s), F.mul(F.const(2), x))
    yo = F.sub(F.mul(s, F.sub(x, xo)), y)
    return (xo, yo)

# s = (y0 - y1) / (x0 - x1), x' = s^2 - x0 - x1, y' = s(x0 - x') - y0
def affine_add(F, x0, y0, x1, y1, div=None):
    if div is None:
        div = F.div
    s = div(F.sub(y0, y1), F.sub(x0, x1))
    xo = F.sub(F.sub(F.mul(s, s), x0), x1)
    yo = F.sub(F.mul(s, F.sub(x0, xo)), y0)
    return (xo, yo)

class Point(object):
    IDENTITY = None

    # Point() is the identity, Point(x, y) is affine
    def __init__(self, x=None, y=None):
        assert (x is None) == (y is None), "need both coordinates or neither"
        if x is not None:
            assert 0 <= x < Defs.prime and 0 <= y < Defs.prime, "coordinate out of range"
        self.x = x
        self.y = y

    @property
    def is_identity(self):
        return self.x is None

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        ret = self.__eq__(other)
        if ret is NotImplemented:
            return ret
        return not ret

    def __hash__(self):
        return hash(('Point', self.x, self.y))

    def __repr__(self):
        if self.is_identity:
            return "Point(IDENTITY)"
        return "Point(0x%064x, 0x%064x)" % (self.x, self.y)

    @classmethod
    def generator(cls):
        return cls(util.le_to_num(Defs.gx_le), util.le_to_num(Defs.gy_le))

    def on_curve(self):
        if self.is_identity:
            return True
        F = PrimeField()
        lhs = F.mul(self.y, self.y)
        rhs = F.add(F.mul(F.mul(self.x, self.x), self.x), Defs.curve_b)
        return lhs == rhs

    def negate(self):
        if self.is_identity:
            return self
        return Point(self.x, PrimeField().neg(self.y))

    # all-zero coordinates encode the identity
    @classmethod
    def from_le_bytes(cls, xbuf, ybuf):
        x = util.le_to_num(xbuf)
        y = util.le_to_num(ybuf)
        if x == 0 and y == 0:
            return cls.IDENTITY
        if x >= Defs.prime or y >= Defs.prime:
            raise NonCanonicalError("point coordinate is not below the field prime")
        return cls(x, y)

    def to_le_bytes(self):
        if self.is_identity:
            return (bytes(Defs.nbytes), bytes(Defs.nbytes))
        return (util.num_to_le(self.x), util.num_to_le(self.y))

Point.IDENTITY = Point()

def double_point(P, F=None):
    if P.is_identity:
        return P
    if F is None:
        F = PrimeField()
    if P.y == 0:
        raise DegenerateInputError("cannot double a point with y = 0")
    return Point(*affine_double(F, P.x, P.y))

def add_point(P, Q, F=None):
    if P.is_identity:
        return Q
    if Q.is_identity:
        return P
    if F is None:
        F = PrimeField()
    if P.x == Q.x:
        if P.y == Q.y:
            raise DegenerateInputError("add_point got equal points, use double_point")
        raise DegenerateInputError("add_point got a point and its negation")
    return Point(*affine_add(F, P.x, P.y, Q.x, Q.y))
