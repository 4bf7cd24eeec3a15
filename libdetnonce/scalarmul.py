#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# fixed-length double-and-add over the generator

from libdetnonce.curve import Point, affine_add, affine_double
from libdetnonce.defs import Defs
from libdetnonce.field import PrimeField
from libdetnonce.scalar import Scalar, ScalarField

# lsb-first double-and-add. Every iteration does one candidate add, four
# selects, one flag update, and one doubling, whatever the bits are, so
# the sequence of field ops depends only on len(bits).
#
# The accumulator starts as the (0, 0) sentinel with acc_id = 1. While
# acc_id is set, a set bit takes the addend as is; the candidate sum
# against the sentinel is computed and thrown away. Candidate sums use
# div0 because a discarded one may be degenerate (acc == -addend).
def ladder(F, bits, bx, by):
    one = F.const(1)
    accx = F.const(0)
    accy = F.const(0)
    acc_id = one
    (dx, dy) = (bx, by)

    for bit in bits:
        (sx, sy) = affine_add(F, accx, accy, dx, dy, F.div0)
        nx = F.select(acc_id, dx, sx)
        ny = F.select(acc_id, dy, sy)
        accx = F.select(bit, nx, accx)
        accy = F.select(bit, ny, accy)
        acc_id = F.mul(acc_id, F.sub(one, bit))
        (dx, dy) = affine_double(F, dx, dy)

    return (accx, accy, acc_id)

def mul_g(scalar, rec=None):
    if not isinstance(scalar, Scalar):
        scalar = ScalarField.from_int(scalar)

    if rec is None and Defs.fArith() is not None:
        rec = Defs.fArith().new_cat("mul_g")

    G = Point.generator()
    F = PrimeField(Defs.prime, rec)
    (x, y, is_id) = ladder(F, scalar.bits(), G.x, G.y)

    if is_id:
        return Point.IDENTITY
    return Point(x, y)
