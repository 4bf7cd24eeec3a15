#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# test field and point arithmetic

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

import random

from libdetnonce.curve import Point, add_point, double_point
from libdetnonce.defs import Defs
from libdetnonce.field import DegenerateInputError, PrimeField
from libdetnonce.scalar import NonCanonicalError
import libdetnonce.util as util
from libdetnoncetests import oracle

def expect_degenerate(f, *args):
    try:
        f(*args)
    except DegenerateInputError:
        return
    assert False, "expected DegenerateInputError"

def run_one_test():
    F = PrimeField()
    x = random.randint(1, Defs.prime - 1)
    y = random.randint(0, Defs.prime - 1)

    assert F.add(x, y) == (x + y) % Defs.prime
    assert F.sub(x, y) == (x - y) % Defs.prime
    assert F.mul(x, y) == (x * y) % Defs.prime
    assert F.mul(F.div(y, x), x) == y
    assert F.div0(y, x) == F.div(y, x)
    assert F.select(1, x, y) == x
    assert F.select(0, x, y) == y
    assert F.add(x, F.neg(x)) == 0

    # doubling agrees with the reference for random on-curve points
    k = random.randint(2, 2 ** 64)
    P = oracle.mul_g(k)
    assert P.on_curve()
    assert double_point(P) == oracle.mul_g(2 * k)
    assert add_point(P, Point.generator()) == oracle.mul_g(k + 1)

def check_small_multiples():
    G = Point.generator()
    assert G.on_curve()
    G2 = double_point(G)
    G3 = add_point(G2, G)
    assert (G2.x, G2.y) == oracle.G2
    assert (G3.x, G3.y) == oracle.G3
    assert add_point(G, G2) == G3
    assert double_point(G2) == add_point(G3, G)

def check_identity():
    G = Point.generator()
    I = Point.IDENTITY
    assert I.is_identity and not G.is_identity
    assert I == Point()
    assert add_point(I, G) == G
    assert add_point(G, I) == G
    assert add_point(I, I) == I
    assert double_point(I) == I
    assert I.on_curve()
    assert I.negate() == I

    # all-zero coordinates are the identity on the wire
    zero = bytes(32)
    assert Point.from_le_bytes(zero, zero) == I
    assert I.to_le_bytes() == (zero, zero)

def check_degenerate():
    G = Point.generator()
    F = PrimeField()
    expect_degenerate(F.div, 1, 0)
    expect_degenerate(F.inv, Defs.prime)
    assert F.div0(1, 0) == 0

    expect_degenerate(add_point, G, G)
    expect_degenerate(add_point, G, G.negate())
    expect_degenerate(double_point, Point(5, 0))

def check_codec():
    G = Point.generator()
    (xb, yb) = G.to_le_bytes()
    assert xb == Defs.gx_le and yb == Defs.gy_le
    assert Point.from_le_bytes(xb, yb) == G
    assert util.le_to_num(xb) == 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798

    try:
        Point.from_le_bytes(util.num_to_le(Defs.prime), yb)
    except NonCanonicalError:
        pass
    else:
        assert False, "coordinate >= p accepted"

    assert not Point(G.x, (G.y + 1) % Defs.prime).on_curve()
    assert G.negate().on_curve()
    assert G.negate() != G

def test_point_random():
    for _ in range(0, 8):
        run_one_test()

def test_point_small_multiples():
    check_small_multiples()

def test_point_identity():
    check_identity()

def test_point_degenerate():
    check_degenerate()

def test_point_codec():
    check_codec()

def run_tests(num_tests):
    check_small_multiples()
    check_identity()
    check_degenerate()
    check_codec()
    for _ in range(0, num_tests):
        run_one_test()
        sys.stdout.write('.')
        sys.stdout.flush()

    print(" (point test passed)")

if __name__ == "__main__":
    nruns = 128
    if len(sys.argv) > 1:
        nruns = int(sys.argv[1])
    run_tests(nruns)
