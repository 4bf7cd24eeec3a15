#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# test fixed-length scalar multiplication

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

import random

from libdetnonce.curve import Point, add_point
from libdetnonce.defs import Defs
from libdetnonce.scalar import Scalar
from libdetnonce.scalarmul import mul_g
from libdetnoncetests import oracle

def op_counts(k):
    rec = Defs.FArith().new_cat("mul_g")
    mul_g(Scalar(k), rec)
    return rec.get_counts()

def run_one_test():
    k = Defs.gen_random()
    assert mul_g(Scalar(k)) == oracle.mul_g(k)

    # group law: (a + b) G == aG + bG with a + b < n
    a = random.randint(1, Defs.order // 2)
    b = random.randint(1, Defs.order // 2)
    if a == b:
        b -= 1
    assert mul_g(Scalar(a + b)) == add_point(mul_g(Scalar(a)), mul_g(Scalar(b)))

def check_edges():
    G = Point.generator()
    assert mul_g(Scalar(0)) == Point.IDENTITY
    assert mul_g(Scalar(1)) == G
    assert mul_g(2) == oracle.mul_g(2)
    assert (mul_g(3).x, mul_g(3).y) == oracle.G3
    assert mul_g(Scalar(Defs.order - 1)) == G.negate()
    assert mul_g(Scalar(2 ** 255)) == oracle.mul_g(2 ** 255)

    # the discarded candidate sum at bit 255 is acc + (-acc) here
    k = Defs.order - 2 ** 255
    assert mul_g(Scalar(k)) == oracle.mul_g(k)

def check_fixed_shape():
    base = op_counts(1)
    (add, mul, sub, inv, sel, _) = base
    assert sel == 4 * Defs.nbits
    assert inv == 2 * Defs.nbits
    for k in (0, 2, 2 ** 255, Defs.order - 1, Defs.order - 2 ** 255, Defs.gen_random()):
        assert op_counts(k) == base, "op counts depend on the scalar"

    # global tracking gives the same numbers
    Defs.track_fArith = True
    try:
        Defs.reset_fArith()
        mul_g(Scalar(Defs.gen_random()))
        assert Defs.fArith().cats["mul_g"].get_counts() == base
        assert "Totals:" in str(Defs.fArith())
    finally:
        Defs.track_fArith = False
        Defs.reset_fArith()

def test_ladder_random():
    for _ in range(0, 4):
        run_one_test()

def test_ladder_edges():
    check_edges()

def test_ladder_fixed_shape():
    check_fixed_shape()

def run_tests(num_tests):
    check_edges()
    check_fixed_shape()
    for _ in range(0, num_tests):
        run_one_test()
        sys.stdout.write('.')
        sys.stdout.flush()

    print(" (ladder test passed)")

if __name__ == "__main__":
    nruns = 32
    if len(sys.argv) > 1:
        nruns = int(sys.argv[1])
    run_tests(nruns)
