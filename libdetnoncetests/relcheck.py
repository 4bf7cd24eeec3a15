#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# test the full nonce relation

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

import random

from libdetnonce.curve import Point
from libdetnonce.defs import Defs
from libdetnonce.nonce import ByteHashNonce, PoseidonNonce
from libdetnonce.relation import RelationChecker, check_relation
from libdetnonce.scalar import Scalar, ScalarField
from libdetnonce.scalarmul import mul_g
import libdetnonce.util as util
from libdetnoncetests import oracle

def perturb(buf):
    out = bytearray(buf)
    idx = random.randint(0, len(out) - 1)
    out[idx] ^= random.randint(1, 255)
    return bytes(out)

def run_one_test():
    secret = oracle.rand_secret()
    digest = Defs.gen_random_bytes()
    checker = RelationChecker()

    # claimed point from the independent reference
    agg = oracle.sha256_aggregate(secret, digest)
    assert checker.aggregate_scalar(secret, digest) == Scalar(agg)
    (cx, cy) = oracle.mul_g(agg).to_le_bytes()

    assert checker.check(secret, digest, cx, cy)
    assert check_relation(secret, digest, cx, cy)

    # any single-byte change fails, with or without the curve check
    for check_claimed in (True, False):
        Defs.check_claimed = check_claimed
        try:
            assert not checker.check(secret, digest, perturb(cx), cy)
            assert not checker.check(secret, digest, cx, perturb(cy))
            assert not checker.check(perturb(secret), digest, cx, cy)
            assert not checker.check(secret, perturb(digest), cx, cy)
        finally:
            Defs.check_claimed = True

    # a valid point that is not the aggregate still fails
    (nx, ny) = Point.from_le_bytes(cx, cy).negate().to_le_bytes()
    assert not checker.check(secret, digest, nx, ny)

def check_strategies():
    secret = oracle.rand_secret()
    digest = oracle.TEST_DIGEST
    bcheck = RelationChecker(ByteHashNonce())
    pcheck = RelationChecker('poseidon')

    assert bcheck.nonce(secret, digest) != pcheck.nonce(secret, digest)
    bpoint = bcheck.aggregate_point(secret, digest)
    ppoint = pcheck.aggregate_point(secret, digest)
    assert bpoint != ppoint

    assert bcheck.check(secret, digest, *bpoint.to_le_bytes())
    assert pcheck.check(secret, digest, *ppoint.to_le_bytes())
    assert not bcheck.check(secret, digest, *ppoint.to_le_bytes())
    assert not pcheck.check(secret, digest, *bpoint.to_le_bytes())

    # Poseidon aggregate is secret + nonce mod n as well
    sf = ScalarField()
    nonce = PoseidonNonce().derive(secret, digest)
    expect = sf.add(sf.from_bytes(secret), sf.from_bytes(nonce))
    assert pcheck.aggregate_scalar(secret, digest) == expect
    assert ppoint == mul_g(expect)
    assert ppoint == oracle.mul_g(expect.value)

def check_claimed_point():
    secret = oracle.rand_secret()
    digest = oracle.TEST_DIGEST
    checker = RelationChecker()
    (cx, cy) = checker.aggregate_point(secret, digest).to_le_bytes()

    # off-curve and out-of-range coordinates fail rather than raise
    assert not checker.check(secret, digest, cx, util.num_to_le((util.le_to_num(cy) + 1) % Defs.prime))
    assert not checker.check(secret, digest, util.num_to_le(Defs.prime), cy)
    assert not checker.check(secret, digest, bytes(32), bytes(32))

    try:
        checker.check(secret, digest, cx[:31], cy)
    except ValueError:
        pass
    else:
        assert False, "short coordinate accepted"

    # all-zero claims are the identity, the result for a zero aggregate
    assert Point.from_le_bytes(bytes(32), bytes(32)) == mul_g(Scalar(0))

def check_batch():
    checker = RelationChecker()
    items = []
    expect = []
    for _ in range(0, 4):
        secret = oracle.rand_secret()
        digest = Defs.gen_random_bytes()
        (cx, cy) = oracle.mul_g(oracle.sha256_aggregate(secret, digest)).to_le_bytes()
        good = random.choice((True, False))
        if not good:
            cx = perturb(cx)
        items.append((secret, digest, cx, cy))
        expect.append(good)
    assert checker.check_all(items) == expect

def check_recording():
    rec = Defs.FArith().new_cat("relation")
    checker = RelationChecker(ByteHashNonce(rec=rec), rec)
    secret = oracle.rand_secret()
    checker.aggregate_point(secret, oracle.TEST_DIGEST)
    (add, mul, sub, inv, sel, hsh) = rec.get_counts()
    assert hsh == 1
    assert sel == 4 * Defs.nbits
    assert add >= 1

def test_relation_random():
    for _ in range(0, 4):
        run_one_test()

def test_relation_strategies():
    check_strategies()

def test_relation_claimed_point():
    check_claimed_point()

def test_relation_batch():
    check_batch()

def test_relation_recording():
    check_recording()

def run_tests(num_tests):
    check_strategies()
    check_claimed_point()
    check_batch()
    check_recording()
    for _ in range(0, num_tests):
        run_one_test()
        sys.stdout.write('.')
        sys.stdout.flush()

    print(" (relation test passed)")

if __name__ == "__main__":
    nruns = 32
    if len(sys.argv) > 1:
        nruns = int(sys.argv[1])
    run_tests(nruns)
