#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# test witness generation and the command line front-end

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

import contextlib
import io
import json

from libdetnonce.__main__ import main
from libdetnonce.defs import Defs
from libdetnonce.nonce import ByteHashNonce, PoseidonNonce
from libdetnonce.relation import RelationChecker
import libdetnonce.util as util
from libdetnonce.witness import dump_witness, make_witness
from libdetnoncetests import oracle

def run_one_test(strategy=None):
    secret = oracle.rand_secret()
    digest = oracle.TEST_DIGEST
    wit = json.loads(dump_witness(make_witness(secret, digest, strategy)))

    assert wit["private"]["secret"] == secret.hex()
    cx = bytes.fromhex(wit["public"]["claimed_x"])
    cy = bytes.fromhex(wit["public"]["claimed_y"])
    assert RelationChecker(strategy).check(secret, digest, cx, cy)
    return wit

def check_strategies():
    wit = run_one_test()
    assert wit["strategy"] == 'bytes'
    assert wit["public"]["message_digest"] == oracle.TEST_DIGEST.hex()
    agg = int(wit["debug"]["aggregate"], 16)
    (cx, cy) = oracle.mul_g(agg).to_le_bytes()
    assert wit["public"]["claimed_x"] == cx.hex()
    assert wit["public"]["claimed_y"] == cy.hex()

    wit = run_one_test(PoseidonNonce())
    assert wit["strategy"] == 'poseidon'
    (hi, lo) = [ int(h, 16) for h in wit["public"]["message_digest"] ]
    assert util.join_halves(hi, lo) == oracle.TEST_DIGEST

    # the nonce is derived once per witness
    rec = Defs.FArith().new_cat("witness")
    wit = make_witness(oracle.rand_secret(), oracle.TEST_DIGEST, ByteHashNonce(rec=rec))
    assert rec.get_counts()[5] == 1
    assert wit["debug"]["nonce"] == ByteHashNonce().derive(bytes.fromhex(wit["private"]["secret"]), oracle.TEST_DIGEST).hex()

    buf = io.StringIO()
    assert dump_witness(make_witness(oracle.rand_secret(), oracle.TEST_DIGEST), buf) is None
    assert "claimed_x" in json.loads(buf.getvalue())["public"]

def run_cli(args):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        ret = main(args)
    return (ret, out.getvalue())

def check_cli():
    secret = oracle.rand_secret()
    (ret, out) = run_cli([secret.hex(), "0x" + oracle.TEST_DIGEST.hex()])
    assert ret == 0
    wit = json.loads(out)
    assert wit == make_witness(secret, oracle.TEST_DIGEST)

    (ret, out) = run_cli(["-p", secret.hex(), oracle.TEST_DIGEST.hex()])
    assert ret == 0 and json.loads(out)["strategy"] == 'poseidon'

    (ret, out) = run_cli(["-H", "blake2s", secret.hex(), oracle.TEST_DIGEST.hex()])
    assert ret == 0

    for bad in (["zz", oracle.TEST_DIGEST.hex()], ["-H", "md5", secret.hex(), oracle.TEST_DIGEST.hex()]):
        (ret, out) = run_cli(bad)
        assert ret == 1
        assert "ERROR" in out

    # argparse rejects malformed command lines with exit status 2
    for bad in ([secret.hex()], ["-x", secret.hex(), oracle.TEST_DIGEST.hex()]):
        err = io.StringIO()
        try:
            with contextlib.redirect_stderr(err):
                run_cli(bad)
        except SystemExit as e:
            assert e.code == 2
            assert "usage" in err.getvalue()
        else:
            assert False, "malformed command line accepted"

def test_witness_strategies():
    check_strategies()

def test_witness_cli():
    check_cli()

def run_tests(num_tests):
    check_strategies()
    check_cli()
    for _ in range(0, num_tests):
        run_one_test()
        sys.stdout.write('.')
        sys.stdout.flush()

    print(" (witness test passed)")

if __name__ == "__main__":
    nruns = 16
    if len(sys.argv) > 1:
        nruns = int(sys.argv[1])
    run_tests(nruns)
