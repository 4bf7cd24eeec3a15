#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# test nonce derivation strategies and the Poseidon sponge

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

import hashlib
import random

from libdetnonce.defs import Defs
from libdetnonce.nonce import ByteHashNonce, NonceDerivation, PoseidonNonce, get_strategy
from libdetnonce.poseidon import BN254_R, Grain, Poseidon
import libdetnonce.util as util
from libdetnoncetests import oracle

def flip_bit(buf, bit):
    out = bytearray(buf)
    out[bit // 8] ^= 1 << (bit % 8)
    return bytes(out)

def run_one_test(strategy):
    secret = oracle.rand_secret()
    digest = Defs.gen_random_bytes()

    # determinism
    nonce = strategy.derive(secret, digest)
    assert len(nonce) == Defs.nbytes
    assert strategy.derive(secret, digest) == nonce
    assert strategy(secret, digest) == nonce

    # sensitivity, sampled bits of either input
    for _ in range(0, 4):
        bit = random.randint(0, 8 * Defs.nbytes - 1)
        assert strategy.derive(flip_bit(secret, bit), digest) != nonce
        assert strategy.derive(secret, flip_bit(digest, bit)) != nonce

def check_byte_hash():
    secret = oracle.rand_secret()
    nonce = ByteHashNonce().derive(secret, oracle.TEST_DIGEST)
    assert nonce == hashlib.sha256(secret + oracle.TEST_DIGEST).digest()
    assert ByteHashNonce('blake2s').derive(secret, oracle.TEST_DIGEST) == hashlib.blake2s(secret + oracle.TEST_DIGEST).digest()
    assert ByteHashNonce('sha3_256').derive(secret, oracle.TEST_DIGEST) != nonce

    for name in ('sha512', 'md5', 'no-such-hash'):
        try:
            ByteHashNonce(name)
        except ValueError:
            pass
        else:
            assert False, "accepted %s" % name

    try:
        ByteHashNonce().derive(secret[:31], oracle.TEST_DIGEST)
    except ValueError:
        pass
    else:
        assert False, "short secret accepted"

def check_poseidon_nonce():
    pn = PoseidonNonce()
    secret = oracle.rand_secret()
    digest = oracle.TEST_DIGEST

    # the digest may come as two 128-bit field elements
    halves = util.split_halves(digest)
    assert util.join_halves(*halves) == digest
    assert pn.derive(secret, halves) == pn.derive(secret, digest)

    nonce = pn.derive(secret, digest)
    assert util.be_to_num(nonce) < BN254_R
    (s_hi, s_lo) = util.split_halves(secret)
    assert util.be_to_num(nonce) == Poseidon().hash([s_hi, s_lo] + list(halves))

    # strategies disagree on the same inputs
    assert nonce != ByteHashNonce().derive(secret, digest)

    try:
        pn.derive(secret, (2 ** 128, 0))
    except ValueError:
        pass
    else:
        assert False, "oversized digest half accepted"

def check_poseidon():
    g = Grain(1, 0, 254, 5, 8, 60)
    assert len(g.state) == 80
    assert all( b in (0, 1) for b in g.state )
    assert 0 <= g.next_int(254) < 2 ** 254

    h = Poseidon()
    assert len(h.rc) == (h.R_F + h.R_P) * h.t
    assert all( 0 <= c < BN254_R for c in h.rc )
    assert len(h.mds) == h.t and all( len(row) == h.t for row in h.mds )
    assert all( m != 0 for row in h.mds for m in row )

    # parameters are generated once per parameter set
    assert Poseidon().rc is h.rc

    state = [ random.randint(0, BN254_R - 1) for _ in range(0, h.t) ]
    assert h.permute(state) == h.permute(list(state))
    assert h.permute(state) != state
    assert h.hash([1, 2, 3, 4]) != h.hash([1, 2, 4, 3])
    assert h.hash([1, 2, 3, 4]) == h.permute([0, 1, 2, 3, 4])[0]

    # known answers from circomlib's poseidon tests
    assert Poseidon(t=3, R_F=8, R_P=57).hash([1, 2]) == 0x115cc0f5e7d690413df64c6b9662e9cf2a3617f2743245519e19607a4417189a
    assert h.hash([1, 2, 3, 4]) == 0x299c867db6c1fdd79dcefa40e4510b9837e60ebb1ce0663dbaa525df65250465

    try:
        h.hash([BN254_R, 0, 0, 0])
    except ValueError:
        pass
    else:
        assert False, "non-field input accepted"

def check_interface():
    assert isinstance(get_strategy('bytes'), ByteHashNonce)
    assert isinstance(get_strategy('poseidon'), PoseidonNonce)
    try:
        get_strategy('nope')
    except ValueError:
        pass
    else:
        assert False, "unknown strategy accepted"

    try:
        NonceDerivation().derive(bytes(32), bytes(32))
    except NotImplementedError:
        pass
    else:
        assert False, "base class derived a nonce"

    # hashes are counted when a recorder is attached
    rec = Defs.FArith().new_cat("nonce")
    ByteHashNonce(rec=rec).derive(bytes(32), bytes(32))
    PoseidonNonce(rec=rec).derive(bytes(32), bytes(32))
    assert rec.get_counts()[5] == 2

def test_nonce_byte_hash():
    check_byte_hash()
    run_one_test(ByteHashNonce())

def test_nonce_poseidon():
    check_poseidon_nonce()
    run_one_test(PoseidonNonce())

def test_poseidon_params():
    check_poseidon()

def test_nonce_interface():
    check_interface()

def run_tests(num_tests):
    check_byte_hash()
    check_poseidon_nonce()
    check_poseidon()
    check_interface()
    strategies = (ByteHashNonce(), ByteHashNonce('blake2s'), PoseidonNonce())
    for _ in range(0, num_tests):
        run_one_test(random.choice(strategies))
        sys.stdout.write('.')
        sys.stdout.flush()

    print(" (nonce test passed)")

if __name__ == "__main__":
    nruns = 64
    if len(sys.argv) > 1:
        nruns = int(sys.argv[1])
    run_tests(nruns)
