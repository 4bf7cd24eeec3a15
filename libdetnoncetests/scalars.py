#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# test scalar field and byte order

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

from libdetnonce.defs import Defs
from libdetnonce.scalar import NonCanonicalError, Scalar, ScalarField
import libdetnonce.util as util

def run_one_test():
    sf = ScalarField()
    a = Defs.gen_random()
    b = Defs.gen_random()

    # big-endian wire bytes are the reverse of the internal encoding
    abuf = a.to_bytes(32, 'big')
    assert sf.from_bytes(abuf, 'big') == Scalar(a)
    assert sf.from_bytes(util.swap_order(abuf), 'little') == Scalar(a)
    assert sf.to_bytes(Scalar(a), 'big') == abuf
    assert sf.to_bytes(Scalar(a), 'little') == util.swap_order(abuf)

    # add reduces mod n
    assert sf.add(Scalar(a), Scalar(b)) == Scalar((a + b) % Defs.order)
    assert sf.add(Scalar(a), Scalar(0)) == Scalar(a)
    assert sf.add(Scalar(a), Scalar(Defs.order - a)) == Scalar(0)

    # canonical input: reject and reduce agree
    assert sf.from_bytes(abuf, 'big', 'reject') == sf.from_bytes(abuf, 'big', 'reduce')

    # bits are lsb first
    bits = Scalar(a).bits()
    assert len(bits) == Defs.nbits
    assert util.binToNum(bits) == a

def check_noncanonical():
    sf = ScalarField()
    for val in (Defs.order, Defs.order + 1, 2 ** 256 - 1):
        buf = val.to_bytes(32, 'big')
        try:
            sf.from_bytes(buf, 'big', 'reject')
        except NonCanonicalError:
            pass
        else:
            assert False, "non-canonical scalar accepted in reject mode"
        assert sf.from_bytes(buf, 'big', 'reduce') == Scalar(val % Defs.order)

    # reject is the default
    assert Defs.canonical == 'reject'
    try:
        sf.from_bytes(Defs.order.to_bytes(32, 'big'))
    except NonCanonicalError:
        pass
    else:
        assert False, "default mode should reject"

    # the largest canonical value passes both modes
    top = (Defs.order - 1).to_bytes(32, 'big')
    assert sf.from_bytes(top, 'big', 'reject') == sf.from_bytes(top, 'big', 'reduce') == Scalar(Defs.order - 1)

def check_byte_order():
    sf = ScalarField()
    one_be = bytes(31) + b'\x01'
    assert sf.from_bytes(one_be, 'big') == Scalar(1)
    assert sf.from_bytes(one_be, 'little') == Scalar(2 ** 248)
    assert Scalar(1).bits()[0] == 1 and sum(Scalar(1).bits()) == 1
    assert Scalar(2 ** 8).bits()[8] == 1

    for buf in (bytes(31), bytes(33)):
        try:
            sf.from_bytes(buf)
        except ValueError:
            pass
        else:
            assert False, "wrong-length buffer accepted"

    try:
        sf.from_bytes(one_be, 'middle')
    except ValueError:
        pass
    else:
        assert False, "bad byteorder accepted"

def check_equality():
    assert Scalar(5) == Scalar(5)
    assert Scalar(5) != Scalar(6)
    assert Scalar(5) != 5
    assert len(set([Scalar(5), Scalar(5), Scalar(7)])) == 2

def test_scalar_random():
    for _ in range(0, 16):
        run_one_test()

def test_scalar_noncanonical():
    check_noncanonical()

def test_scalar_byte_order():
    check_byte_order()

def test_scalar_equality():
    check_equality()

def run_tests(num_tests):
    check_noncanonical()
    check_byte_order()
    check_equality()
    for _ in range(0, num_tests):
        run_one_test()
        sys.stdout.write('.')
        sys.stdout.flush()

    print(" (scalar test passed)")

if __name__ == "__main__":
    nruns = 128
    if len(sys.argv) > 1:
        nruns = int(sys.argv[1])
    run_tests(nruns)
