#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# Utilities

from libdetnonce.defs import Defs

# lsb-to-msb order
def numToBin(val, bits):
    out = []
    for _ in range(0, bits):
        if val & 1:
            out.append(1)
        else:
            out.append(0)
        val = val >> 1
    return out

def binToNum(bits):
    out = 0
    for bit in reversed(bits):
        out = (out << 1) | (1 if bit else 0)
    return out

def invert_modp(val, prime=None, rec=None):
    if prime is None:
        prime = Defs.prime

    s  = t_ = 0
    s_ = t  = 1
    r  = val % prime
    r_ = prime

    while r != 0:
        q = r_ // r
        (r_, r) = (r, r_ - q * r)
        (s_, s) = (s, s_ - q * s)
        (t_, t) = (t, t_ - q * t)

    if rec is not None:
        rec.did_inv()

    return t_ % prime

## byte order
# the wire carries big-endian secrets and digests; scalars and point
# coordinates are little-endian internally

def check_len(buf, nbytes=None):
    if nbytes is None:
        nbytes = Defs.nbytes
    if len(buf) != nbytes:
        raise ValueError("expected %d bytes, got %d" % (nbytes, len(buf)))
    return bytes(buf)

def swap_order(buf):
    return bytes(reversed(bytes(buf)))

def le_to_num(buf):
    return int.from_bytes(check_len(buf), 'little')

def num_to_le(val, nbytes=None):
    if nbytes is None:
        nbytes = Defs.nbytes
    return val.to_bytes(nbytes, 'little')

def be_to_num(buf):
    return le_to_num(swap_order(check_len(buf)))

def num_to_be(val, nbytes=None):
    return swap_order(num_to_le(val, nbytes))

def from_hex(hstr, nbytes=None):
    if hstr.startswith(('0x', '0X')):
        hstr = hstr[2:]
    return check_len(bytes.fromhex(hstr), nbytes)

## 128-bit halves, high half first

HALF_BITS = 128

def split_halves(buf):
    val = be_to_num(buf)
    return (val >> HALF_BITS, val & (2 ** HALF_BITS - 1))

def join_halves(hi, lo):
    assert 0 <= hi < 2 ** HALF_BITS and 0 <= lo < 2 ** HALF_BITS, "halves must be 128-bit values"
    return num_to_be((hi << HALF_BITS) | lo)

def flatten_iter(vals):
    for i in vals:
        if isinstance(i, (list,tuple)):
            for j in flatten_iter(i):
                yield j
        else:
            yield i

def flatten(vals):
    return list(flatten_iter(vals))
