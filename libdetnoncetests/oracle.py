#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# independent secp256k1 reference for tests

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

import hashlib

from cryptography.hazmat.primitives.asymmetric import ec

from libdetnonce.curve import Point
from libdetnonce.defs import Defs

# well-known multiples of G, big-endian hex
G2 = ( 0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5
     , 0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A )
G3 = ( 0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9
     , 0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672 )

# SHA-256("test")
TEST_DIGEST = bytes.fromhex("9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08")

def mul_g(k):
    k %= Defs.order
    if k == 0:
        return Point.IDENTITY
    nums = ec.derive_private_key(k, ec.SECP256K1()).public_key().public_numbers()
    return Point(nums.x, nums.y)

# aggregate scalar for the sha256 byte strategy, computed without libdetnonce
def sha256_aggregate(secret, digest):
    nonce = hashlib.sha256(secret + digest).digest()
    return (int.from_bytes(secret, 'big') + int.from_bytes(nonce, 'big')) % Defs.order

def rand_secret():
    return Defs.gen_random().to_bytes(32, 'big')
