#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# print the witness for a secret and message digest

import argparse
import logging
import sys

from libdetnonce.nonce import ByteHashNonce, PoseidonNonce
import libdetnonce.util as util
from libdetnonce.witness import dump_witness, make_witness

def parse_args(argv):
    p = argparse.ArgumentParser(prog="detnonce-witness", description="Witness and public inputs for the deterministic nonce relation.")
    p.add_argument("secret", help="32-byte secret, big-endian hex")
    p.add_argument("digest", help="32-byte message digest, big-endian hex")
    p.add_argument("-v", action="store_true", help="log at DEBUG")
    p.add_argument("-p", action="store_true", help="Poseidon nonce instead of a byte hash")
    p.add_argument("-H", dest="hash_name", default=None, help="hashlib name for the byte hash (default sha256)")
    return p.parse_args(argv)

def main(argv):
    args = parse_args(argv)
    if args.v:
        logging.basicConfig(level=logging.DEBUG)

    try:
        secret = util.from_hex(args.secret)
        digest = util.from_hex(args.digest)
        if args.p:
            strategy = PoseidonNonce()
        else:
            strategy = ByteHashNonce(args.hash_name)
        print(dump_witness(make_witness(secret, digest, strategy)))
    except ValueError as e:
        print("ERROR: %s" % e)
        return 1

    return 0

def cli():
    return main(sys.argv[1:])

if __name__ == "__main__":
    sys.exit(cli())
