#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# libdetnoncetests runner

# hack: these tests live in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

import libdetnoncetests.scalars as scalars
import libdetnoncetests.points as points
import libdetnoncetests.ladder as ladder
import libdetnoncetests.tracing as tracing
import libdetnoncetests.nonces as nonces
import libdetnoncetests.relcheck as relcheck
import libdetnoncetests.witnessgen as witnessgen

DEFAULT_NUM_TESTS = 5

if len(sys.argv) > 1:
    try:
        num_tests = int(sys.argv[1])
    except ValueError:
        num_tests = DEFAULT_NUM_TESTS
else:
    num_tests = DEFAULT_NUM_TESTS

for thing in [scalars, points, ladder, tracing, nonces, relcheck, witnessgen]:
    thing.run_tests(num_tests)
