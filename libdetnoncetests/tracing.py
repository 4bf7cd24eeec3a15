#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# test that the recorded trace replays to the direct computation

# hack: this test lives in a subdir
try:
    import sys
    import os.path
except:
    assert False
else:
    sys.path.insert(1, os.path.abspath(os.path.join(sys.path[0], os.pardir)))

from libdetnonce.curve import Point
from libdetnonce.defs import Defs
from libdetnonce.field import DegenerateInputError
from libdetnonce.scalar import Scalar
from libdetnonce.scalarmul import mul_g
import libdetnonce.trace as trace

_traces = {}

def get_trace(name):
    if name not in _traces:
        if name == 'mul_g':
            _traces[name] = trace.build_mul_g_trace()
        else:
            _traces[name] = trace.build_relation_trace()
    return _traces[name]

def run_one_test(k=None):
    if k is None:
        k = Defs.gen_random()
    T = get_trace('mul_g')
    shape = T.shape()

    direct = mul_g(Scalar(k))
    assert trace.run_mul_g_trace(T, Scalar(k)) == direct
    assert T.shape() == shape

    # replaying counts exactly the ops the direct run does
    drec = Defs.FArith().new_cat("direct")
    mul_g(Scalar(k), drec)
    trec = Defs.FArith().new_cat("trace")
    T.set_rec(trec)
    try:
        trace.run_mul_g_trace(T, Scalar(k))
    finally:
        T.set_rec(None)
    assert drec.get_counts() == trec.get_counts()

    # relation trace: zero outputs iff the claim matches
    R = get_trace('relation')
    assert trace.run_relation_trace(R, Scalar(k), direct)
    if not direct.is_identity:
        assert not trace.run_relation_trace(R, Scalar(k), direct.negate())
    assert not trace.run_relation_trace(R, Scalar((k + 1) % Defs.order), direct)

def check_edges():
    for k in (0, 1, 2, Defs.order - 1, Defs.order - 2 ** 255, 2 ** 255):
        run_one_test(k)

    R = get_trace('relation')
    assert trace.run_relation_trace(R, Scalar(0), Point.IDENTITY)
    assert not trace.run_relation_trace(R, Scalar(0), Point.generator())

def check_shape():
    T1 = trace.build_mul_g_trace()
    T2 = get_trace('mul_g')
    assert T1.shape() == T2.shape()
    assert len(T1.inputs) == Defs.nbits
    assert len(T1.outputs) == 3
    names = set( g[0] for g in T1.shape() )
    assert names <= set(['INPUT', 'CONST', 'ADD', 'SUB', 'MUL', 'DIV', 'DIV0', 'SEL'])

    try:
        T1.run([[0] * (Defs.nbits - 1)])
    except AssertionError:
        pass
    else:
        assert False, "short input accepted"

def check_div_gate():
    T = trace.ArithTrace()
    x = T.input()
    y = T.input()
    T.set_outputs([T.div(x, y), T.div0(x, y), T.select(1, x, y), T.neg(x)])
    assert T.run([6, 3]) == [2, 2, 6, Defs.prime - 6]
    try:
        T.run([6, 0])
    except DegenerateInputError:
        pass
    else:
        assert False, "DIV gate divided by zero"

    T0 = trace.ArithTrace()
    (x, y) = (T0.input(), T0.input())
    T0.set_outputs([T0.div0(x, y)])
    assert T0.run([6, 0]) == [0]

def test_trace_random():
    for _ in range(0, 2):
        run_one_test()

def test_trace_edges():
    check_edges()

def test_trace_shape():
    check_shape()

def test_trace_div_gate():
    check_div_gate()

def run_tests(num_tests):
    check_div_gate()
    check_shape()
    check_edges()
    for _ in range(0, num_tests):
        run_one_test()
        sys.stdout.write('.')
        sys.stdout.flush()

    print(" (trace test passed)")

if __name__ == "__main__":
    nruns = 16
    if len(sys.argv) > 1:
        nruns = int(sys.argv[1])
    run_tests(nruns)
