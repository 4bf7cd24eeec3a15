#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# record the ladder as a straight-line arithmetic trace and replay it

from libdetnonce.curve import Point
from libdetnonce.defs import Defs
from libdetnonce.field import DegenerateInputError
from libdetnonce.scalarmul import ladder
import libdetnonce.util as util

class Wire(object):
    def __init__(self, idx):
        self.idx = idx

    def __repr__(self):
        return "Wire(%d)" % self.idx

class _TGate(object):
    name = None
    nins = 2

    def __init__(self, trace, ins, const=None):
        assert len(ins) == self.nins, "%s gate takes %d inputs" % (self.name, self.nins)
        self.ins = tuple(ins)
        self.const = const
        self.trace = trace
        self.q = trace.q

    def run(self, vals, rec):
        raise NotImplementedError

class TInputGate(_TGate):
    name = 'INPUT'
    nins = 0

    # values are filled in by ArithTrace.run
    def run(self, vals, rec):
        assert False, "input gates are not evaluated"

class TConstGate(_TGate):
    name = 'CONST'
    nins = 0

    def run(self, vals, rec):
        return self.const

class TAddGate(_TGate):
    name = 'ADD'

    def run(self, vals, rec):
        if rec is not None:
            rec.did_add()
        return (vals[self.ins[0]] + vals[self.ins[1]]) % self.q

class TSubGate(_TGate):
    name = 'SUB'

    def run(self, vals, rec):
        if rec is not None:
            rec.did_sub()
        return (vals[self.ins[0]] - vals[self.ins[1]]) % self.q

class TMulGate(_TGate):
    name = 'MUL'

    def run(self, vals, rec):
        if rec is not None:
            rec.did_mul()
        return (vals[self.ins[0]] * vals[self.ins[1]]) % self.q

class TDivGate(_TGate):
    name = 'DIV'

    def run(self, vals, rec):
        den = vals[self.ins[1]]
        if den == 0:
            raise DegenerateInputError("DIV gate with zero divisor")
        if rec is not None:
            rec.did_mul()
        return (vals[self.ins[0]] * util.invert_modp(den, self.q, rec)) % self.q

class TDiv0Gate(_TGate):
    name = 'DIV0'

    def run(self, vals, rec):
        den = vals[self.ins[1]]
        if rec is not None:
            rec.did_inv()
            rec.did_mul()
        if den == 0:
            return 0
        return (vals[self.ins[0]] * util.invert_modp(den, self.q)) % self.q

class TSelGate(_TGate):
    name = 'SEL'
    nins = 3

    # c ? a : b, as b + c * (a - b)
    def run(self, vals, rec):
        (c, a, b) = [ vals[i] for i in self.ins ]
        assert c in (0, 1), "selector must be a bit"
        if rec is not None:
            rec.did_sel()
        return (b + c * (a - b)) % self.q

class ArithTrace(object):
    # same interface as field.PrimeField, but every op appends a gate
    # and returns a Wire

    def __init__(self, q=None):
        if q is None:
            q = Defs.prime
        self.q = q
        self.gates = []
        self.inputs = []
        self.outputs = []
        self.values = []
        self.consts = {}
        self.rec = None

    def set_rec(self, rec):
        self.rec = rec

    def _gate(self, typ, ins, const=None):
        ins = [ self._wire(w).idx for w in ins ]
        self.gates.append(typ(self, ins, const))
        return Wire(len(self.gates) - 1)

    def _wire(self, val):
        if isinstance(val, Wire):
            return val
        return self.const(val)

    def input(self):
        w = self._gate(TInputGate, [])
        self.inputs.append(w.idx)
        return w

    def const(self, val):
        val %= self.q
        if val not in self.consts:
            self.consts[val] = self._gate(TConstGate, [], val)
        return self.consts[val]

    def add(self, x, y):
        return self._gate(TAddGate, [x, y])

    def sub(self, x, y):
        return self._gate(TSubGate, [x, y])

    def mul(self, x, y):
        return self._gate(TMulGate, [x, y])

    def div(self, x, y):
        return self._gate(TDivGate, [x, y])

    def div0(self, x, y):
        return self._gate(TDiv0Gate, [x, y])

    def select(self, c, a, b):
        return self._gate(TSelGate, [c, a, b])

    def neg(self, x):
        return self.sub(0, x)

    def set_outputs(self, wires):
        self.outputs = [ self._wire(w).idx for w in wires ]

    # gate list without values; equal shapes mean equal traces
    def shape(self):
        return tuple( (g.name, g.ins, g.const) for g in self.gates )

    def run(self, inputs):
        inputs = util.flatten(inputs)
        assert len(inputs) == len(self.inputs), "expected %d inputs, got %d" % (len(self.inputs), len(inputs))

        vals = [None] * len(self.gates)
        for (idx, val) in zip(self.inputs, inputs):
            vals[idx] = val % self.q

        for (idx, g) in enumerate(self.gates):
            if vals[idx] is None:
                vals[idx] = g.run(vals, self.rec)

        self.values = vals
        return [ vals[i] for i in self.outputs ]

## builders

def build_mul_g_trace():
    T = ArithTrace(Defs.prime)
    bits = [ T.input() for _ in range(0, Defs.nbits) ]
    G = Point.generator()
    (x, y, is_id) = ladder(T, bits, T.const(G.x), T.const(G.y))
    T.set_outputs([x, y, is_id])
    return T

# outputs (x - cx, y - cy); the relation holds iff both are zero. An
# identity result leaves the (0, 0) sentinel, which matches an all-zero
# claimed point.
def build_relation_trace():
    T = ArithTrace(Defs.prime)
    bits = [ T.input() for _ in range(0, Defs.nbits) ]
    cx = T.input()
    cy = T.input()
    G = Point.generator()
    (x, y, _) = ladder(T, bits, T.const(G.x), T.const(G.y))
    T.set_outputs([T.sub(x, cx), T.sub(y, cy)])
    return T

def relation_inputs(scalar, claimed):
    if claimed.is_identity:
        coords = [0, 0]
    else:
        coords = [claimed.x, claimed.y]
    return [scalar.bits(), coords]

def run_mul_g_trace(T, scalar):
    (x, y, is_id) = T.run([scalar.bits()])
    if is_id:
        return Point.IDENTITY
    return Point(x, y)

def run_relation_trace(T, scalar, claimed):
    return all( v == 0 for v in T.run(relation_inputs(scalar, claimed)) )
