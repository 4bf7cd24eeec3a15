#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# Poseidon sponge over the BN254 scalar field
#
# Round constants and the Cauchy MDS matrix come from the Grain LFSR in
# self-shrinking mode, seeded with the parameter set. The invariant-
# subspace checks on the MDS matrix are not run.

BN254_R = 21888242871839275222246405745257275088548364400416034343698204186575808495617

class Grain(object):
    def __init__(self, field, sbox, nbits, t, R_F, R_P):
        state = []
        for (val, width) in ((field, 2), (sbox, 4), (nbits, 12), (t, 12), (R_F, 10), (R_P, 10)):
            state.extend( int(b) for b in bin(val)[2:].zfill(width) )
        state.extend([1] * 30)
        assert len(state) == 80
        self.state = state

        for _ in range(0, 160):
            self._clock()

    def _clock(self):
        s = self.state
        new_bit = s[62] ^ s[51] ^ s[38] ^ s[23] ^ s[13] ^ s[0]
        s.pop(0)
        s.append(new_bit)
        return new_bit

    # self-shrinking: a pair (1, b) yields b, a pair (0, b) yields nothing
    def next_bit(self):
        while True:
            b1 = self._clock()
            b2 = self._clock()
            if b1 == 1:
                return b2

    # msb first
    def next_int(self, nbits):
        out = 0
        for _ in range(0, nbits):
            out = (out << 1) | self.next_bit()
        return out

class Poseidon(object):
    alpha = 5
    _params = {}

    def __init__(self, t=5, R_F=8, R_P=60, q=BN254_R):
        assert R_F % 2 == 0, "R_F must be even"
        self.t = t
        self.R_F = R_F
        self.R_P = R_P
        self.q = q
        (self.rc, self.mds) = self.params(t, R_F, R_P, q)

    @classmethod
    def params(cls, t, R_F, R_P, q):
        key = (t, R_F, R_P, q)
        if key not in cls._params:
            cls._params[key] = cls.gen_params(t, R_F, R_P, q)
        return cls._params[key]

    @staticmethod
    def gen_params(t, R_F, R_P, q):
        nbits = q.bit_length()
        grain = Grain(1, 0, nbits, t, R_F, R_P)

        rc = []
        for _ in range(0, (R_F + R_P) * t):
            val = grain.next_int(nbits)
            while val >= q:
                val = grain.next_int(nbits)
            rc.append(val)

        while True:
            vals = [ grain.next_int(nbits) % q for _ in range(0, 2 * t) ]
            if len(set(vals)) != 2 * t:
                continue
            (xs, ys) = (vals[:t], vals[t:])
            if any( (x + y) % q == 0 for x in xs for y in ys ):
                continue
            mds = [ [ pow(x + y, q - 2, q) for y in ys ] for x in xs ]
            return (rc, mds)

    def permute(self, state):
        assert len(state) == self.t, "state must have %d elements" % self.t
        q = self.q
        state = [ s % q for s in state ]
        half = self.R_F // 2

        for r in range(0, self.R_F + self.R_P):
            state = [ (s + c) % q for (s, c) in zip(state, self.rc[r * self.t:(r + 1) * self.t]) ]

            if r < half or r >= half + self.R_P:
                state = [ pow(s, self.alpha, q) for s in state ]
            else:
                state[0] = pow(state[0], self.alpha, q)

            state = [ sum( m * s for (m, s) in zip(row, state) ) % q for row in self.mds ]

        return state

    # capacity element first, inputs fill the rate
    def hash(self, inputs):
        assert 0 < len(inputs) < self.t, "Poseidon with t=%d takes 1 to %d inputs" % (self.t, self.t - 1)
        for val in inputs:
            if not 0 <= val < self.q:
                raise ValueError("Poseidon input is not a field element")
        state = [0] + list(inputs) + [0] * (self.t - 1 - len(inputs))
        return self.permute(state)[0]
