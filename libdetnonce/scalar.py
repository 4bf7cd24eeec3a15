#!/usr/bin/python
#
# (C) 2026 The detnonce developers
#
# scalars mod the curve order

from libdetnonce.defs import Defs
from libdetnonce.field import PrimeField
import libdetnonce.util as util

class NonCanonicalError(ValueError):
    pass

class Scalar(object):
    # canonical value in [0, order); never mutated
    def __init__(self, value):
        assert 0 <= value < Defs.order, "scalar out of range"
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.value == other.value

    def __ne__(self, other):
        ret = self.__eq__(other)
        if ret is NotImplemented:
            return ret
        return not ret

    def __hash__(self):
        return hash(('Scalar', self.value))

    def __int__(self):
        return self.value

    def __repr__(self):
        return "Scalar(0x%064x)" % self.value

    # lsb of byte 0 of the little-endian encoding first, always nbits long
    def bits(self):
        return util.numToBin(self.value, Defs.nbits)

class ScalarField(object):
    def __init__(self, rec=None):
        self.field = PrimeField(Defs.order, rec)

    @staticmethod
    def from_int(val, canonical=None):
        if canonical is None:
            canonical = Defs.canonical

        if val < 0 or val >= Defs.order:
            if canonical == 'reduce':
                val %= Defs.order
            elif canonical == 'reject':
                raise NonCanonicalError("scalar 0x%x is not below the curve order" % val)
            else:
                assert False, "Unknown canonical mode %s" % canonical
        return Scalar(val)

    def from_bytes(self, buf, byteorder='big', canonical=None):
        if byteorder == 'big':
            buf = util.swap_order(util.check_len(buf))
        elif byteorder != 'little':
            raise ValueError("byteorder must be 'big' or 'little'")

        return self.from_int(util.le_to_num(buf), canonical)

    @staticmethod
    def to_bytes(scalar, byteorder='big'):
        out = util.num_to_le(scalar.value)
        if byteorder == 'big':
            return util.swap_order(out)
        elif byteorder != 'little':
            raise ValueError("byteorder must be 'big' or 'little'")
        return out

    def add(self, a, b):
        return Scalar(self.field.add(a.value, b.value))
