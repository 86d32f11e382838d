# Copyright (C) 2026  RaderFFT Developers
#
# This program is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation; either version 3 of the License, or (at your
# option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.
#
# You should have received a copy of the GNU General Public License along
# with this program; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

#
# =============================================================================
#
#                                   Preamble
#
# =============================================================================
#
"""
Element representations for transform buffers.

Two families of complex samples are supported:

* floating point, stored as numpy ``complex64`` or ``complex128``;
* fixed point, stored as the structured dtype :data:`cq32`, whose ``real``
  and ``imag`` fields are ``int32`` numbers with :data:`FIXED_FRACBITS`
  fractional bits.

Code that must work with either family asks :func:`get_arithmetic` for the
strategy object matching a buffer's dtype and uses its ``add``,
``multiply``, ``divide`` and ``sum`` methods instead of numpy operators.
"""

import numpy
from numpy import float32, float64, complex64, complex128, int32, int64

# Number of fractional bits of the fixed-point format (Q15.16)
FIXED_FRACBITS = 16

cq32 = numpy.dtype([('real', int32), ('imag', int32)])

_INT32_MIN = numpy.iinfo(int32).min
_INT32_MAX = numpy.iinfo(int32).max


def precision(dtype):
    """Return 'single', 'double' or 'fixed' for a buffer dtype."""
    dtype = numpy.dtype(dtype)
    if dtype == cq32:
        return 'fixed'
    if dtype in (float32, complex64):
        return 'single'
    if dtype in (float64, complex128):
        return 'double'
    raise TypeError(str(dtype) + ' is not supported')


def kind(dtype):
    """Return 'real', 'complex' or 'fixed' for a buffer dtype."""
    dtype = numpy.dtype(dtype)
    if dtype == cq32:
        return 'fixed'
    if dtype in (float32, float64):
        return 'real'
    if dtype in (complex64, complex128):
        return 'complex'
    raise TypeError(str(dtype) + ' is not supported')


def complex_same_precision_as(dtype):
    """Return the complex dtype matching the precision of `dtype`."""
    if precision(dtype) == 'single':
        return numpy.dtype(complex64)
    if precision(dtype) == 'double':
        return numpy.dtype(complex128)
    return cq32


class FloatArithmetic(object):
    """Native numpy arithmetic on ``complex64`` / ``complex128`` buffers."""
    fixed = False

    def __init__(self, dtype):
        self.dtype = numpy.dtype(dtype)

    def zeros(self, n):
        return numpy.zeros(n, dtype=self.dtype)

    def add(self, a, b, out=None):
        return numpy.add(a, b, out=out)

    def multiply(self, a, b, out=None):
        return numpy.multiply(a, b, out=out)

    def divide(self, a, d, out=None):
        return numpy.divide(a, self.dtype.type(d), out=out)

    def sum(self, a):
        return a.sum(dtype=self.dtype)

    def to_complex(self, a):
        return a

    def from_complex(self, values, out=None):
        if out is None:
            return numpy.asarray(values, dtype=self.dtype)
        out[:] = values
        return out

    def __repr__(self):
        return 'FloatArithmetic({0})'.format(self.dtype.name)


class FixedPointArithmetic(object):
    """Explicit integer arithmetic on :data:`cq32` buffers.

    Products are formed in 64 bits and rounded back to `fracbits`
    fractional bits; every result saturates to the ``int32`` range instead
    of wrapping.
    """
    fixed = True

    def __init__(self, fracbits=FIXED_FRACBITS):
        self.dtype = cq32
        self.fracbits = fracbits
        self.one = 1 << fracbits

    def zeros(self, n):
        return numpy.zeros(n, dtype=cq32)

    def _pack(self, re, im, out=None):
        re = numpy.clip(re, _INT32_MIN, _INT32_MAX)
        im = numpy.clip(im, _INT32_MIN, _INT32_MAX)
        if out is None:
            out = numpy.empty(numpy.shape(re), dtype=cq32)
        out['real'] = re
        out['imag'] = im
        return out

    @staticmethod
    def _split(a):
        return (numpy.asarray(a['real'], dtype=int64),
                numpy.asarray(a['imag'], dtype=int64))

    def add(self, a, b, out=None):
        ar, ai = self._split(a)
        br, bi = self._split(b)
        return self._pack(ar + br, ai + bi, out)

    def multiply(self, a, b, out=None):
        ar, ai = self._split(a)
        br, bi = self._split(b)
        half = 1 << (self.fracbits - 1)
        re = (ar * br - ai * bi + half) >> self.fracbits
        im = (ar * bi + ai * br + half) >> self.fracbits
        return self._pack(re, im, out)

    def divide(self, a, d, out=None):
        # round half up
        d = int(d)
        ar, ai = self._split(a)
        re = numpy.floor_divide(2 * ar + d, 2 * d)
        im = numpy.floor_divide(2 * ai + d, 2 * d)
        return self._pack(re, im, out)

    def sum(self, a):
        ar, ai = self._split(a)
        return self._pack(ar.sum(), ai.sum())[()]

    def to_complex(self, a):
        return (a['real'] + 1j * a['imag']) / float(self.one)

    def from_complex(self, values, out=None):
        values = numpy.asarray(values) * self.one
        re = numpy.rint(values.real).astype(int64)
        im = numpy.rint(values.imag).astype(int64)
        return self._pack(re, im, out)

    def __repr__(self):
        return 'FixedPointArithmetic(fracbits={0})'.format(self.fracbits)


_arithmetic = {
    numpy.dtype(complex64): FloatArithmetic(complex64),
    numpy.dtype(complex128): FloatArithmetic(complex128),
    cq32: FixedPointArithmetic(),
}


def get_arithmetic(dtype):
    """Return the arithmetic strategy for buffers of `dtype`.

    Raises
    ------
    TypeError
        If `dtype` is not a complex representation.
    """
    try:
        return _arithmetic[numpy.dtype(dtype)]
    except KeyError:
        raise TypeError(str(numpy.dtype(dtype)) +
                        ' is not a supported complex representation')


def zeros(n, dtype=complex128):
    """Allocate a zeroed buffer of `n` samples of `dtype`."""
    return numpy.zeros(n, dtype=numpy.dtype(dtype))


def to_fixed(values):
    """Convert complex values to a new :data:`cq32` buffer."""
    return _arithmetic[cq32].from_complex(numpy.atleast_1d(values))


def from_fixed(buf):
    """Convert a :data:`cq32` buffer to ``complex128`` values."""
    return _arithmetic[cq32].to_complex(buf)
