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
"""
Helpers shared by the RaderFFT unit tests: a reference DFT, random test
vectors, tolerance-aware comparison and a guard that restores the active
FFT backend.
"""

import numpy
from numpy import complex64, complex128

from raderfft.fft import FFT_FORWARD, backend_support
from raderfft.types import cq32, from_fixed, get_arithmetic

# Relative tolerance on the norm of the error, by precision
tolerances = {'single': 1e-5, 'double': 1e-10, 'fixed': 1e-3}

test_primes = [3, 5, 7, 11, 13, 17, 31, 61]


def direct_dft(x, direction=FFT_FORWARD):
    """O(n**2) unnormalized DFT of `x` in double precision."""
    x = numpy.asarray(x, dtype=complex128)
    n = len(x)
    k = numpy.arange(n)
    phase = numpy.outer(k, k) % n
    return numpy.exp(direction * 2j * numpy.pi * phase / n).dot(x)


def random_vector(n, dtype=complex128, seed=None, scale=1.0):
    """Random complex vector of length `n` in the given representation."""
    rng = numpy.random.RandomState(seed)
    values = scale * (rng.randn(n) + 1j * rng.randn(n))
    if numpy.dtype(dtype) == cq32:
        out = numpy.zeros(n, dtype=cq32)
        return get_arithmetic(cq32).from_complex(values, out=out)
    return values.astype(dtype)


def as_complex(vec):
    """Complex128 view of a buffer of any supported representation."""
    if vec.dtype == cq32:
        return from_fixed(vec)
    return numpy.asarray(vec, dtype=complex128)


def almost_equal_norm(actual, expected, tol):
    """True if ``|actual - expected| <= tol * |expected|`` in the 2-norm;
    falls back to an absolute comparison when `expected` is tiny.
    """
    actual = as_complex(actual)
    expected = as_complex(expected)
    scale = max(numpy.linalg.norm(expected), 1.0)
    return numpy.linalg.norm(actual - expected) <= tol * scale


def precision_of(dtype):
    if numpy.dtype(dtype) == cq32:
        return 'fixed'
    return 'single' if numpy.dtype(dtype) == complex64 else 'double'


class BackendGuard(object):
    """Context manager selecting FFT backends and restoring the previous
    choice on exit.
    """
    def __init__(self, *names):
        self.names = list(names)
        self.saved = None

    def __enter__(self):
        self.saved = backend_support.cpu_backend
        backend_support.set_backend(self.names)
        return backend_support.get_backend()

    def __exit__(self, exc_type, exc_value, traceback):
        backend_support.set_backend([self.saved])
        return False
