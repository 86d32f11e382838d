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
This module provides a pure numpy backend of the fast Fourier transform.

Each plan is a tree: small sizes are computed directly from the DFT matrix,
prime sizes use Rader's algorithm and composite sizes are split by their
smallest prime factor (mixed-radix Cooley-Tukey). Every node owns its
scratch vectors and child plans, and releases them in ``destroy``.
"""

import sys
import logging
import numpy

from raderfft.modular import is_prime, smallest_factor
from .core import _BaseFFT, _BaseIFFT

logger = logging.getLogger('raderfft.fft.native')

# Sizes up to this are computed with the DFT matrix
DIRECT_MAX_SIZE = 8

_INPLACE_MSG = ("native backend of raderfft.fft does not support in-place "
                "transforms")


def _dft_matrix(size, direction, dtype):
    k = numpy.arange(size)
    # reduce the exponent first to keep the phases accurate
    phase = numpy.outer(k, k) % size
    return numpy.exp(direction * 2j * numpy.pi * phase / size).astype(dtype)


class _DirectPlan(object):
    def __init__(self, size, invec, outvec, direction):
        self.invec = invec
        self.outvec = outvec
        self.matrix = _dft_matrix(size, direction, invec.dtype)

    def execute(self):
        self.outvec[:] = self.matrix.dot(self.invec)

    def destroy(self):
        self.matrix = None
        self.invec = None
        self.outvec = None


class _MixedRadixPlan(object):
    """Split a size ``n = r * m`` transform, with `r` the smallest prime
    factor of `n`, into `r` transforms of size `m` followed by twiddle
    factors and `m` transforms of size `r`.
    """
    def __init__(self, size, invec, outvec, direction, flags):
        self.invec = invec
        self.outvec = outvec
        self.radix = smallest_factor(size)
        self.stride = size // self.radix
        r, m = self.radix, self.stride
        dtype = invec.dtype

        self.sub_plan = None
        self.radix_plan = None
        self._sub_in = numpy.zeros(m, dtype=dtype)
        self._sub_out = numpy.zeros(m, dtype=dtype)
        self._radix_in = numpy.zeros(r, dtype=dtype)
        self._radix_out = numpy.zeros(r, dtype=dtype)
        self._work = numpy.zeros((r, m), dtype=dtype)
        phase = numpy.outer(numpy.arange(r), numpy.arange(m)) % size
        self.twiddle = numpy.exp(direction * 2j * numpy.pi * phase
                                 / size).astype(dtype)
        try:
            self.sub_plan = _create_plan(m, self._sub_in, self._sub_out,
                                         direction, flags)
            self.radix_plan = _create_plan(r, self._radix_in,
                                           self._radix_out, direction, flags)
        except Exception:
            self.destroy()
            raise

    def execute(self):
        r, m = self.radix, self.stride
        for s in range(r):
            self._sub_in[:] = self.invec[s::r]
            self.sub_plan.execute()
            self._work[s] = self._sub_out
        self._work *= self.twiddle
        for k in range(m):
            self._radix_in[:] = self._work[:, k]
            self.radix_plan.execute()
            self.outvec[k::m] = self._radix_out

    def destroy(self):
        for plan in (self.sub_plan, self.radix_plan):
            if plan is not None:
                plan.destroy()
        self.sub_plan = None
        self.radix_plan = None
        self._sub_in = self._sub_out = None
        self._radix_in = self._radix_out = None
        self._work = None
        self.twiddle = None
        self.invec = None
        self.outvec = None


def _create_plan(size, invec, outvec, direction, flags):
    if size <= DIRECT_MAX_SIZE:
        plan = _DirectPlan(size, invec, outvec, direction)
    elif is_prime(size):
        from .rader import create_rader_plan
        plan = create_rader_plan(size, invec, outvec, direction, flags,
                                 backend=sys.modules[__name__])
    else:
        plan = _MixedRadixPlan(size, invec, outvec, direction, flags)
    logger.debug("Planned size %d as %s", size, type(plan).__name__)
    return plan


class _NativePlan(object):
    _plan = None

    def __init__(self, invec, outvec, flags=0, size=None):
        super(_NativePlan, self).__init__(invec, outvec, flags, size)
        if self.arith.fixed:
            raise TypeError("native backend of raderfft.fft supports "
                            "floating-point data only")
        if self.inplace:
            raise NotImplementedError(_INPLACE_MSG)
        self._plan = _create_plan(self.size, invec, outvec, self.direction,
                                  flags)

    def execute(self):
        self._check_alive()
        self._plan.execute()

    def destroy(self):
        if self._plan is not None:
            self._plan.destroy()
            self._plan = None
        super(_NativePlan, self).destroy()


class FFT(_NativePlan, _BaseFFT):
    """
    Class for performing FFTs with the native plan tree.
    """


class IFFT(_NativePlan, _BaseIFFT):
    """
    Class for performing unnormalized IFFTs with the native plan tree.
    """
