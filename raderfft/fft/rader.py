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
Transforms of prime length using Rader's algorithm.

A DFT of prime length p is rewritten as a cyclic convolution of length
p - 1 by reindexing the non-zero samples through the multiplicative group
modulo p. The convolution is evaluated with a forward and an inverse
transform of size p - 1, which are obtained from a generic FFT backend.

References
----------
Charles M. Rader, "Discrete Fourier Transforms When the Number of Data
Samples Is Prime", Proceedings of the IEEE, vol. 56, no. 6,
pp. 1107-1108, June 1968.
"""

import logging
import numpy

from raderfft.modular import is_prime, primitive_root, modpow
from .core import _BaseFFT, _BaseIFFT, _check_direction, FFT_FORWARD
from .backend_support import get_backend

logger = logging.getLogger('raderfft.fft.rader')

_INPLACE_MSG = "Rader transforms do not support in-place operation"


class _RaderPlan(object):
    """Shared implementation of the forward and inverse Rader plans.

    Parameters
    ----------
    invec : numpy.ndarray
        Input vector of prime length; only read by :meth:`execute`.
    outvec : numpy.ndarray
        Output vector of the same length and dtype; only written.
    flags : int (default 0)
        Forwarded unchanged to the sub-transform plans.
    backend : module or object, optional
        Provides the ``FFT`` and ``IFFT`` plan classes used for the two
        sub-transforms of size ``len(invec) - 1``. Defaults to the active
        backend of :mod:`raderfft.fft.backend_support`.
    size : int, optional
        Expected transform size; defaults to ``len(invec)``.

    Attributes
    ----------
    sequence : numpy.ndarray
        ``sequence[i] = g**(i+1) mod p`` for the primitive root `g`.
    kernel : numpy.ndarray
        DFT of ``exp(sign * 2 pi j * sequence / p)``; ``kernel[0] == -1``
        and ``abs(kernel[k]) == sqrt(p)`` otherwise.
    """
    def __init__(self, invec, outvec, flags=0, backend=None, size=None):
        super(_RaderPlan, self).__init__(invec, outvec, flags, size)
        if self.inplace:
            raise NotImplementedError(_INPLACE_MSG)
        if self.size < 3 or not is_prime(self.size):
            raise ValueError("Rader transforms need a prime size of at least "
                             "3, got {0}".format(self.size))

        self.sequence = None
        self.kernel = None
        self.sub_invec = None
        self.sub_outvec = None
        self.forward_sub = None
        self.inverse_sub = None
        self._reversed = None
        self._conv_kernel = None

        if backend is None:
            backend = get_backend()
        self.backend = backend

        # Either everything is acquired or nothing is kept
        try:
            self._setup()
        except Exception:
            self.destroy()
            raise

    def _setup(self):
        nsub = self.size - 1
        arith = self.arith

        self.sequence = numpy.empty(nsub, dtype=numpy.intp)
        self.kernel = arith.zeros(nsub)
        self.sub_invec = arith.zeros(nsub)
        self.sub_outvec = arith.zeros(nsub)

        self.forward_sub = self.backend.FFT(self.sub_invec, self.sub_outvec,
                                            flags=self.flags)
        self.inverse_sub = self.backend.IFFT(self.sub_outvec, self.sub_invec,
                                             flags=self.flags)

        g = primitive_root(self.size)
        for i in range(nsub):
            self.sequence[i] = modpow(g, i + 1, self.size)
        self._reversed = self.sequence[::-1]

        # The direction only enters through the sign of these twiddles
        twiddle = numpy.exp(self.direction * 2j * numpy.pi * self.sequence
                            / self.size)
        arith.from_complex(twiddle, out=self.sub_invec)
        self.forward_sub.execute()
        self.kernel[:] = self.sub_outvec

        if arith.fixed:
            # The 1/(p-1) of the round trip is applied to the kernel so that
            # the inverse sub-transform output stays within the output range
            self._conv_kernel = arith.from_complex(
                arith.to_complex(self.kernel) / nsub)
        else:
            self._conv_kernel = self.kernel

        self.sequence.flags.writeable = False
        self.kernel.flags.writeable = False
        self._conv_kernel.flags.writeable = False

        logger.debug("Created %s Rader plan of size %d with primitive root "
                     "%d using %s", 'forward' if self.forward else 'inverse',
                     self.size, g, getattr(self.backend, '__name__',
                                           type(self.backend).__name__))

    def execute(self):
        """
        Compute the transform of the input vector specified at object
        instantiation into the output vector specified at object
        instantiation. May be called any number of times; only the contents
        of the input vector are expected to change between calls.
        """
        self._check_alive()
        arith = self.arith
        invec = self.invec
        nsub = self.size - 1

        # Gather the non-zero samples along the inverse generator powers
        numpy.take(invec, self._reversed, out=self.sub_invec)

        # Cyclic convolution with the twiddle sequence
        self.forward_sub.execute()
        arith.multiply(self.sub_outvec, self._conv_kernel,
                       out=self.sub_outvec)
        self.inverse_sub.execute()

        self.outvec[0] = arith.sum(invec)

        # Undo the scaling of the unnormalized round trip (held by the kernel
        # in fixed point), add x[0] back and scatter along the generator
        # powers
        if not arith.fixed:
            arith.divide(self.sub_invec, nsub, out=self.sub_invec)
        arith.add(self.sub_invec, invec[0], out=self.sub_invec)
        self.outvec[self.sequence] = self.sub_invec

    def destroy(self):
        """
        Release the permutation, the kernel, both scratch vectors and both
        sub-transform plans. The caller's vectors are left untouched.
        """
        for plan in (self.forward_sub, self.inverse_sub):
            if plan is not None:
                plan.destroy()
        self.forward_sub = None
        self.inverse_sub = None
        self.sequence = None
        self._reversed = None
        self.kernel = None
        self._conv_kernel = None
        self.sub_invec = None
        self.sub_outvec = None
        super(_RaderPlan, self).destroy()


class RaderFFT(_RaderPlan, _BaseFFT):
    """Forward transform of prime length using Rader's algorithm."""


class RaderIFFT(_RaderPlan, _BaseIFFT):
    """Unnormalized inverse transform of prime length using Rader's
    algorithm.
    """


def create_rader_plan(size, invec, outvec, direction, flags=0, backend=None):
    """Create a Rader plan of prime `size` bound to `invec` and `outvec`.

    Parameters
    ----------
    size : int
        Prime transform size, at least 3.
    invec, outvec : numpy.ndarray
        Caller-owned vectors of length `size`.
    direction : {FFT_FORWARD, FFT_BACKWARD}
        Sign of the exponent of the transform.
    flags : int (default 0)
        Forwarded to the sub-transform plans.
    backend : module or object, optional
        Engine providing the sub-transform plan classes.

    Returns
    -------
    plan : RaderFFT or RaderIFFT
    """
    direction = _check_direction(direction)
    cls = RaderFFT if direction == FFT_FORWARD else RaderIFFT
    return cls(invec, outvec, flags=flags, backend=backend, size=size)


def execute_rader_plan(plan):
    plan.execute()


def destroy_rader_plan(plan):
    plan.destroy()
