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
The class-based front end: plan objects created once, bound to an input and
an output vector, and executed many times.
"""

from .backend_support import get_backend
from .core import _check_direction, FFT_FORWARD


def _fft_factory(invec, outvec, flags=0, size=None):
    backend = get_backend()
    cls = getattr(backend, 'FFT')
    return cls

def _ifft_factory(invec, outvec, flags=0, size=None):
    backend = get_backend()
    cls = getattr(backend, 'IFFT')
    return cls

class FFT(object):
    """ Create a forward FFT engine

    Parameters
    ----------
    invec : numpy.ndarray
      Input vector (complex64, complex128 or cq32); its FFT will be computed
    outvec : numpy.ndarray
      Output vector of the same dtype and length; it will hold the FFT of
      invec
    flags : int (default 0)
      Opaque planning flags, forwarded to the backend.
    size : int (default None)
      Logical size of the transform; if None, the length of invec.
    """
    def __new__(cls, *args, **kwargs):
        real_cls = _fft_factory(*args, **kwargs)
        return real_cls(*args, **kwargs)

class IFFT(object):
    """ Create an (unnormalized) reverse FFT engine

    Parameters
    ----------
    invec : numpy.ndarray
      Input vector (complex64, complex128 or cq32); its IFFT will be computed
    outvec : numpy.ndarray
      Output vector of the same dtype and length; it will hold the IFFT of
      invec, multiplied by the transform size
    flags : int (default 0)
      Opaque planning flags, forwarded to the backend.
    size : int (default None)
      Logical size of the transform; if None, the length of outvec.
    """
    def __new__(cls, *args, **kwargs):
        real_cls = _ifft_factory(*args, **kwargs)
        return real_cls(*args, **kwargs)


def create_plan(size, invec, outvec, direction, flags=0):
    """Create a plan of the active backend for a transform of `size`
    samples from `invec` to `outvec`.

    Parameters
    ----------
    size : int
        Transform size; must match the vector lengths.
    invec, outvec : numpy.ndarray
        Caller-owned input and output vectors.
    direction : {FFT_FORWARD, FFT_BACKWARD}
        Sign of the exponent of the transform.
    flags : int (default 0)
        Opaque planning flags, forwarded to the backend.
    """
    if _check_direction(direction) == FFT_FORWARD:
        return FFT(invec, outvec, flags=flags, size=size)
    return IFFT(invec, outvec, flags=flags, size=size)


def execute(plan):
    plan.execute()


def destroy_plan(plan):
    plan.destroy()
