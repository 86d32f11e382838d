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
This module holds the pieces shared by every transform backend: the
direction constants, argument checking and the parent plan classes.
"""

import numpy
from raderfft.types import arithmetic as _arith

# Sign of the exponent of the transform kernel exp(sign * 2 pi j k n / N)
FFT_FORWARD = -1
FFT_BACKWARD = 1

# Used by backend_support to build its list of available backends; it lives
# here to avoid a circular import

def _list_available(possible_list, possible_dict):
    # The name the user specifies for a backend, e.g. 'numpy', need not be
    # the name of the module implementing it, hence the dict. The list keeps
    # the order of preference.
    available_list = []
    available_dict = {}
    for backend in possible_list:
        try:
            mod = __import__('raderfft.fft.' + possible_dict[backend],
                             fromlist=['raderfft.fft'])
            available_dict.update({backend: mod})
            available_list.append(backend)
        except (ImportError, OSError):
            pass
    return available_list, available_dict

# We perform sanity checking here, at the top level, and then don't worry
# about it in the backends.

def _check_fft_args(invec, outvec):
    if not isinstance(invec, numpy.ndarray):
        raise TypeError("Input is not a numpy array")
    if not isinstance(outvec, numpy.ndarray):
        raise TypeError("Output is not a numpy array")
    if invec.ndim != 1 or outvec.ndim != 1:
        raise TypeError("Input and output must be one-dimensional")

    iprec = _arith.precision(invec.dtype)
    oprec = _arith.precision(outvec.dtype)
    if iprec != oprec:
        raise ValueError("Input and output precisions must agree")

    itype = _arith.kind(invec.dtype)
    otype = _arith.kind(outvec.dtype)
    if itype == 'real' or otype == 'real':
        raise ValueError("Only complex-to-complex transforms are supported")
    return [iprec, itype, otype]

def _check_len_args(invec, outvec, size):
    ilen = len(invec)
    olen = len(outvec)
    if size is None:
        size = ilen
    if size < 1:
        raise ValueError("Transform size must be positive")
    if ilen != size:
        raise ValueError("len(invec) must equal the transform size")
    if olen != size:
        raise ValueError("len(outvec) must equal the transform size")
    return size

def _check_direction(direction):
    if direction not in (FFT_FORWARD, FFT_BACKWARD):
        raise ValueError("direction must be FFT_FORWARD or FFT_BACKWARD")
    return direction


# The classes below serve as the parent for all backend plan classes.
# Their __init__ methods do nontrivial work and hence should be called
# inside the __init__ method of all child classes, before anything else.

class _BasePlan(object):
    direction = None

    def __init__(self, invec, outvec, flags, size):
        self.prec, self.itype, self.otype = _check_fft_args(invec, outvec)
        self.size = _check_len_args(invec, outvec, size)
        self.invec = invec
        self.outvec = outvec
        self.inplace = numpy.may_share_memory(invec, outvec)
        self.flags = flags
        self.arith = _arith.get_arithmetic(invec.dtype)
        self.destroyed = False

    @property
    def forward(self):
        return self.direction == FFT_FORWARD

    def _check_alive(self):
        if self.destroyed:
            raise RuntimeError("{0} plan has been destroyed".format(
                               type(self).__name__))

    def execute(self):
        """
        Compute the transform of the input vector specified at object
        instantiation, putting the output into the output vector specified
        at object instantiation. The intention is that this method should
        be called many times, with the contents of the input vector
        changing between invocations, but not the locations in memory or
        length of either input or output vector.
        """
        pass

    def destroy(self):
        """
        Release everything the plan owns. The input and output vectors
        belong to the caller and are only dereferenced. Calling this more
        than once has no further effect.
        """
        self.invec = None
        self.outvec = None
        self.destroyed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.destroy()
        return False


class _BaseFFT(_BasePlan):
    direction = FFT_FORWARD

    def __init__(self, invec, outvec, flags=0, size=None):
        super(_BaseFFT, self).__init__(invec, outvec, flags, size)


class _BaseIFFT(_BasePlan):
    """The inverse transform is unnormalized: transforming forward and back
    multiplies the data by the transform size.
    """
    direction = FFT_BACKWARD

    def __init__(self, invec, outvec, flags=0, size=None):
        super(_BaseIFFT, self).__init__(invec, outvec, flags, size)
