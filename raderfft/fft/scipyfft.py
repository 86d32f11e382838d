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
This module provides the scipy.fft backend of the fast Fourier transform
for the RaderFFT package.
"""

import scipy.fft
from .core import _BaseFFT, _BaseIFFT

_INPLACE_MSG = ("scipy backend of raderfft.fft does not support in-place "
                "transforms")


class FFT(_BaseFFT):
    """
    Class for performing FFTs via scipy.fft.
    """
    def __init__(self, invec, outvec, flags=0, size=None):
        super(FFT, self).__init__(invec, outvec, flags, size)
        if self.inplace:
            raise NotImplementedError(_INPLACE_MSG)

    def execute(self):
        self._check_alive()
        data = self.arith.to_complex(self.invec)
        self.arith.from_complex(scipy.fft.fft(data), out=self.outvec)


class IFFT(_BaseIFFT):
    """
    Class for performing IFFTs via scipy.fft.
    """
    def __init__(self, invec, outvec, flags=0, size=None):
        super(IFFT, self).__init__(invec, outvec, flags, size)
        if self.inplace:
            raise NotImplementedError(_INPLACE_MSG)

    def execute(self):
        self._check_alive()
        data = self.arith.to_complex(self.invec)
        self.arith.from_complex(scipy.fft.ifft(data, norm='forward'),
                                out=self.outvec)
