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
One-shot transforms: plan, execute and destroy in a single call.
"""

from .class_api import FFT, IFFT


def fft(invec, outvec):
    """ Fourier transform from invec to outvec.

    Parameters
    ----------
    invec : numpy.ndarray
        The input vector.
    outvec : numpy.ndarray
        The output vector, same dtype and length as invec.
    """
    with FFT(invec, outvec) as plan:
        plan.execute()

def ifft(invec, outvec):
    """ Unnormalized inverse Fourier transform from invec to outvec.

    Parameters
    ----------
    invec : numpy.ndarray
        The input vector.
    outvec : numpy.ndarray
        The output vector, same dtype and length as invec. It holds the
        inverse transform multiplied by len(outvec).
    """
    with IFFT(invec, outvec) as plan:
        plan.execute()
