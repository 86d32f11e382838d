#  Copyright (C) 2026  RaderFFT Developers
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with with program; see the file COPYING. If not, write to the
#  Free Software Foundation, Inc., 59 Temple Place, Suite 330, Boston,
#  MA  02111-1307  USA
"""Registry of the available FFT backends and the active preference."""

import logging
from .core import _list_available

logger = logging.getLogger('raderfft.fft.backend_support')

_backend_dict = {'numpy': 'npfft',
                 'scipy': 'scipyfft',
                 'native': 'native'}
_backend_list = ['numpy', 'scipy', 'native']

_alist, _adict = _list_available(_backend_list, _backend_dict)

cpu_backend = None


def get_backend_modules():
    return _adict.values()


def get_backend_names():
    return list(_alist)


def set_backend(backend_list):
    """Make the first available backend of `backend_list` the active one.

    Names that are not available are skipped; if none of them is, the
    active backend is left unchanged.
    """
    global cpu_backend
    for backend in backend_list:
        if backend in _alist:
            if backend != cpu_backend:
                logger.info("Using the %s FFT backend", backend)
            cpu_backend = backend
            break


def get_backend():
    return _adict[cpu_backend]


set_backend(_backend_list)
