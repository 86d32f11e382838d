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
This package provides plan-based fast Fourier transforms over several
backends, and prime-length transforms through Rader's algorithm.
"""

from .core import FFT_FORWARD, FFT_BACKWARD
from .backend_support import (set_backend, get_backend, get_backend_names,
                              get_backend_modules)
from .class_api import FFT, IFFT, create_plan, execute, destroy_plan
from .func_api import fft, ifft
from .rader import (RaderFFT, RaderIFFT, create_rader_plan,
                    execute_rader_plan, destroy_rader_plan)
