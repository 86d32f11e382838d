#!/usr/bin/env python
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
setup.py file for RaderFFT package
"""

import os
from setuptools import setup


def get_version_info():
    """Read the version from raderfft/version.py without importing the
    package.
    """
    info = {}
    with open(os.path.join('raderfft', 'version.py')) as f:
        exec(f.read(), info)
    return info['version']


install_requires = ['numpy>=1.20',
                    'scipy>=1.4',
                   ]

extras_require = {'test': ['pytest']}

VERSION = get_version_info()

setup (
    name = 'RaderFFT',
    version = VERSION,
    description = 'Plan-based fast Fourier transforms, with prime lengths '
                  'through Rader\'s algorithm.',
    keywords = ['fft', 'signal processing', 'rader', 'prime length'],
    python_requires = '>=3.8',
    extras_require = extras_require,
    install_requires = install_requires,
    scripts  = [
               'bin/raderfft_transform',
               ],
    packages = [
               'raderfft',
               'raderfft.fft',
               'raderfft.types',
               ],
    classifiers=[
        'Programming Language :: Python :: 3',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
)
