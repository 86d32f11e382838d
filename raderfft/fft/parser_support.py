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
Command line options for choosing the FFT backend.
"""

from .backend_support import get_backend_names, set_backend


def insert_fft_option_group(parser):
    """
    Adds the options used to choose an FFT backend. This should be used
    if your program supports the ability to select the FFT backend; otherwise
    you may simply create plans and rely on the default choice.

    Parameters
    ----------
    parser : object
        ArgumentParser instance
    """
    fft_group = parser.add_argument_group("Options for selecting the"
                                          " FFT backend in this program.")
    # This expects a *list* of inputs, as indicated by the nargs='*'.
    fft_group.add_argument("--fft-backends",
                      help="Preference list of the FFT backends. "
                           "Choices are: \n" + str(get_backend_names()),
                      nargs='*', default=[])
    return fft_group

def verify_fft_options(opt, parser):
    """Parses the FFT options and verifies that they are
       reasonable.

    Parameters
    ----------
    opt : object
        Result of parsing the CLI with ArgumentParser, or any object with the
        required attributes.
    parser : object
        ArgumentParser instance.
    """
    if len(opt.fft_backends) > 0:
        _all_backends = get_backend_names()
        for backend in opt.fft_backends:
            if backend not in _all_backends:
                parser.error("Backend {0} is not available".format(backend))

def from_cli(opt):
    """Sets the preferred FFT backend from the parsed command line.

    Parameters
    ----------
    opt: object
        Result of parsing the CLI with ArgumentParser, or any object with
        the required attributes.
    """
    set_backend(opt.fft_backends)
