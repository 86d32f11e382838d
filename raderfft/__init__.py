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
"""RaderFFT provides plan-based fast Fourier transforms, including prime
lengths through Rader's algorithm.
"""
import signal
import logging
from datetime import datetime as dt

from .version import version as raderfft_version

__version__ = raderfft_version


class LogFormatter(logging.Formatter):
    """
    Format the logging appropriately
    This will return the log time in the ISO 6801 standard,
    but with millisecond precision
    https://en.wikipedia.org/wiki/ISO_8601
    e.g. 2022-11-18T09:53:01.554+00:00
    """
    converter = dt.fromtimestamp

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created).astimezone()
        t = ct.strftime("%Y-%m-%dT%H:%M:%S")
        s = f"{t}.{int(record.msecs):03d}"
        timezone = ct.strftime('%z')
        timezone_colon = f"{timezone[:-2]}:{timezone[-2:]}"
        s += timezone_colon
        return s


def init_logging(verbose=False, format='%(asctime)s %(message)s'):
    """Common utility for setting up logging in RaderFFT programs.

    Installs a signal handler such that verbosity can be activated at
    run-time by sending a SIGUSR1 to the process.

    Parameters
    ----------
    verbose : bool or int, optional
        What level to set the verbosity level to. Accepts either a boolean
        or an integer representing the level to set. If True/False will set to
        ``logging.INFO``/``logging.WARN``. For higher logging levels, pass
        an integer representing the level to set (see the ``logging`` module
        for details). Default is ``False`` (``logging.WARN``).
    format : str, optional
        The format to use for logging messages.
    """
    def sig_handler(signum, frame):
        logger = logging.getLogger()
        log_level = logger.level
        if log_level == logging.DEBUG:
            log_level = logging.WARN
        else:
            log_level = logging.DEBUG
        logging.warning('Got signal %d, setting log level to %d',
                        signum, log_level)
        logger.setLevel(log_level)

    if hasattr(signal, 'SIGUSR1'):
        signal.signal(signal.SIGUSR1, sig_handler)

    if not verbose:
        initial_level = logging.WARN
    elif int(verbose) == 1:
        initial_level = logging.INFO
    else:
        initial_level = int(verbose)

    logger = logging.getLogger()
    logger.setLevel(initial_level)
    sh = logging.StreamHandler()
    logger.addHandler(sh)
    sh.setFormatter(LogFormatter(fmt=format))


def add_common_options(parser):
    """Add the options every RaderFFT program accepts.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The parser to add the options to.
    """
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Add verbosity to logging. Adding the option '
                             'once gives INFO, twice gives DEBUG.')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)


def verbosity_to_level(verbose):
    """Map the count of ``--verbose`` flags to the value accepted by
    :func:`init_logging`.
    """
    if verbose <= 0:
        return False
    if verbose == 1:
        return True
    return logging.DEBUG
