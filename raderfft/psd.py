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
"""Power spectral density of a block of samples.
"""

import numbers
import numpy
from raderfft.fft import FFT

window_map = {
    'none': numpy.ones,
    'hann': numpy.hanning,
}


def _complex_dtype(dtype):
    if dtype in (numpy.float32, numpy.complex64):
        return numpy.complex64
    return numpy.complex128


def compute_psd(x, nfft, window='hann', normalize=False, out=None):
    """Windowed periodogram of `x`.

    The samples are multiplied by the window, zero-padded to `nfft`,
    Fourier transformed and reduced to their squared magnitude. Any `nfft`
    is accepted; prime lengths go through Rader's algorithm when the native
    backend is active.

    Parameters
    ----------
    x : array_like
        Real or complex samples, ``len(x) <= nfft``.
    nfft : int
        Transform size.
    window : {'hann', 'none', numpy.ndarray}
        Window applied to the samples, or a `numpy.ndarray` of ``len(x)``
        values that specifies the window.
    normalize : bool
        If True, scale the result so that its peak is 1.
    out : numpy.ndarray, optional
        Real array of length `nfft` receiving the result.

    Returns
    -------
    psd : numpy.ndarray
        Real array of length `nfft`, in natural FFT order.

    Raises
    ------
    ValueError
        For an unknown window, a window of the wrong length, or more
        samples than `nfft`.
    """
    x = numpy.asarray(x)
    num_samples = len(x)

    # sanity checks
    if (not isinstance(nfft, numbers.Integral) or isinstance(nfft, bool)
            or nfft <= 0):
        raise ValueError('nfft must be a positive integer')
    if num_samples > nfft:
        raise ValueError('Got {0} samples for a transform of size '
                         '{1}'.format(num_samples, nfft))
    if isinstance(window, numpy.ndarray) and window.size != num_samples:
        raise ValueError('Invalid window: incorrect window length')
    if not isinstance(window, numpy.ndarray) and window not in window_map:
        raise ValueError('Invalid window: unknown window {!r}'.format(window))

    if not isinstance(window, numpy.ndarray):
        window = window_map[window](num_samples)

    dtype = _complex_dtype(x.dtype)
    segment = numpy.zeros(nfft, dtype=dtype)
    segment[:num_samples] = x * window
    segment_tilde = numpy.zeros(nfft, dtype=dtype)

    with FFT(segment, segment_tilde) as plan:
        plan.execute()

    psd = abs(segment_tilde * segment_tilde.conj())
    if normalize:
        peak = psd.max()
        if peak > 0:
            psd /= peak

    if out is not None:
        out[:] = psd
        return out
    return psd
