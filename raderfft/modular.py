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
"""Integer utilities used when planning transforms: primality, factoring
and the multiplicative group of integers modulo a prime.
"""


def is_prime(n):
    """Return True if `n` is a prime number."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    k = 5
    while k * k <= n:
        if n % k == 0 or n % (k + 2) == 0:
            return False
        k += 6
    return True


def prime_factors(n):
    """Return the distinct prime factors of `n` in increasing order.

    Parameters
    ----------
    n : int
        A positive integer.

    Returns
    -------
    factors : list of int
        Distinct primes dividing `n`; empty for ``n == 1``.

    Raises
    ------
    ValueError
        For non-positive `n`.
    """
    if n < 1:
        raise ValueError('n must be a positive integer')
    factors = []
    k = 2
    while k * k <= n:
        if n % k == 0:
            factors.append(k)
            while n % k == 0:
                n //= k
        k += 1
    if n > 1:
        factors.append(n)
    return factors


def smallest_factor(n):
    """Return the smallest prime factor of `n` (``n >= 2``)."""
    if n < 2:
        raise ValueError('n must be at least 2')
    return prime_factors(n)[0]


def modpow(base, exponent, modulus):
    """Compute ``base**exponent mod modulus``.

    Parameters
    ----------
    base : int
    exponent : int
        Non-negative exponent.
    modulus : int
        Positive modulus.

    Returns
    -------
    result : int
        The residue in ``[0, modulus)``.
    """
    if exponent < 0:
        raise ValueError('exponent must be non-negative')
    if modulus < 1:
        raise ValueError('modulus must be a positive integer')
    return pow(base, exponent, modulus)


def primitive_root(p):
    """Find the smallest primitive root of the prime `p`.

    A primitive root `g` generates the multiplicative group modulo `p`, so
    that ``{g**1, ..., g**(p-1)} mod p`` enumerates every non-zero residue.
    Candidates are tested with the classical criterion: `g` is a generator
    when ``g**((p-1)/q) != 1 (mod p)`` for every prime `q` dividing ``p-1``.

    Parameters
    ----------
    p : int
        A prime. Primality is not checked here.

    Returns
    -------
    g : int
        The smallest primitive root of `p`.

    Raises
    ------
    ValueError
        If `p` is smaller than 2, or no generator was found.
    """
    if p < 2:
        raise ValueError('p must be a prime')
    if p == 2:
        return 1
    factors = prime_factors(p - 1)
    for g in range(2, p):
        if all(modpow(g, (p - 1) // q, p) != 1 for q in factors):
            return g
    raise ValueError('{0} has no primitive root; is it prime?'.format(p))
