#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions backing FieldElement.

* mod_inv: inverse modulo any modulus (Extended Euclidean Algorithm)
* mod_sqrt: square root modulo a prime (Tonelli-Shanks)
* is_prime: deterministic primality check for explorable moduli
"""

from math import isqrt

from ecdlp.exceptions import ECDLPValueError, NotInvertibleError
from ecdlp.utils import int_repr


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    The Extended Euclidean Algorithm keeps track of the remainders r
    and of the coefficients t such that t*a = r (mod m).
    NotInvertibleError is raised if gcd(a, m) != 1.
    """

    a %= m
    t, new_t = 0, 1
    r, new_r = m, a
    while new_r != 0:
        quotient = r // new_r
        t, new_t = new_t, t - quotient * new_t
        r, new_r = new_r, r - quotient * new_r

    if r != 1:
        raise NotInvertibleError(f"No inverse for {int_repr(a)} mod {int_repr(m)}")
    return t % m


def _no_root(a: int, p: int) -> ECDLPValueError:
    return ECDLPValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p); p must be a prime.

    Note that p - root is also a root.
    ECDLPValueError is raised if a is not a quadratic residue,
    Euler's criterion being used to tell.

    For p = 3 (mod 4) the root is a^((p+1)/4),
    otherwise the Tonelli-Shanks algorithm is used.
    Loops are bounded: a composite p raises instead of spinning forever.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    half = (p - 1) // 2
    if pow(a, half, p) != 1:
        raise _no_root(a, p)

    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)

    # p - 1 = q * 2^s, with q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    # any quadratic non-residue z
    z = 2
    while pow(z, half, p) != p - 1:
        z += 1
        if z == p:
            raise ECDLPValueError(f"no quadratic non-residue mod {int_repr(p)}")

    c = pow(z, q, p)
    t = pow(a, q, p)
    root = pow(a, (q + 1) // 2, p)
    while t != 1:
        # lowest i such that t^(2^i) = 1
        i, t2i = 0, t
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
            if i == s:
                raise _no_root(a, p)
        b = pow(c, 1 << (s - i - 1), p)
        s, c = i, b * b % p
        t, root = t * c % p, root * b % p

    return root


def is_prime(n: int) -> bool:
    "Return True if n is a prime, using trial division by odd numbers."

    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % d for d in range(3, isqrt(n) + 1, 2))
