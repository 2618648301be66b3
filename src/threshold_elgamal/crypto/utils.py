"""Modular arithmetic and randomness primitives for the ElGamal core."""

from __future__ import annotations

import secrets

from ..errors import DomainError, RangeError


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Compute *base* ** *exp* mod *mod* using Python's built-in three-arg pow.

    Args:
        base: The base integer.
        exp: The exponent (must be non-negative; pass an inverse from
             :func:`mod_inv` instead of a negative exponent).
        mod: The modulus (must be > 0).

    Returns:
        The result of modular exponentiation, in ``[0, mod)``.

    Raises:
        ValueError: If *mod* is not positive.
        RangeError: If *exp* is negative.
    """
    if mod <= 0:
        raise ValueError("mod must be positive")
    if exp < 0:
        raise RangeError("negative exponents are not supported")
    return pow(base, exp, mod)


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclidean algorithm returning (gcd, x, y) with a*x + b*y = gcd.

    Iterative, since a recursive version exceeds the interpreter's recursion
    limit on 2048-bit and larger operands.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return old_r, old_x, old_y


def mod_inv(a: int, mod: int) -> int:
    """Compute the modular multiplicative inverse of *a* modulo *mod*.

    Uses the extended Euclidean algorithm.

    Args:
        a: The integer to invert.
        mod: The modulus (must be > 1).

    Returns:
        An integer *x* in [0, mod) such that (a * x) % mod == 1.

    Raises:
        ValueError: If *mod* < 2.
        DomainError: If *a* and *mod* are not coprime.
    """
    if mod < 2:
        raise ValueError("mod must be >= 2")
    a = a % mod
    gcd, x, _ = _extended_gcd(a, mod)
    if gcd != 1:
        raise DomainError(
            f"inverse does not exist (gcd={gcd})"
        )
    return x % mod


def random_in_range(min_value: int, max_value: int) -> int:
    """Draw a uniformly distributed integer from ``[min_value, max_value)``.

    A value with the bit length of the range width is drawn from the
    operating system CSPRNG (:mod:`secrets`) and rejected until it falls
    inside the range, which removes modulo bias.  The number of rejections
    depends only on the range width, never on the returned value; it is an
    accepted timing channel and no attempt is made to hide it.

    Args:
        min_value: Inclusive lower bound.
        max_value: Exclusive upper bound.

    Returns:
        An integer *r* with ``min_value <= r < max_value``.

    Raises:
        ValueError: If the range is empty.
    """
    span = max_value - min_value
    if span <= 0:
        raise ValueError(
            f"empty range [{min_value}, {max_value})"
        )
    bits = span.bit_length()
    while True:
        candidate = secrets.randbits(bits)
        if candidate < span:
            return min_value + candidate
