"""Shamir secret sharing over the prime field of an FFDHE group.

A dealer samples one polynomial

    f(x) = a_0 + a_1·x + ... + a_{t-1}·x^{t-1}  mod p

whose constant term ``a_0`` is the master private key, and hands participant
*i* the value ``f(x_i)``.  Any *t* distinct points determine ``f`` and hence
``a_0``; fewer reveal nothing about it.

A share equal to zero would give its holder the identity element as public
key.  :func:`evaluate_share` therefore moves such a participant to the next
point in the arithmetic progression ``index, index + n, index + 2n, ...``.
The progression only depends on the participant index and the participant
count, so it can be replayed from the same polynomial and never lands on
another participant's primary point.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .utils import mod_inv, mod_pow, random_in_range

logger = logging.getLogger(__name__)


def generate_polynomial(threshold: int, prime: int) -> list[int]:
    """Sample the coefficients of a random polynomial of degree *threshold* - 1.

    Args:
        threshold: Number of coefficients, i.e. the number of points needed
                   to reconstruct the polynomial.
        prime: Field modulus.

    Returns:
        ``[a_0, ..., a_{threshold-1}]`` where ``a_0`` is drawn from
        ``[2, prime - 2]`` and the remaining coefficients from
        ``[0, prime - 2]``.

    Raises:
        ValueError: If *threshold* < 1.
    """
    if threshold < 1:
        raise ValueError("threshold must be >= 1")
    coefficients = [random_in_range(2, prime - 1)]
    for _ in range(threshold - 1):
        coefficients.append(random_in_range(0, prime - 1))
    return coefficients


def evaluate_polynomial(coefficients: Sequence[int], x: int, prime: int) -> int:
    """Evaluate the polynomial with *coefficients* at *x* modulo *prime*."""
    result = 0
    for power, coefficient in enumerate(coefficients):
        result = (result + coefficient * mod_pow(x, power, prime)) % prime
    return result


def evaluate_share(
    coefficients: Sequence[int],
    index: int,
    participants: int,
    prime: int,
) -> tuple[int, int]:
    """Evaluate the share of participant *index*, skipping zero values.

    Args:
        coefficients: Polynomial coefficients from :func:`generate_polynomial`.
        index: 1-based participant index.
        participants: Total number of participants *n*; the step used when
                      a point evaluates to zero.
        prime: Field modulus.

    Returns:
        ``(point, value)`` where *point* is the first of ``index``,
        ``index + n``, ``index + 2n``, ... at which the polynomial is
        non-zero and *value* is the polynomial evaluated there.

    Raises:
        ValueError: If *index* is not in ``[1, participants]``.
    """
    if not 1 <= index <= participants:
        raise ValueError(
            f"index must be in [1, {participants}], got {index}"
        )
    point = index
    value = evaluate_polynomial(coefficients, point, prime)
    while value == 0:
        logger.warning(
            "Share for participant %d is zero at x=%d; moving to x=%d",
            index,
            point,
            point + participants,
        )
        point += participants
        value = evaluate_polynomial(coefficients, point, prime)
    return point, value


def reconstruct_secret(points: Sequence[tuple[int, int]], prime: int) -> int:
    """Recover ``f(0)`` from ``(x, f(x))`` pairs by Lagrange interpolation.

    Used to audit a dealing; threshold decryption never calls this.

    Args:
        points: At least *threshold* pairs with distinct, non-zero x.
        prime: Field modulus used when the shares were evaluated.

    Returns:
        The constant term of the interpolated polynomial.

    Raises:
        ValueError: If *points* is empty or contains duplicate x values.
    """
    if not points:
        raise ValueError("points must not be empty")
    xs = [x for x, _ in points]
    if len(set(xs)) != len(xs):
        raise ValueError("duplicate x-coordinate in points")

    secret = 0
    for j, (x_j, y_j) in enumerate(points):
        num = 1
        den = 1
        for m, x_m in enumerate(xs):
            if m == j:
                continue
            num = (num * -x_m) % prime
            den = (den * (x_j - x_m)) % prime
        secret = (secret + y_j * num * mod_inv(den, prime)) % prime
    return secret
