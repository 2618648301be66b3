"""
Tests for the modular arithmetic helpers: exponentiation, inversion and
range-bounded CSPRNG sampling.
"""

from __future__ import annotations

import pytest

from threshold_elgamal.crypto import utils
from threshold_elgamal.crypto.utils import mod_inv, mod_pow, random_in_range
from threshold_elgamal.errors import DomainError, RangeError


def test_mod_pow_matches_small_cases():
    assert mod_pow(4, 13, 497) == 445
    assert mod_pow(2, 0, 7) == 1
    assert mod_pow(10, 5, 1) == 0


def test_mod_pow_rejects_bad_arguments():
    with pytest.raises(ValueError, match="mod must be positive"):
        mod_pow(2, 3, 0)
    with pytest.raises(RangeError, match="negative exponents"):
        mod_pow(2, -1, 7)


def test_mod_inv_small_values():
    assert mod_inv(3, 11) == 4
    assert mod_inv(10, 17) == 12
    # Negative inputs are normalised into the field first.
    assert mod_inv(-3, 11) == 7


def test_mod_inv_large_modulus(group):
    """Iterative extended GCD handles 2048-bit operands without recursion."""
    p = group.prime
    for a in (2, 859, p - 1, random_in_range(1, p)):
        inv = mod_inv(a, p)
        assert 0 <= inv < p
        assert (a * inv) % p == 1


def test_mod_inv_fails_when_not_coprime():
    with pytest.raises(DomainError, match="inverse does not exist"):
        mod_inv(6, 9)
    with pytest.raises(DomainError):
        mod_inv(0, 13)
    with pytest.raises(ValueError, match="mod must be >= 2"):
        mod_inv(1, 1)


def test_random_in_range_stays_in_half_open_range():
    seen = {random_in_range(5, 8) for _ in range(300)}
    assert seen == {5, 6, 7}


def test_random_in_range_single_value():
    assert random_in_range(41, 42) == 41


def test_random_in_range_rejects_empty_range():
    with pytest.raises(ValueError, match="empty range"):
        random_in_range(3, 3)
    with pytest.raises(ValueError):
        random_in_range(10, 2)


def test_random_in_range_retries_out_of_range_draws(monkeypatch):
    """Draws >= the range width are discarded rather than reduced."""
    draws = iter([7, 5, 2])
    requested_bits = []

    def fake_randbits(bits):
        requested_bits.append(bits)
        return next(draws)

    monkeypatch.setattr(utils.secrets, "randbits", fake_randbits)
    assert random_in_range(100, 105) == 102
    assert requested_bits == [3, 3, 3]


def test_random_in_range_large_bounds(group):
    p = group.prime
    for _ in range(20):
        r = random_in_range(2, p - 1)
        assert 2 <= r <= p - 2
