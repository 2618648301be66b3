"""
Tests for the FFDHE group table and session configuration.
"""

from __future__ import annotations

import pytest

from threshold_elgamal.config import ThresholdConfig
from threshold_elgamal.crypto.groups import GROUPS, SUPPORTED_BIT_LENGTHS, get_group
from threshold_elgamal.crypto.threshold import Dealer
from threshold_elgamal.errors import ConfigurationError, ThresholdElGamalError


@pytest.mark.parametrize(
    "bit_length, security_level", [(2048, 103), (3072, 125), (4096, 150)]
)
def test_group_table_entries(bit_length, security_level):
    group = get_group(bit_length)
    assert group.bit_length == bit_length
    assert group.prime.bit_length() == bit_length
    assert group.generator == 2
    assert group.security_level == security_level
    # RFC 7919 primes have their 64 low bits set.
    assert group.prime % (1 << 64) == (1 << 64) - 1


def test_ffdhe2048_prime_edges():
    prime = get_group(2048).prime
    assert str(prime).startswith("32317006071311007300153513477825163362488057")
    assert str(prime).endswith("2839127039")


def test_group_table_is_read_only():
    assert SUPPORTED_BIT_LENGTHS == (2048, 3072, 4096)
    with pytest.raises(TypeError):
        GROUPS[1024] = GROUPS[2048]


@pytest.mark.parametrize("bit_length", [1024, 2047, 8192, "2048", None])
def test_unsupported_bit_length(bit_length):
    with pytest.raises(ConfigurationError, match="Unsupported bit length"):
        get_group(bit_length)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        get_group(512)
    assert issubclass(ConfigurationError, ThresholdElGamalError)


def test_config_defaults():
    config = ThresholdConfig()
    assert (config.participants, config.threshold, config.bit_length) == (3, 3, 2048)
    assert config.group is get_group(2048)


@pytest.mark.parametrize(
    "participants, threshold, bit_length",
    [(3, 4, 2048), (3, 0, 2048), (0, 0, 2048), (5, 3, 1024)],
)
def test_config_rejects_invalid_settings(participants, threshold, bit_length):
    with pytest.raises(ConfigurationError):
        ThresholdConfig(participants, threshold, bit_length)


def test_dealer_from_config():
    dealer = Dealer.from_config(ThresholdConfig(participants=4, threshold=2))
    assert dealer.participants == 4
    assert dealer.threshold == 2
    assert len(dealer.coefficients) == 2
    assert dealer.group.bit_length == 2048
