"""
Tests for encrypted tallying of vote matrices.
"""

from __future__ import annotations

import numpy as np
import pytest

from threshold_elgamal.config import ThresholdConfig
from threshold_elgamal.crypto.threshold import Dealer, combine_public_keys
from threshold_elgamal.tally import (
    IDENTITY_CIPHERTEXT,
    decrypt_tallies,
    encrypt_votes,
    expected_tallies,
    tally_encrypted,
)


@pytest.fixture
def session():
    config = ThresholdConfig(participants=3, threshold=3)
    key_shares = Dealer.from_config(config).generate_key_shares()
    public_key = combine_public_keys(
        [ks.public_key for ks in key_shares], config.group.prime
    )
    return config.group, key_shares, public_key


def test_vote_lists_multiply_to_expected_tallies(session):
    group, key_shares, public_key = session
    # Columns are the vote lists [6, 7, 1] and [10, 7, 4].
    votes = np.array([[6, 10], [7, 7], [1, 4]])

    encrypted = encrypt_votes(votes, public_key, group)
    tallies = tally_encrypted(encrypted, group.prime)
    result = decrypt_tallies(
        tallies, [ks.private_key for ks in key_shares], group.prime
    )
    assert list(result) == [42, 280]
    assert list(expected_tallies(votes)) == [42, 280]


def test_random_scores_match_plaintext_products(session):
    group, key_shares, public_key = session
    rng = np.random.default_rng()
    votes = rng.integers(1, 11, size=(3, 4))

    tallies = tally_encrypted(encrypt_votes(votes, public_key, group), group.prime)
    result = decrypt_tallies(
        tallies, [ks.private_key for ks in key_shares], group.prime
    )
    assert np.array_equal(result, expected_tallies(votes))


def test_single_ballot_tally_is_the_ballot(session):
    group, key_shares, public_key = session
    tallies = tally_encrypted(encrypt_votes([[5, 9]], public_key, group), group.prime)
    assert tallies[0] != IDENTITY_CIPHERTEXT
    result = decrypt_tallies(tallies, [ks.private_key for ks in key_shares], group.prime)
    assert list(result) == [5, 9]


def test_encrypt_votes_requires_matrix(session):
    group, _, public_key = session
    with pytest.raises(ValueError, match="matrix"):
        encrypt_votes([1, 2, 3], public_key, group)


def test_tally_rejects_ragged_or_empty_input(session):
    group, _, public_key = session
    encrypted = encrypt_votes([[1, 2], [3, 4]], public_key, group)
    with pytest.raises(ValueError, match="same candidates"):
        tally_encrypted([encrypted[0], encrypted[1][:1]], group.prime)
    with pytest.raises(ValueError, match="must not be empty"):
        tally_encrypted([], group.prime)


def test_expected_tallies_do_not_overflow():
    votes = [[2**40, 3], [2**40, 5]]
    assert list(expected_tallies(votes)) == [2**80, 15]
