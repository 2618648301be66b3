"""Encrypted tallying of score matrices.

Votes are arranged as a ``(voters, candidates)`` integer matrix.  Every cell
is encrypted under the group key, each candidate column is multiplied
homomorphically, and only the per-candidate products are ever decrypted.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .crypto.elgamal import EncryptedMessage, encrypt, multiply_encrypted_values
from .crypto.encoding import as_plaintext_array
from .crypto.groups import GroupParameters
from .crypto.threshold import (
    combine_decryption_shares,
    create_decryption_share,
    threshold_decrypt,
)

logger = logging.getLogger(__name__)

# Encrypts 1 under any key with r = 0; neutral for multiply_encrypted_values.
IDENTITY_CIPHERTEXT = EncryptedMessage(1, 1)


def _as_matrix(votes, prime: int) -> np.ndarray:
    matrix = as_plaintext_array(votes, prime)
    if matrix.ndim != 2:
        raise ValueError(
            f"votes must be a (voters, candidates) matrix, got {matrix.ndim}-D"
        )
    return matrix


def encrypt_votes(
    votes,
    public_key: int,
    group: GroupParameters,
) -> list[list[EncryptedMessage]]:
    """Encrypt every cell of a ``(voters, candidates)`` vote matrix.

    Args:
        votes: 2-D array-like of non-negative integers below the group prime.
        public_key: Group public key, usually from ``combine_public_keys``.
        group: Group the key belongs to.

    Returns:
        Ciphertexts in the same row/column layout as *votes*.

    Raises:
        ValueError: If *votes* is empty, not integral or not 2-D.
        RangeError: If a vote is outside ``[0, prime)``.
    """
    matrix = _as_matrix(votes, group.prime)
    logger.debug(
        "Encrypting %d ballots for %d candidates", matrix.shape[0], matrix.shape[1]
    )
    return [
        [encrypt(vote, group.prime, group.generator, public_key) for vote in row]
        for row in matrix
    ]


def tally_encrypted(
    encrypted_votes: Sequence[Sequence[EncryptedMessage]],
    prime: int,
) -> list[EncryptedMessage]:
    """Multiply each candidate column of *encrypted_votes* homomorphically."""
    if not encrypted_votes:
        raise ValueError("encrypted_votes must not be empty")
    candidates = len(encrypted_votes[0])
    if any(len(row) != candidates for row in encrypted_votes):
        raise ValueError("all ballots must cover the same candidates")

    tallies = [IDENTITY_CIPHERTEXT] * candidates
    for row in encrypted_votes:
        tallies = [
            multiply_encrypted_values(total, ballot, prime)
            for total, ballot in zip(tallies, row)
        ]
    return tallies


def decrypt_tallies(
    tallies: Sequence[EncryptedMessage],
    private_key_shares: Sequence[int],
    prime: int,
) -> np.ndarray:
    """Threshold-decrypt each tally with the quorum's private key shares.

    In a deployment every holder computes its own decryption share; this
    helper does all of them in one place and is meant for simulations and
    tests.

    Returns:
        Object-dtype array of plaintext products, one per candidate.
    """
    results = np.empty(len(tallies), dtype=object)
    for i, tally in enumerate(tallies):
        shares = [
            create_decryption_share(tally, private_key, prime)
            for private_key in private_key_shares
        ]
        combined = combine_decryption_shares(shares, prime)
        results[i] = threshold_decrypt(tally, combined, prime)
    return results


def expected_tallies(votes) -> np.ndarray:
    """Plaintext column products of *votes*, without overflow."""
    matrix = np.asarray(votes, dtype=object)
    if matrix.ndim != 2:
        raise ValueError(
            f"votes must be a (voters, candidates) matrix, got {matrix.ndim}-D"
        )
    return np.prod(matrix, axis=0)
