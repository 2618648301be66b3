"""Threshold ElGamal: Shamir-dealt key shares and share-wise decryption.

The flow mirrors a simple trusted-dealer setup:

1. A :class:`Dealer` samples one polynomial for the session and hands each
   participant a :class:`KeyShare` via :meth:`Dealer.generate_keys`.
2. The public halves are combined into the group key with
   :func:`combine_public_keys`; messages are encrypted under it with
   :func:`~threshold_elgamal.crypto.elgamal.encrypt`.
3. Each participant of the quorum calls :func:`create_decryption_share`
   on the ciphertext; only that value leaves the participant.
4. :func:`combine_decryption_shares` multiplies the shares and
   :func:`threshold_decrypt` strips the combined factor from ``c2``.

Combination is additive in the exponent: the product of the public shares
is ``g^(Σ s_i)`` and the product of the decryption shares is
``c1^(Σ s_i)``.  Decryption is therefore exact when the decrypting quorum
is the set of participants whose public shares formed the group key, in any
order.  A smaller or different set does not raise unless an explicit
*threshold* is passed to :func:`combine_decryption_shares`; it silently
yields a wrong plaintext.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from ..errors import ConfigurationError, InsufficientSharesError, RangeError
from .elgamal import EncryptedMessage
from .groups import DEFAULT_BIT_LENGTH, GroupParameters, get_group
from .sss import evaluate_share, generate_polynomial
from .utils import mod_inv, mod_pow

if TYPE_CHECKING:
    from ..config import ThresholdConfig

logger = logging.getLogger(__name__)


def check_threshold(participants: int, threshold: int) -> None:
    """Raise :class:`ConfigurationError` unless 1 <= threshold <= participants."""
    if not 1 <= threshold <= participants:
        raise ConfigurationError(
            "threshold must satisfy 1 <= threshold <= participants, "
            f"got threshold={threshold}, participants={participants}"
        )


@dataclass(frozen=True)
class KeyShare:
    """Key material owned by a single participant.

    Attributes:
        index: 1-based participant index.
        point: Evaluation point of the dealer polynomial.  Equal to
               *index* unless the share at *index* was zero.
        private_key: ``f(point) mod p``; never leaves the participant.
        public_key: ``g^private_key mod p``; safe to publish.
    """

    index: int
    point: int
    private_key: int
    public_key: int


@dataclass(frozen=True)
class Dealer:
    """One secret-sharing session: a group, a threshold and one polynomial.

    The polynomial is sampled once in :meth:`create` and every participant's
    share is evaluated from it, so all shares split the same master secret.
    """

    group: GroupParameters
    participants: int
    threshold: int
    coefficients: tuple[int, ...]

    def __post_init__(self) -> None:
        check_threshold(self.participants, self.threshold)
        if len(self.coefficients) != self.threshold:
            raise ConfigurationError(
                f"expected {self.threshold} coefficients, "
                f"got {len(self.coefficients)}"
            )

    def __repr__(self) -> str:
        return (
            f"Dealer(bit_length={self.group.bit_length}, "
            f"participants={self.participants}, threshold={self.threshold})"
        )

    @classmethod
    def create(
        cls,
        participants: int,
        threshold: int,
        bit_length: int = DEFAULT_BIT_LENGTH,
    ) -> "Dealer":
        """Validate the session settings and sample its polynomial.

        Raises:
            ConfigurationError: If *bit_length* is unsupported or the
                                threshold does not fit the participant
                                count.  Nothing is sampled in that case.
        """
        group = get_group(bit_length)
        check_threshold(participants, threshold)
        coefficients = tuple(generate_polynomial(threshold, group.prime))
        logger.debug(
            "Dealt %d-of-%d polynomial over the %d-bit group",
            threshold,
            participants,
            bit_length,
        )
        return cls(group, participants, threshold, coefficients)

    @classmethod
    def from_config(cls, config: "ThresholdConfig") -> "Dealer":
        """Build a dealer from a :class:`~threshold_elgamal.config.ThresholdConfig`."""
        return cls.create(config.participants, config.threshold, config.bit_length)

    def generate_keys(self, index: int) -> KeyShare:
        """Derive the key share of participant *index* (1-based)."""
        point, private_key = evaluate_share(
            self.coefficients, index, self.participants, self.group.prime
        )
        public_key = mod_pow(self.group.generator, private_key, self.group.prime)
        return KeyShare(index, point, private_key, public_key)

    def generate_key_shares(self) -> list[KeyShare]:
        """Derive the key shares of participants ``1..participants``."""
        return [
            self.generate_keys(index)
            for index in range(1, self.participants + 1)
        ]


def generate_keys(index: int, dealer: Dealer) -> KeyShare:
    """Return participant *index*'s share of *dealer*'s session."""
    return dealer.generate_keys(index)


def generate_key_shares(
    n: int,
    threshold: int,
    bit_length: int = DEFAULT_BIT_LENGTH,
) -> list[KeyShare]:
    """Deal a fresh *threshold*-of-*n* sharing and return all *n* shares.

    Args:
        n: Number of participants.
        threshold: Polynomial size, i.e. the quorum size.
        bit_length: FFDHE group selector (2048, 3072 or 4096).

    Returns:
        Shares for participant indices ``1..n``, in index order.

    Raises:
        ConfigurationError: If *bit_length* is unsupported or
                            ``1 <= threshold <= n`` does not hold.
    """
    return Dealer.create(n, threshold, bit_length).generate_key_shares()


def _check_elements(values: Sequence[int], prime: int, what: str) -> None:
    if len(values) == 0:
        raise ValueError(f"{what} must not be empty")
    for value in values:
        if not 1 <= value < prime:
            raise RangeError(f"{what} must be in [1, prime)")


def combine_public_keys(public_keys: Sequence[int], prime: int) -> int:
    """Multiply the published key shares into the group public key.

    The result does not depend on the order of *public_keys*.

    Raises:
        ValueError: If *public_keys* is empty.
        RangeError: If a share is not a non-zero element of the field.
    """
    _check_elements(public_keys, prime, "public key shares")
    result = 1
    for public_key in public_keys:
        result = (result * public_key) % prime
    return result


def create_decryption_share(
    encrypted_message: EncryptedMessage,
    private_key_share: int,
    prime: int,
) -> int:
    """Compute ``c1^private_key_share mod prime`` for one participant."""
    return mod_pow(encrypted_message.c1, private_key_share, prime)


def combine_decryption_shares(
    decryption_shares: Sequence[int],
    prime: int,
    threshold: Optional[int] = None,
) -> int:
    """Multiply the quorum's decryption shares into one decryption factor.

    Args:
        decryption_shares: Shares from :func:`create_decryption_share`, in
                           any order.
        prime: Group modulus.
        threshold: Optional quorum size.  When given, fewer shares raise
                   instead of producing a wrong factor.

    Returns:
        The combined decryption factor.

    Raises:
        ValueError: If *decryption_shares* is empty.
        RangeError: If a share is not a non-zero element of the field.
        InsufficientSharesError: If *threshold* is given and not met.
    """
    if threshold is not None and len(decryption_shares) < threshold:
        raise InsufficientSharesError(
            f"Need at least {threshold} decryption shares, "
            f"got {len(decryption_shares)}"
        )
    _check_elements(decryption_shares, prime, "decryption shares")
    result = 1
    for share in decryption_shares:
        result = (result * share) % prime
    return result


def threshold_decrypt(
    encrypted_message: EncryptedMessage,
    combined_decryption_shares: int,
    prime: int,
) -> int:
    """Recover the plaintext as ``c2 · combined^-1 mod prime``."""
    inverse = mod_inv(combined_decryption_shares, prime)
    return (encrypted_message.c2 * inverse) % prime
