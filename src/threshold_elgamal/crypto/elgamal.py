"""Multiplicatively homomorphic ElGamal over FFDHE groups.

Messages are small non-negative integers encoded directly as field
elements, without padding.  The scheme is therefore not semantically secure
for arbitrary data; it is meant for aggregating small numeric values such as
votes, where

    E(m1) · E(m2) = E(m1 · m2 mod p)

lets a tally be computed without decrypting individual ciphertexts.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass

from ..errors import RangeError
from .groups import DEFAULT_BIT_LENGTH, get_group
from .utils import mod_inv, mod_pow, random_in_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncryptedMessage:
    """An ElGamal ciphertext ``(c1, c2) = (g^r, y^r · m)`` modulo *p*."""

    c1: int
    c2: int


@dataclass(frozen=True)
class Parameters:
    """Group parameters together with a freshly drawn key pair.

    Attributes:
        prime: Group modulus *p*.
        generator: Group generator *g*.
        public_key: ``g^private_key mod p``.
        private_key: Secret exponent in ``[2, p - 2]``.
    """

    prime: int
    generator: int
    public_key: int
    private_key: int


def generate_parameters(bit_length: int = DEFAULT_BIT_LENGTH) -> Parameters:
    """Select the FFDHE group for *bit_length* and draw a key pair in it.

    Args:
        bit_length: 2048, 3072 or 4096.

    Returns:
        A :class:`Parameters` instance.

    Raises:
        ConfigurationError: If *bit_length* is not supported.
    """
    group = get_group(bit_length)
    private_key = random_in_range(2, group.prime - 1)
    public_key = mod_pow(group.generator, private_key, group.prime)
    logger.debug("Generated %d-bit ElGamal key pair", bit_length)
    return Parameters(group.prime, group.generator, public_key, private_key)


def encrypt(
    message: int,
    prime: int,
    generator: int,
    public_key: int,
) -> EncryptedMessage:
    """Encrypt *message* under *public_key*.

    A fresh ephemeral exponent is drawn for every call.

    Raises:
        RangeError: If *message* is not in ``[0, prime)``.  The check runs
                    before any randomness is consumed.
    """
    message = operator.index(message)
    if not 0 <= message < prime:
        raise RangeError("message must be in [0, prime)")

    r = random_in_range(1, prime - 1)
    c1 = mod_pow(generator, r, prime)
    c2 = (mod_pow(public_key, r, prime) * message) % prime
    return EncryptedMessage(c1, c2)


def decrypt(
    encrypted_message: EncryptedMessage,
    prime: int,
    private_key: int,
) -> int:
    """Decrypt *encrypted_message* with a single-party *private_key*.

    Returns:
        ``c2 · (c1^private_key)^-1 mod prime``.

    Raises:
        DomainError: If ``c1^private_key`` is not invertible, which only
                     happens for a malformed ciphertext.
    """
    ax = mod_pow(encrypted_message.c1, private_key, prime)
    return (mod_inv(ax, prime) * encrypted_message.c2) % prime


def multiply_encrypted_values(
    value1: EncryptedMessage,
    value2: EncryptedMessage,
    prime: int,
) -> EncryptedMessage:
    """Homomorphically multiply two ciphertexts under the same key.

    The result decrypts to the product of the two plaintexts modulo
    *prime*.  Neither operand is modified.
    """
    return EncryptedMessage(
        (value1.c1 * value2.c1) % prime,
        (value1.c2 * value2.c2) % prime,
    )
