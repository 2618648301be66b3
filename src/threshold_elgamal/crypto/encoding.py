"""Plaintext validation and ciphertext serialization.

Ciphertext components are arbitrary-precision integers, so they travel as
decimal strings; conversion in both directions is exact.  Plaintext vectors
(for example a voter's scores) arrive as numpy arrays and are converted to
object arrays of Python ints before they meet the big-integer arithmetic.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np

from ..errors import RangeError
from .elgamal import EncryptedMessage


def as_plaintext_array(values, prime: int) -> np.ndarray:
    """Validate an array of plaintexts for direct ElGamal encoding.

    Args:
        values: Array-like of integers, any shape.
        prime: Group modulus; every value must lie in ``[0, prime)``.

    Returns:
        An object-dtype array of Python ints with the shape of *values*.

    Raises:
        ValueError: If *values* is empty or not integral.
        RangeError: If a value is negative or not below *prime*.
    """
    arr = np.asarray(values)
    if arr.size == 0:
        raise ValueError("values must not be empty")

    integral = np.issubdtype(arr.dtype, np.integer) or (
        arr.dtype == object
        and all(
            isinstance(v, (int, np.integer)) and not isinstance(v, bool)
            for v in arr.flat
        )
    )
    if not integral:
        raise ValueError(f"values must be integers, got dtype {arr.dtype}")

    # Compare as Python ints; the modulus does not fit in any numpy dtype.
    plain = np.empty(arr.shape, dtype=object)
    for pos, v in np.ndenumerate(arr):
        v = int(v)
        if not 0 <= v < prime:
            raise RangeError(f"value at {pos} must be in [0, prime)")
        plain[pos] = v
    return plain


# ---------------------------------------------------------------------------
# Ciphertext <-> decimal strings
# ---------------------------------------------------------------------------

def _parse_decimal(text: str, name: str) -> int:
    if not isinstance(text, str) or not (text.isascii() and text.isdigit()):
        raise ValueError(f"{name} must be a non-negative decimal string")
    return int(text)


def ciphertext_to_strings(encrypted_message: EncryptedMessage) -> tuple[str, str]:
    """Return ``(c1, c2)`` as decimal strings."""
    return str(encrypted_message.c1), str(encrypted_message.c2)


def ciphertext_from_strings(c1: str, c2: str) -> EncryptedMessage:
    """Inverse of :func:`ciphertext_to_strings`.

    Raises:
        ValueError: If either component is not a plain decimal string.
    """
    return EncryptedMessage(_parse_decimal(c1, "c1"), _parse_decimal(c2, "c2"))


def ciphertext_to_dict(encrypted_message: EncryptedMessage) -> dict[str, str]:
    c1, c2 = ciphertext_to_strings(encrypted_message)
    return {"c1": c1, "c2": c2}


def ciphertext_from_dict(data: Mapping[str, str]) -> EncryptedMessage:
    """Parse ``{"c1": "...", "c2": "..."}`` back into an :class:`EncryptedMessage`.

    Raises:
        ValueError: If a key is missing or a component is malformed.
    """
    try:
        c1, c2 = data["c1"], data["c2"]
    except KeyError as exc:
        raise ValueError(f"missing ciphertext component {exc.args[0]!r}") from None
    return ciphertext_from_strings(c1, c2)
