"""Threshold ElGamal encryption over RFC 7919 FFDHE groups."""

from __future__ import annotations

import logging

from .config import ThresholdConfig
from .crypto.elgamal import (
    EncryptedMessage,
    Parameters,
    decrypt,
    encrypt,
    generate_parameters,
    multiply_encrypted_values,
)
from .crypto.groups import GROUPS, GroupParameters, get_group
from .crypto.threshold import (
    Dealer,
    KeyShare,
    combine_decryption_shares,
    combine_public_keys,
    create_decryption_share,
    generate_key_shares,
    generate_keys,
    threshold_decrypt,
)
from .crypto.utils import mod_inv, mod_pow, random_in_range
from .errors import (
    ConfigurationError,
    DomainError,
    InsufficientSharesError,
    RangeError,
    ThresholdElGamalError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "GROUPS",
    "ConfigurationError",
    "Dealer",
    "DomainError",
    "EncryptedMessage",
    "GroupParameters",
    "InsufficientSharesError",
    "KeyShare",
    "Parameters",
    "RangeError",
    "ThresholdConfig",
    "ThresholdElGamalError",
    "combine_decryption_shares",
    "combine_public_keys",
    "create_decryption_share",
    "decrypt",
    "encrypt",
    "generate_key_shares",
    "generate_keys",
    "generate_parameters",
    "get_group",
    "mod_inv",
    "mod_pow",
    "multiply_encrypted_values",
    "random_in_range",
    "threshold_decrypt",
]
