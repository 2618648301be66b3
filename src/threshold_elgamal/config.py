"""Session configuration for threshold ElGamal deployments."""

from __future__ import annotations

from dataclasses import dataclass

from .crypto.groups import DEFAULT_BIT_LENGTH, GroupParameters, get_group
from .crypto.threshold import check_threshold


@dataclass(frozen=True)
class ThresholdConfig:
    """Settings for one key-sharing session.

    Validation happens on construction, so an invalid configuration is
    rejected before any key material exists.

    Attributes:
        participants: Number of key-share holders (n).
        threshold: Size of the decrypting quorum (t).
        bit_length: FFDHE group selector: 2048, 3072 or 4096.
    """

    participants: int = 3
    threshold: int = 3
    bit_length: int = DEFAULT_BIT_LENGTH

    def __post_init__(self) -> None:
        get_group(self.bit_length)
        check_threshold(self.participants, self.threshold)

    @property
    def group(self) -> GroupParameters:
        return get_group(self.bit_length)
