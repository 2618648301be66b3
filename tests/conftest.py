from __future__ import annotations

import pytest

from threshold_elgamal.crypto.groups import get_group


@pytest.fixture
def group():
    """The default 2048-bit FFDHE group."""
    return get_group(2048)
