# colorblend test configuration and shared fixtures
from __future__ import annotations

import pytest

from colorblend.types import RGBA

# ─────────────────────────────────────────────────────────────────────────────
# Color fixtures (0-255 channels)
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def black() -> RGBA:
    """Opaque black."""
    return RGBA(0, 0, 0, 1.0)


@pytest.fixture
def white() -> RGBA:
    """Opaque white."""
    return RGBA(255, 255, 255, 1.0)


@pytest.fixture
def backdrop() -> RGBA:
    """Opaque blue-gray backdrop."""
    return RGBA(100, 150, 200, 1.0)


@pytest.fixture
def half_gray() -> RGBA:
    """Dark gray at half opacity."""
    return RGBA(50, 50, 50, 0.5)


# ─────────────────────────────────────────────────────────────────────────────
# Color fixtures (unit channels)
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def unit_backdrop() -> RGBA:
    """Opaque backdrop with all channels 0.0 - 1.0."""
    return RGBA(0.2, 0.5, 0.8, 1.0)


@pytest.fixture
def unit_source() -> RGBA:
    """Opaque source with all channels 0.0 - 1.0."""
    return RGBA(0.9, 0.3, 0.1, 1.0)
