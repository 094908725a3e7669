"""
Pytest configuration and shared fixtures for find_motion tests.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return np.random.default_rng(2017)


@pytest.fixture
def textured_frame(rng):
    """Factory for random uint8 frames of a given (height, width)."""
    def make(height, width):
        return rng.integers(0, 256, size=(height, width), dtype=np.uint8)
    return make


@pytest.fixture
def shifted_pair(rng):
    """
    (prev, curr) 96x96 frames where curr(x, y) == prev(x + 3, y - 2) everywhere,
    so every estimated block moves by (3, -2).
    """
    height, width = 96, 96
    big = rng.integers(0, 256, size=(height + 2, width + 3), dtype=np.uint8)
    prev = np.ascontiguousarray(big[2:2 + height, 0:width])
    curr = np.ascontiguousarray(big[0:height, 3:3 + width])
    return prev, curr
