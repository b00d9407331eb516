"""Shared fixtures for Goldilocks field tests."""

import random
import pytest
from goldilocks.gf64 import P, rand_element


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def sample_elements(rng):
    """Boundary values plus 10 random GF(P) elements for property testing."""
    boundary = [0, 1, 2, P - 2, P - 1, 1 << 32, (1 << 32) - 1]
    return boundary + [rand_element(rng) for _ in range(10)]


@pytest.fixture
def unreduced_values():
    """Raw 64-bit values that are >= P, paired with their residues."""
    return [
        (P, 0),
        (P + 1, 1),
        (P + 8, 8),
        ((1 << 64) - 1, (1 << 64) - 1 - P),
    ]
