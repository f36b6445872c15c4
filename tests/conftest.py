"""Shared fixtures for SpaceRocks tests."""

import pytest

from spacerocks.core.sampling import Sampler
from spacerocks.field.generator import AsteroidGenerator


@pytest.fixture
def sampler():
    """Seeded random source."""
    return Sampler(seed=1234)


@pytest.fixture
def generator(sampler):
    """Asteroid generator sharing the seeded sampler."""
    return AsteroidGenerator(sampler=sampler)
