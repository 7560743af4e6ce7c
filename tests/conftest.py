"""
Pytest configuration and shared fixtures for wordrng tests.
"""

import pytest

from wordrng.config.schema import WordRngConfig
from wordrng.core.rng import RandomGenerator
from wordrng.engines import SplitMix64, Pcg32, create_default_registry


@pytest.fixture
def rng():
    """Provide seeded generator for reproducible tests."""
    return RandomGenerator.from_seed(42)


@pytest.fixture
def splitmix():
    """Provide SplitMix64 with a fixed seed (64-bit native)."""
    return SplitMix64(1234567)


@pytest.fixture
def pcg():
    """Provide Pcg32 seeded like the reference demo (32-bit native)."""
    return Pcg32(42, 54)


@pytest.fixture
def default_config():
    """Provide default WordRngConfig."""
    return WordRngConfig()


@pytest.fixture
def minimal_config():
    """Provide minimal WordRngConfig for fast tests."""
    return WordRngConfig.minimal()


@pytest.fixture
def default_registry():
    """Provide registry of every bundled engine."""
    return create_default_registry()
