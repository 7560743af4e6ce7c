"""
wordrng.engines.seeding

Seed expansion: one integer seed -> the seed words an engine needs.

Design: Expansion goes through numpy's SeedSequence so that nearby integer
seeds give unrelated engine states and the same seed always gives the same
words.
"""

from typing import List

import numpy as np

from wordrng.core.exceptions import InvalidArgumentError
from wordrng.core.types import WORD32, WORD64
from .base import WordSource


def expand_seed(seed: int, n_values: int, bits: int = WORD64) -> List[int]:
    """Expand one non-negative integer into n_values words of `bits` width.

    Args:
        seed: Any non-negative integer (arbitrary size).
        n_values: Number of words to produce.
        bits: 32 or 64.

    Returns:
        List of Python ints.
    """
    if seed < 0:
        raise InvalidArgumentError(f"seed must be non-negative, got {seed}")
    if bits not in (WORD32, WORD64):
        raise InvalidArgumentError(f"bits must be 32 or 64, got {bits}")

    dtype = np.uint32 if bits == WORD32 else np.uint64
    words = np.random.SeedSequence(seed).generate_state(n_values, dtype=dtype)
    return [int(w) for w in words]


def seed_for(engine_cls: type, seed: int) -> List[int]:
    """Seed values for an engine class, derived from one integer."""
    if not issubclass(engine_cls, WordSource):
        raise InvalidArgumentError(f"{engine_cls!r} is not a WordSource")
    return expand_seed(seed, engine_cls.seed_words, engine_cls.seed_bits)
