"""
wordrng.engines.base

WordSource contract shared by every engine.

Design: An engine implements one native-width primitive (next_word) and
one seeding hook (_load_seed). Width conversions, seed validation,
reseeding and state clearing are derived here once for all engines.

None of the engines is cryptographically secure. reseed() only uses the
operating system's secure random facility as seed material.
"""

import os
import warnings
from abc import ABC, abstractmethod
from typing import List, Tuple

from wordrng.core.exceptions import (
    EntropySourceError,
    InsufficientSeedMaterialError,
    InvalidArgumentError,
)
from wordrng.core.types import WORD32, WORD64
from wordrng.core.words import join32, mask


class WordSource(ABC):
    """Abstract source of fixed-width unsigned words.

    Subclasses set the class attributes below, keep their mutable state
    in self._state (a list of ints) and implement next_word() and
    _load_seed().

    Attributes:
        name: Registry name, e.g. "xoshiro256**".
        algorithm: Human-readable algorithm name.
        word_bits: Native output width (32 or 64).
        seed_words: Number of explicit seed values set_seed() requires.
        seed_bits: Width of each seed value.
        state_size: Number of ints in the internal state.

    Instances are not safe to share between threads: every draw mutates
    the state without locking. Give each thread its own engine or guard
    access with an external lock.
    """

    name: str = "word-source"
    algorithm: str = "WordSource"
    word_bits: int = WORD64
    seed_words: int = 1
    seed_bits: int = WORD64
    state_size: int = 1

    # Engines whose state must not be all zero (xor-shift style recurrences).
    forbids_zero_state: bool = False

    def __init__(self, *seed: int):
        self._state: List[int] = [0] * self.state_size
        if seed:
            self.set_seed(*seed)
        else:
            self.reseed()

    @abstractmethod
    def next_word(self) -> int:
        """Advance the state and return one native-width word."""
        pass

    @abstractmethod
    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        """Map validated seed values onto self._state.

        Args:
            seed: Exactly seed_words values, each masked to seed_bits.
        """
        pass

    @property
    def word_bytes(self) -> int:
        return self.word_bits // 8

    @property
    def state(self) -> Tuple[int, ...]:
        """Snapshot copy of the internal state."""
        return tuple(self._state)

    def algorithm_name(self) -> str:
        return self.algorithm

    def next32(self) -> int:
        """Return a 32-bit word.

        64-bit engines return the upper half of one draw.
        """
        if self.word_bits == WORD32:
            return self.next_word()
        return self.next_word() >> 32

    def next64(self) -> int:
        """Return a 64-bit word.

        32-bit engines concatenate two draws, first draw in the high half.
        """
        if self.word_bits == WORD64:
            return self.next_word()
        high = self.next_word()
        return join32(high, self.next_word())

    def set_seed(self, *values: int) -> None:
        """Replace the state from explicit seed values.

        Produces a reproducible sequence. Extra values beyond seed_words
        are ignored.

        Raises:
            InsufficientSeedMaterialError: Fewer than seed_words values.
            InvalidArgumentError: A value is negative or not an int.
        """
        if len(values) < self.seed_words:
            raise InsufficientSeedMaterialError(
                f"{self.algorithm} needs at least {self.seed_words} seed "
                f"values, got {len(values)}"
            )
        seed_mask = mask(self.seed_bits)
        checked = []
        for i, value in enumerate(values[:self.seed_words]):
            try:
                value = int(value)
            except (TypeError, ValueError):
                raise InvalidArgumentError(f"seed[{i}] must be an int, got {value!r}")
            if value < 0:
                raise InvalidArgumentError(f"seed[{i}] must be non-negative, got {value}")
            checked.append(value & seed_mask)

        self._load_seed(tuple(checked))

        if self.forbids_zero_state and not any(self._state):
            warnings.warn(
                f"{self.algorithm} seeded with an all-zero state; "
                "the stream will be stuck at zero",
                RuntimeWarning,
                stacklevel=2,
            )

    def reseed(self) -> None:
        """Replace the state with seed material from the OS entropy source.

        This does NOT make the stream cryptographically secure.

        Raises:
            EntropySourceError: The entropy source is unavailable.
        """
        n_bytes = self.seed_bits // 8
        try:
            raw = os.urandom(n_bytes * self.seed_words)
        except (NotImplementedError, OSError) as e:
            raise EntropySourceError(f"OS entropy source unavailable: {e}") from e

        values = [
            int.from_bytes(raw[i:i + n_bytes], "little")
            for i in range(0, len(raw), n_bytes)
        ]
        self.set_seed(*values)

    def clear(self) -> None:
        """Zero every state word.

        The engine produces a degenerate stream until it is seeded again.
        """
        for i in range(len(self._state)):
            self._state[i] = 0

    def words(self, count: int) -> List[int]:
        """Draw `count` native-width words."""
        return [self.next_word() for _ in range(count)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, word_bits={self.word_bits})"


class Engine32(WordSource):
    """Base for engines whose native output is a 32-bit word."""
    word_bits = WORD32
    seed_bits = WORD32


class Engine64(WordSource):
    """Base for engines whose native output is a 64-bit word."""
    word_bits = WORD64
    seed_bits = WORD64

