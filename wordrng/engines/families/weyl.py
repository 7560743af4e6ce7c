"""
wordrng.engines.families.weyl

Counter-driven engines: a Weyl sequence or plain counter is pushed through
a mixing function. SplitMix64, wyrand, Middle Square Weyl Sequence and
Squares.
"""

from typing import Tuple

from wordrng.core.types import MASK32, MASK64, WORD64
from wordrng.core.words import multiply_high_low
from ..base import Engine32, Engine64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def _swap_halves(value: int) -> int:
    return ((value >> 32) | (value << 32)) & MASK64


class SplitMix64(Engine64):
    """SplitMix64 (Steele, Lea & Flood), as used to seed other engines.

    SplitMix64(1234567) yields 6457827717110365317 first.
    """

    name = "splitmix64"
    algorithm = "SplitMix64"
    seed_words = 1
    state_size = 1

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[0] = seed[0]

    def next_word(self) -> int:
        self._state[0] = (self._state[0] + GOLDEN_GAMMA) & MASK64
        z = self._state[0]
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)


class Wyrand(Engine64):
    """wyrand (Wang Yi): Weyl counter mixed by one 64x64->128 multiply."""

    name = "wyrand"
    algorithm = "Wyrand"
    seed_words = 1
    state_size = 1

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[0] = seed[0]

    def next_word(self) -> int:
        self._state[0] = (self._state[0] + 0xA0761D6478BD642F) & MASK64
        s = self._state[0]
        high, low = multiply_high_low(s ^ 0xE7037ED1A0B428DB, s, WORD64)
        return high ^ low


class MiddleSquareWeyl(Engine32):
    """Middle Square Weyl Sequence (Widynski). State: [x, w, s]."""

    name = "msws"
    algorithm = "Middle Square Weyl Sequence"
    seed_words = 1
    seed_bits = WORD64
    state_size = 3

    INCREMENT = 0xB5AD4ECEDA1CE2A9

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = [seed[0], seed[0], self.INCREMENT]

    def next_word(self) -> int:
        x, w, s = self._state
        w = (w + s) & MASK64
        x = _swap_halves((x * x + w) & MASK64)
        self._state[0] = x
        self._state[1] = w
        return x & MASK32


class Squares(Engine32):
    """Squares counter-based engine (Widynski). State: [counter, key].

    A zero key selects the reference default key.
    """

    name = "squares"
    algorithm = "Squares"
    seed_words = 2
    seed_bits = WORD64
    state_size = 2

    DEFAULT_KEY = 0xC58EFD154CE32F6D

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        counter, key = seed
        self._state[:] = [counter, key or self.DEFAULT_KEY]

    @staticmethod
    def squares32(counter: int, key: int) -> int:
        """Four-round squares output for one counter value."""
        x = y = (counter * key) & MASK64
        z = (y + key) & MASK64
        x = _swap_halves((x * x + y) & MASK64)
        x = _swap_halves((x * x + z) & MASK64)
        x = _swap_halves((x * x + y) & MASK64)
        return (((x * x + z) & MASK64) >> 32) & MASK32

    def next_word(self) -> int:
        self._state[0] = (self._state[0] + 1) & MASK64
        return self.squares32(self._state[0], self._state[1])
