"""
wordrng.engines.families.chaotic

Small chaotic engines: SFC, JSF (two- and three-rotate), gjrand and Tyche.

These have no fixed period guarantee (SFC's counter bounds it from below)
and run a number of warm-up rounds after seeding so that similar seeds
diverge before the first output.
"""

from typing import Tuple

from wordrng.core.types import MASK32, MASK64, WORD64
from wordrng.core.words import rotl32, rotl64
from ..base import Engine32, Engine64

WARMUP_ROUNDS = 20
GJRAND_WARMUP_ROUNDS = 15


class Sfc32(Engine32):
    """Small Fast Counting 32-bit (Doty-Humphrey). State: [a, b, c, counter]."""

    name = "sfc32"
    algorithm = "SFC 32-bit"
    seed_words = 3
    state_size = 4

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = [seed[0], seed[1], seed[2], 1]
        for _ in range(WARMUP_ROUNDS):
            self.next_word()

    def next_word(self) -> int:
        a, b, c, counter = self._state
        result = (a + b + counter) & MASK32
        self._state[3] = (counter + 1) & MASK32
        self._state[0] = b ^ (b >> 9)
        self._state[1] = (c + (c << 3)) & MASK32
        self._state[2] = (rotl32(c, 21) + result) & MASK32
        return result


class Sfc64(Engine64):
    """Small Fast Counting 64-bit (Doty-Humphrey). State: [a, b, c, counter]."""

    name = "sfc64"
    algorithm = "SFC 64-bit"
    seed_words = 3
    state_size = 4

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = [seed[0], seed[1], seed[2], 1]
        for _ in range(WARMUP_ROUNDS):
            self.next_word()

    def next_word(self) -> int:
        a, b, c, counter = self._state
        result = (a + b + counter) & MASK64
        self._state[3] = (counter + 1) & MASK64
        self._state[0] = b ^ (b >> 11)
        self._state[1] = (c + (c << 3)) & MASK64
        self._state[2] = (rotl64(c, 24) + result) & MASK64
        return result


class Jsf32(Engine32):
    """Bob Jenkins' small fast 32-bit generator."""

    name = "jsf32"
    algorithm = "JSF 32-bit"
    seed_words = 1
    state_size = 4

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = [0xF1EA5EED, seed[0], seed[0], seed[0]]
        for _ in range(WARMUP_ROUNDS):
            self.next_word()

    def next_word(self) -> int:
        s = self._state
        e = (s[0] - rotl32(s[1], 27)) & MASK32
        s[0] = s[1] ^ rotl32(s[2], 17)
        s[1] = (s[2] + s[3]) & MASK32
        s[2] = (s[3] + e) & MASK32
        s[3] = (e + s[0]) & MASK32
        return s[3]


class Jsf32t(Jsf32):
    """JSF 32-bit with a third rotate in the b update (23, 16, 11)."""

    name = "jsf32t"
    algorithm = "JSF 32-bit with 3-rotate"

    def next_word(self) -> int:
        s = self._state
        e = (s[0] - rotl32(s[1], 23)) & MASK32
        s[0] = s[1] ^ rotl32(s[2], 16)
        s[1] = (s[2] + rotl32(s[3], 11)) & MASK32
        s[2] = (s[3] + e) & MASK32
        s[3] = (e + s[0]) & MASK32
        return s[3]


class Jsf64(Engine64):
    """Bob Jenkins' small fast 64-bit generator (three-rotate variant)."""

    name = "jsf64"
    algorithm = "JSF 64-bit"
    seed_words = 1
    state_size = 4

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = [0xF1EA5EED, seed[0], seed[0], seed[0]]
        for _ in range(WARMUP_ROUNDS):
            self.next_word()

    def next_word(self) -> int:
        s = self._state
        e = (s[0] - rotl64(s[1], 7)) & MASK64
        s[0] = s[1] ^ rotl64(s[2], 13)
        s[1] = (s[2] + rotl64(s[3], 37)) & MASK64
        s[2] = (s[3] + e) & MASK64
        s[3] = (e + s[0]) & MASK64
        return s[3]


class GJrand64(Engine64):
    """gjrand 64-bit (Jones). State: [a, b, c, d]."""

    name = "gjrand64"
    algorithm = "Gjrand 64"
    seed_words = 4
    state_size = 4

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed
        for _ in range(GJRAND_WARMUP_ROUNDS):
            self._advance()

    def _advance(self) -> None:
        a, b, c, d = self._state
        b = (b + c) & MASK64
        a = rotl64(a, 32)
        c ^= b
        d = (d + 0x55AA96A5) & MASK64
        a = (a + b) & MASK64
        c = rotl64(c, 23)
        b ^= a
        a = (a + c) & MASK64
        b = rotl64(b, 19)
        c = (c + a) & MASK64
        b = (b + d) & MASK64
        self._state[:] = [a, b, c, d]

    def next_word(self) -> int:
        self._advance()
        return self._state[0]


class Tyche(Engine32):
    """Tyche (Neves & Araujo): ChaCha quarter-round as a state transition.

    Seed values: (seed, idx) where seed is 64-bit and idx selects an
    independent stream (only its low 32 bits are used).
    """

    name = "tyche"
    algorithm = "Tyche"
    seed_words = 2
    seed_bits = WORD64
    state_size = 4

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        value, idx = seed
        self._state[:] = [
            value >> 32,
            value & MASK32,
            2654435769,
            (idx & MASK32) ^ 1367130551,
        ]
        for _ in range(WARMUP_ROUNDS):
            self._mix()

    def _mix(self) -> None:
        a, b, c, d = self._state
        a = (a + b) & MASK32
        d = rotl32(d ^ a, 16)
        c = (c + d) & MASK32
        b = rotl32(b ^ c, 12)
        a = (a + b) & MASK32
        d = rotl32(d ^ a, 8)
        c = (c + d) & MASK32
        b = rotl32(b ^ c, 7)
        self._state[:] = [a, b, c, d]

    def next_word(self) -> int:
        self._mix()
        return self._state[1]


class TycheI(Tyche):
    """Tyche-i: the inverted, faster mixing direction of Tyche."""

    name = "tyche-i"
    algorithm = "Tyche-i"

    def _mix(self) -> None:
        a, b, c, d = self._state
        b = rotl32(b, 25) ^ c
        d = rotl32(d, 24) ^ a
        c = (c - d) & MASK32
        a = (a - b) & MASK32
        b = rotl32(b, 20) ^ c
        d = rotl32(d, 16) ^ a
        c = (c - d) & MASK32
        a = (a - b) & MASK32
        self._state[:] = [a, b, c, d]

    def next_word(self) -> int:
        self._mix()
        return self._state[0]
