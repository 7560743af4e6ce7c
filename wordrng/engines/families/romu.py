"""
wordrng.engines.families.romu

Romu family (Overton): multiply-rotate nonlinear engines.

Seeds are loaded verbatim. An all-zero state is a fixed point.
"""

from typing import Tuple

from wordrng.core.types import MASK32, MASK64
from wordrng.core.words import rotl32, rotl64
from ..base import Engine32, Engine64

ROMU_MULT64 = 15241094284759029579
ROMU_MULT32 = 3323815723


class _Romu64(Engine64):
    forbids_zero_state = True

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed


class _Romu32(Engine32):
    forbids_zero_state = True

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed


class RomuDuo(_Romu64):
    name = "romu-duo"
    algorithm = "Romu Duo 64-bit"
    seed_words = 2
    state_size = 2

    def next_word(self) -> int:
        xp, y = self._state
        self._state[0] = (ROMU_MULT64 * y) & MASK64
        self._state[1] = (rotl64(y, 36) + rotl64(y, 15) - xp) & MASK64
        return xp


class RomuDuoJr(_Romu64):
    """Fastest Romu variant; fine for games and simulations with small jobs."""

    name = "romu-duo-jr"
    algorithm = "Romu Duo Jr 64-bit"
    seed_words = 2
    state_size = 2

    def next_word(self) -> int:
        xp, y = self._state
        self._state[0] = (ROMU_MULT64 * y) & MASK64
        self._state[1] = rotl64((y - xp) & MASK64, 27)
        return xp


class RomuTrio(_Romu64):
    name = "romu-trio"
    algorithm = "Romu Trio 64-bit"
    seed_words = 3
    state_size = 3

    def next_word(self) -> int:
        xp, yp, zp = self._state
        self._state[0] = (ROMU_MULT64 * zp) & MASK64
        self._state[1] = rotl64((yp - xp) & MASK64, 12)
        self._state[2] = rotl64((zp - yp) & MASK64, 44)
        return xp


class RomuQuad(_Romu64):
    name = "romu-quad"
    algorithm = "Romu Quad 64-bit"
    seed_words = 4
    state_size = 4

    def next_word(self) -> int:
        wp, xp, yp, zp = self._state
        self._state[0] = (ROMU_MULT64 * zp) & MASK64
        self._state[1] = (zp + rotl64(wp, 52)) & MASK64
        self._state[2] = (yp - xp) & MASK64
        self._state[3] = rotl64((yp + wp) & MASK64, 19)
        return xp


class RomuMono32(_Romu32):
    """Romu Mono 32-bit.

    The underlying recurrence yields 16 bits per step, so one word is built
    from two steps (first step in the high half). Accepts 29 seed bits.
    """

    name = "romu-mono32"
    algorithm = "Romu Mono 32-bit"
    seed_words = 1
    state_size = 1

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[0] = ((seed[0] & 0x1FFFFFFF) + 1156979152) & MASK32

    def _half(self) -> int:
        s = self._state[0]
        result = s >> 16
        self._state[0] = rotl32((s * 3611795771) & MASK32, 12)
        return result

    def next_word(self) -> int:
        high = self._half()
        return (high << 16) | self._half()


class RomuTrio32(_Romu32):
    name = "romu-trio32"
    algorithm = "Romu Trio 32-bit"
    seed_words = 3
    state_size = 3

    def next_word(self) -> int:
        xp, yp, zp = self._state
        self._state[0] = (ROMU_MULT32 * zp) & MASK32
        self._state[1] = rotl32((yp - xp) & MASK32, 6)
        self._state[2] = rotl32((zp - yp) & MASK32, 22)
        return xp


class RomuQuad32(_Romu32):
    name = "romu-quad32"
    algorithm = "Romu Quad 32-bit"
    seed_words = 4
    state_size = 4

    def next_word(self) -> int:
        wp, xp, yp, zp = self._state
        self._state[0] = (ROMU_MULT32 * zp) & MASK32
        self._state[1] = (zp + rotl32(wp, 26)) & MASK32
        self._state[2] = (yp - xp) & MASK32
        self._state[3] = rotl32((yp + wp) & MASK32, 9)
        return xp
