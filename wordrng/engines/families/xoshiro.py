"""
wordrng.engines.families.xoshiro

Linear xor/shift/rotate engines: xoshiro, xoroshiro, Seiran and Shioi.

All of these share two properties: the all-zero state is a fixed point,
and the state can be advanced by a large power of two with a jump
polynomial.
"""

from abc import abstractmethod
from typing import List, Sequence, Tuple

from wordrng.core.types import MASK64
from wordrng.core.words import rotl64
from ..base import Engine64


def jump_state(engine: Engine64, polynomial: Sequence[int]) -> None:
    """Advance a linear engine with a jump polynomial.

    Accumulates the xor of the states selected by the polynomial bits
    while stepping the engine, then installs the accumulated state.
    """
    acc: List[int] = [0] * len(engine._state)
    for word in polynomial:
        for b in range(64):
            if (word >> b) & 1:
                for i, value in enumerate(engine._state):
                    acc[i] ^= value
            engine.next_word()
    engine._state[:] = acc


class _Xoshiro256(Engine64):
    """xoshiro256 state transition; subclasses choose the output scrambler."""

    seed_words = 4
    state_size = 4
    forbids_zero_state = True

    JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed

    @abstractmethod
    def _output(self, s: List[int]) -> int:
        pass

    def next_word(self) -> int:
        s = self._state
        result = self._output(s)
        t = (s[1] << 17) & MASK64
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl64(s[3], 45)
        return result

    def jump(self) -> None:
        """Advance the state by 2**128 draws."""
        jump_state(self, self.JUMP)


class Xoshiro256Plus(_Xoshiro256):
    """xoshiro256+ (Blackman & Vigna). Low bits are weak; use for doubles."""

    name = "xoshiro256+"
    algorithm = "Xoshiro 256+"

    def _output(self, s: List[int]) -> int:
        return (s[0] + s[3]) & MASK64


class Xoshiro256PlusPlus(_Xoshiro256):
    """xoshiro256++ (Blackman & Vigna)."""

    name = "xoshiro256++"
    algorithm = "Xoshiro 256++"

    def _output(self, s: List[int]) -> int:
        return (rotl64((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64


class Xoshiro256StarStar(_Xoshiro256):
    """xoshiro256** (Blackman & Vigna). General-purpose default."""

    name = "xoshiro256**"
    algorithm = "Xoshiro 256**"

    def _output(self, s: List[int]) -> int:
        return (rotl64((s[1] * 5) & MASK64, 7) * 9) & MASK64


class _Xoshiro512(Engine64):
    """xoshiro512 state transition."""

    seed_words = 8
    state_size = 8
    forbids_zero_state = True

    JUMP = (
        0x33ED89B6E7A353F9, 0x760083D7955323BE,
        0x2837F2FBB5F22FAE, 0x4B8C5674D309511C,
        0xB11AC47A7BA28C25, 0xF1BE7667092BCC1C,
        0x53851EFDB6DF0AAF, 0x1EBBC8B23EAF25DB,
    )

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed

    @abstractmethod
    def _output(self, s: List[int]) -> int:
        pass

    def next_word(self) -> int:
        s = self._state
        result = self._output(s)
        t = (s[1] << 11) & MASK64
        s[2] ^= s[0]
        s[5] ^= s[1]
        s[1] ^= s[2]
        s[7] ^= s[3]
        s[3] ^= s[4]
        s[4] ^= s[5]
        s[0] ^= s[6]
        s[6] ^= s[7]
        s[6] ^= t
        s[7] = rotl64(s[7], 21)
        return result

    def jump(self) -> None:
        """Advance the state by 2**256 draws."""
        jump_state(self, self.JUMP)


class Xoshiro512Plus(_Xoshiro512):
    name = "xoshiro512+"
    algorithm = "Xoshiro 512+"

    def _output(self, s: List[int]) -> int:
        return (s[0] + s[2]) & MASK64


class Xoshiro512StarStar(_Xoshiro512):
    name = "xoshiro512**"
    algorithm = "Xoshiro 512**"

    def _output(self, s: List[int]) -> int:
        return (rotl64((s[1] * 5) & MASK64, 7) * 9) & MASK64


class _Xoroshiro128(Engine64):
    """xoroshiro128 state transition with per-variant (a, b, c) constants."""

    seed_words = 2
    state_size = 2
    forbids_zero_state = True

    A, B, C = 24, 16, 37
    JUMP = (0xDF900294D8F554A5, 0x170865DF4B3201FC)

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed

    @abstractmethod
    def _output(self, s0: int, s1: int) -> int:
        pass

    def next_word(self) -> int:
        s0, s1 = self._state
        result = self._output(s0, s1)
        s1 ^= s0
        self._state[0] = rotl64(s0, self.A) ^ s1 ^ ((s1 << self.B) & MASK64)
        self._state[1] = rotl64(s1, self.C)
        return result

    def jump(self) -> None:
        """Advance the state by 2**64 draws."""
        jump_state(self, self.JUMP)


class Xoroshiro128Plus(_Xoroshiro128):
    name = "xoroshiro128+"
    algorithm = "Xoroshiro 128+"

    def _output(self, s0: int, s1: int) -> int:
        return (s0 + s1) & MASK64


class Xoroshiro128PlusPlus(_Xoroshiro128):
    name = "xoroshiro128++"
    algorithm = "Xoroshiro 128++"

    A, B, C = 49, 21, 28
    JUMP = (0x2BD7A6A6E99C2DDC, 0x0992CCAF6A6FCA05)

    def _output(self, s0: int, s1: int) -> int:
        return (rotl64((s0 + s1) & MASK64, 17) + s0) & MASK64


class Xoroshiro128StarStar(_Xoroshiro128):
    name = "xoroshiro128**"
    algorithm = "Xoroshiro 128**"

    def _output(self, s0: int, s1: int) -> int:
        return (rotl64((s0 * 5) & MASK64, 7) * 9) & MASK64


class Seiran(Engine64):
    """Seiran128 (andanteyk): xoroshiro-like with a multiply-rotate output."""

    name = "seiran"
    algorithm = "Seiran"
    seed_words = 2
    state_size = 2
    forbids_zero_state = True

    JUMP = (0xF4DF34E424CA5C56, 0x2FE2DE5C2E12F601)

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed

    def next_word(self) -> int:
        s0, s1 = self._state
        result = (rotl64(((s0 + s1) * 9) & MASK64, 29) + s0) & MASK64
        self._state[0] = s0 ^ rotl64(s1, 29)
        self._state[1] = s0 ^ ((s1 << 9) & MASK64)
        return result

    def jump(self) -> None:
        """Advance the state by 2**64 draws."""
        jump_state(self, self.JUMP)


def _sar19(value: int) -> int:
    """Arithmetic (sign-propagating) right shift by 19 of a 64-bit word."""
    if value >> 63:
        value -= 1 << 64
    return (value >> 19) & MASK64


class Shioi(Engine64):
    """Shioi128 (andanteyk)."""

    name = "shioi"
    algorithm = "Shioi"
    seed_words = 2
    state_size = 2
    forbids_zero_state = True

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        self._state[:] = seed

    def next_word(self) -> int:
        s0, s1 = self._state
        result = (rotl64((s0 * 0xD2B74407B1CE6E93) & MASK64, 29) + s1) & MASK64
        self._state[0] = s1
        self._state[1] = ((s0 << 2) & MASK64) ^ _sar19(s0) ^ s1
        return result

    def jump(self) -> None:
        """Advance the state by 2**64 draws (closed form of polynomial 0x3)."""
        s0, s1 = self._state
        self._state[0] = s0 ^ s1
        self._state[1] = ((s0 << 2) & MASK64) ^ _sar19(s0)
