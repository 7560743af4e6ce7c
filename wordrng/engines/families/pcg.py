"""
wordrng.engines.families.pcg

Permuted congruential generators (O'Neill).

All variants step the same 64-bit LCG and differ only in the output
permutation. Seeding follows pcg32_srandom_r(initstate, initseq), so
Pcg32(42, 54) reproduces the reference demo stream.
"""

from typing import Tuple

from wordrng.core.types import MASK32, MASK64, WORD64
from wordrng.core.words import rotr32
from ..base import Engine32, Engine64

PCG_MULTIPLIER = 6364136223846793005


class _PcgLcgMixin:
    """Shared LCG state: self._state == [state, increment]."""

    seed_words = 2
    seed_bits = WORD64
    state_size = 2

    def _load_seed(self, seed: Tuple[int, ...]) -> None:
        initstate, initseq = seed
        self._state[0] = 0
        self._state[1] = ((initseq << 1) | 1) & MASK64
        self._step()
        self._state[0] = (self._state[0] + initstate) & MASK64
        self._step()

    def _step(self) -> int:
        """Advance the LCG and return the pre-advance state."""
        old = self._state[0]
        self._state[0] = (old * PCG_MULTIPLIER + self._state[1]) & MASK64
        return old


class Pcg32(_PcgLcgMixin, Engine32):
    """PCG XSH-RR 64/32.

    Seed values: (initstate, initseq). initseq selects the stream.
    """

    name = "pcg32"
    algorithm = "PCG XSH-RR 32-bit"

    def next_word(self) -> int:
        old = self._step()
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        return rotr32(xorshifted, old >> 59)


class PcgXshRs32(_PcgLcgMixin, Engine32):
    """PCG XSH-RS 64/32."""

    name = "pcg-xsh-rs32"
    algorithm = "PCG XSH-RS 32-bit"

    def next_word(self) -> int:
        old = self._step()
        return ((old ^ (old >> 22)) >> (22 + (old >> 61))) & MASK32


class PcgRxsMXs64(_PcgLcgMixin, Engine64):
    """PCG RXS-M-XS 64/64. Every 64-bit output appears exactly once per period."""

    name = "pcg-rxs-m-xs64"
    algorithm = "PCG RXS-M-XS 64-bit"

    def next_word(self) -> int:
        old = self._step()
        word = (((old >> ((old >> 59) + 5)) ^ old) * 12605985483714917081) & MASK64
        return (word >> 43) ^ word
