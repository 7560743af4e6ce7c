"""
wordrng.core.words

Fixed-width unsigned word arithmetic on Python ints.

Design: Engines keep their state as plain ints and mask after every
operation that can overflow the word width.
"""

from typing import Tuple

from .types import MASK32, MASK64


def mask(bits: int) -> int:
    """All-ones mask for a word of the given width."""
    return (1 << bits) - 1


def rotl32(value: int, shift: int) -> int:
    """Rotate a 32-bit word left."""
    shift &= 31
    return ((value << shift) | (value >> (32 - shift))) & MASK32


def rotl64(value: int, shift: int) -> int:
    """Rotate a 64-bit word left."""
    shift &= 63
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def rotr32(value: int, shift: int) -> int:
    """Rotate a 32-bit word right."""
    shift &= 31
    return ((value >> shift) | (value << ((-shift) & 31))) & MASK32


def multiply_high_low(x: int, y: int, bits: int) -> Tuple[int, int]:
    """Double-width product of two words, split into (high, low) halves.

    Python ints are arbitrary precision, so the full 2*bits product is
    formed directly.

    Args:
        x: First operand, 0 <= x < 2**bits.
        y: Second operand, 0 <= y <= 2**bits.
        bits: Word width (32 or 64).

    Returns:
        (high, low) where high is the product shifted down by `bits` and
        low is the product masked to `bits`.
    """
    m = x * y
    return m >> bits, m & mask(bits)


def join32(high: int, low: int) -> int:
    """Concatenate two 32-bit words into one 64-bit word."""
    return ((high & MASK32) << 32) | (low & MASK32)
