"""
wordrng.core.types

Core constants and small value types for wordrng.
"""

import sys
from dataclasses import dataclass
from enum import Enum

# Word widths (bits)
WORD32 = 32
WORD64 = 64

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1

# Double precision mantissa
DOUBLE_BITS = 53
DOUBLE_UNIT = 1.0 / (1 << DOUBLE_BITS)


class ByteOrder(str, Enum):
    """Byte order used when a word is written out as bytes."""
    LITTLE = "little"
    BIG = "big"
    NATIVE = "native"

    def resolve(self) -> "ByteOrder":
        """Map NATIVE onto the host byte order."""
        if self is ByteOrder.NATIVE:
            return ByteOrder(sys.byteorder)
        return self

    @property
    def numpy_prefix(self) -> str:
        """numpy dtype byte-order character ('<' or '>')."""
        return "<" if self.resolve() is ByteOrder.LITTLE else ">"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one statistical self-check.

    Attributes:
        name: Check identifier, e.g. "bounded_int_chi2".
        statistic: Test statistic (chi-square, KS D, or z-score).
        p_value: p-value of the test (NaN for tolerance checks).
        passed: Whether the check passed at the configured level.
    """
    name: str
    statistic: float
    p_value: float
    passed: bool

    def to_dict(self) -> dict:
        return {
            "check": self.name,
            "statistic": self.statistic,
            "p_value": self.p_value,
            "passed": self.passed,
        }
