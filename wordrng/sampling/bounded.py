"""
wordrng.sampling.bounded

Unbiased bounded integers from a word stream.

Design: Lemire's nearly divisionless method. The raw word is multiplied
by the range width; the high half of the double-width product is the
candidate and the low half decides whether the draw fell in the biased
region. A division is only needed on that rare path, and even then the
threshold is first approached with two subtractions.
"""

from typing import Callable, Optional

from wordrng.core.exceptions import RejectionLimitError
from wordrng.core.types import WORD32, WORD64
from wordrng.core.validation import validate_bounds, validate_max_rejections
from wordrng.core.words import multiply_high_low
from wordrng.engines.base import WordSource


def rejection_threshold(range_width: int, bits: int) -> int:
    """Compute 2**bits mod range_width.

    Args:
        range_width: Width of the target range, 1 <= range_width <= 2**bits.
        bits: Word width.

    Returns:
        Number of low-half values that must be rejected.
    """
    t = (1 << bits) - range_width
    if t >= range_width:
        t -= range_width
        if t >= range_width:
            t %= range_width
    return t


class BoundedSampler:
    """Maps a WordSource onto uniform integers in [lower, upper).

    Attributes:
        source: Underlying word source.
        max_rejections: Optional cap on redraws per call. None means the
            bias-rejection loop runs until it accepts.
    """

    def __init__(self, source: WordSource, max_rejections: Optional[int] = None):
        validate_max_rejections(max_rejections)
        self._source = source
        self.max_rejections = max_rejections

    @property
    def source(self) -> WordSource:
        return self._source

    def bounded_int(self, lower: int, upper: int) -> int:
        """Uniform 32-bit integer in [lower, upper).

        Args:
            lower: Inclusive lower bound, >= 0.
            upper: Exclusive upper bound, <= 2**32.

        Raises:
            InvalidArgumentError: lower >= upper or bounds outside 32 bits.
            RejectionLimitError: max_rejections is set and was exceeded.
        """
        validate_bounds(lower, upper, WORD32)
        return self._sample(self._source.next32, WORD32, int(lower), int(upper))

    def bounded_long(self, lower: int, upper: int) -> int:
        """Uniform 64-bit integer in [lower, upper).

        Args:
            lower: Inclusive lower bound, >= 0.
            upper: Exclusive upper bound, <= 2**64.

        Raises:
            InvalidArgumentError: lower >= upper or bounds outside 64 bits.
            RejectionLimitError: max_rejections is set and was exceeded.
        """
        validate_bounds(lower, upper, WORD64)
        return self._sample(self._source.next64, WORD64, int(lower), int(upper))

    def index(self, n: int) -> int:
        """Uniform index in [0, n), using the narrowest domain that fits."""
        if n <= (1 << WORD32):
            return self.bounded_int(0, n)
        return self.bounded_long(0, n)

    def _sample(
        self,
        draw: Callable[[], int],
        bits: int,
        lower: int,
        upper: int,
    ) -> int:
        range_width = upper - lower
        high, low = multiply_high_low(draw(), range_width, bits)

        if low < range_width:
            threshold = rejection_threshold(range_width, bits)
            rejections = 0
            while low < threshold:
                rejections += 1
                self._check_rejections(rejections)
                high, low = multiply_high_low(draw(), range_width, bits)

        return high + lower

    def _check_rejections(self, rejections: int) -> None:
        if self.max_rejections is not None and rejections > self.max_rejections:
            raise RejectionLimitError(
                f"Bounded sampling rejected {rejections} draws "
                f"(max_rejections={self.max_rejections})"
            )

    def __repr__(self) -> str:
        return f"BoundedSampler(source={self._source!r}, max_rejections={self.max_rejections})"

