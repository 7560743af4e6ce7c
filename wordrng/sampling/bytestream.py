"""
wordrng.sampling.bytestream

Byte buffers from a word stream.

Design: Whole native-width words are drawn and packed with an explicit
numpy byte order. A trailing partial group still costs one full word; the
unused high-order (little-endian) or low-order (big-endian) bytes of that
word are discarded rather than carried over to the next call.
"""

from typing import Any, Optional, Union

import numpy as np

from wordrng.core.types import ByteOrder
from wordrng.core.validation import (
    validate_bounds,
    validate_byte_order,
    validate_positive_int,
    validate_writable_buffer,
)
from wordrng.engines.base import WordSource
from .bounded import BoundedSampler


class ByteExtractor:
    """Turns a WordSource into byte strings of any length.

    Attributes:
        byte_order: Default order used when a call does not pass one.
    """

    def __init__(
        self,
        source: WordSource,
        bounded: BoundedSampler,
        byte_order: Union[ByteOrder, str] = ByteOrder.NATIVE,
    ):
        self._source = source
        self._bounded = bounded
        self.byte_order = validate_byte_order(byte_order)

    def next_bytes(
        self,
        length: int,
        byte_order: Optional[Union[ByteOrder, str]] = None,
    ) -> bytes:
        """Draw `length` random bytes.

        Args:
            length: Number of bytes, >= 1.
            byte_order: LITTLE writes each word least-significant byte
                first, BIG most-significant byte first. Defaults to
                self.byte_order.

        Returns:
            Immutable bytes of exactly `length`.

        Raises:
            InvalidArgumentError: length <= 0 or unknown byte order.
        """
        validate_positive_int(length, "length")
        order = self._order(byte_order)
        return self._pack(int(length), order)

    def fill(
        self,
        buffer: Any,
        byte_order: Optional[Union[ByteOrder, str]] = None,
    ) -> None:
        """Overwrite every byte of a writable buffer.

        Accepts bytearray, writable memoryview, numpy arrays and anything
        else exposing a contiguous writable buffer.

        Raises:
            InvalidArgumentError: Buffer missing, read-only, non-contiguous
                or empty, or unknown byte order.
        """
        view = validate_writable_buffer(buffer)
        order = self._order(byte_order)
        view[:] = self._pack(view.nbytes, order)

    def next_byte(self, lower: Optional[int] = None, upper: Optional[int] = None) -> int:
        """Draw one byte value.

        With no bounds, returns the top byte of one native word. With
        bounds, returns a uniform value in [lower, upper) within [0, 256].
        """
        if lower is None and upper is None:
            return self._source.next_word() >> (self._source.word_bits - 8)
        validate_bounds(lower, upper, 8, "byte range")
        return self._bounded.bounded_int(lower, upper)

    def _order(self, byte_order: Optional[Union[ByteOrder, str]]) -> ByteOrder:
        if byte_order is None:
            return self.byte_order
        return validate_byte_order(byte_order)

    def _pack(self, n_bytes: int, order: ByteOrder) -> bytes:
        word_bytes = self._source.word_bytes
        n_words = -(-n_bytes // word_bytes)
        words = [self._source.next_word() for _ in range(n_words)]
        dtype = np.dtype(f"{order.numpy_prefix}u{word_bytes}")
        return np.array(words, dtype=dtype).tobytes()[:n_bytes]
