"""
wordrng.core.validation

Boundary validation functions.

Design: Validate at API boundaries, trust internally.
All validation functions raise InvalidArgumentError on failure.
"""

import math
import numbers
from typing import Any, MutableSequence, Sequence, Union

import numpy as np

from .exceptions import InvalidArgumentError
from .types import ByteOrder


def validate_bounds(
    lower: int,
    upper: int,
    bits: int,
    name: str = "range"
) -> None:
    """Validate a half-open integer range [lower, upper) inside a word domain.

    Args:
        lower: Inclusive lower bound.
        upper: Exclusive upper bound.
        bits: Word width of the domain; bounds must lie in [0, 2**bits].
        name: Name for error messages.

    Raises:
        InvalidArgumentError: If lower >= upper or a bound leaves the domain.
    """
    if not isinstance(lower, numbers.Integral) or not isinstance(upper, numbers.Integral):
        raise InvalidArgumentError(
            f"{name} bounds must be integers, got {lower!r}, {upper!r}"
        )
    if lower >= upper:
        raise InvalidArgumentError(
            f"{name} lower bound {lower} must be less than upper bound {upper}"
        )
    if lower < 0 or upper > (1 << bits):
        raise InvalidArgumentError(
            f"{name} [{lower}, {upper}) is outside the {bits}-bit domain"
        )


def validate_finite_bounds(
    lower: float,
    upper: float,
    name: str = "range"
) -> None:
    """Validate real bounds are finite and ordered."""
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise InvalidArgumentError(f"{name} bounds must be finite, got {lower}, {upper}")
    if lower >= upper:
        raise InvalidArgumentError(
            f"{name} lower bound {lower} must be less than upper bound {upper}"
        )


def validate_not_nan(
    value: float,
    name: str = "value"
) -> None:
    """Validate value is not NaN."""
    if math.isnan(value):
        raise InvalidArgumentError(f"{name} must not be NaN")


def validate_positive(
    value: float,
    name: str = "value"
) -> None:
    """Validate value is strictly positive and finite."""
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")


def validate_non_negative(
    value: float,
    name: str = "value"
) -> None:
    """Validate value is non-negative."""
    if math.isnan(value) or value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")


def validate_positive_int(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidArgumentError(f"{name} must be positive int, got {value}")


def validate_non_empty_sequence(
    seq: Sequence,
    name: str = "sequence"
) -> None:
    """Validate sequence is present and non-empty."""
    if seq is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if len(seq) == 0:
        raise InvalidArgumentError(f"{name} must be non-empty")


def validate_mutable_sequence(
    seq: Any,
    name: str = "items"
) -> None:
    """Validate seq can be permuted in place by element assignment.

    Accepts mutable sequences and 1-D writable numpy arrays. Swapping
    rows of a multi-dimensional array through views would duplicate rows,
    so those are rejected.
    """
    if seq is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if isinstance(seq, np.ndarray):
        if seq.ndim != 1:
            raise InvalidArgumentError(
                f"{name} must be a 1-D array, got {seq.ndim} dimensions"
            )
        if not seq.flags.writeable:
            raise InvalidArgumentError(f"{name} is read-only")
    elif not isinstance(seq, MutableSequence):
        raise InvalidArgumentError(
            f"{name} must be a mutable sequence, got {type(seq).__name__}"
        )
    validate_non_empty_sequence(seq, name)


def validate_count(
    count: int,
    n: int,
    name: str = "count"
) -> None:
    """Validate a selection count lies in [1, n]."""
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an int, got {count!r}")
    if count < 1:
        raise InvalidArgumentError(f"{name} must be at least 1, got {count}")
    if count > n:
        raise InvalidArgumentError(
            f"{name} {count} exceeds the number of items ({n})"
        )


def validate_writable_buffer(
    buffer: Any,
    name: str = "buffer"
) -> memoryview:
    """Validate buffer is a writable, non-empty, contiguous byte buffer.

    Returns:
        A flat unsigned-byte memoryview over the buffer.
    """
    if buffer is None:
        raise InvalidArgumentError(f"{name} must not be None")
    try:
        view = memoryview(buffer)
    except TypeError:
        raise InvalidArgumentError(
            f"{name} must support the buffer protocol, got {type(buffer).__name__}"
        )
    if view.readonly:
        raise InvalidArgumentError(f"{name} is read-only")
    if not view.c_contiguous:
        raise InvalidArgumentError(f"{name} must be contiguous")
    if view.nbytes == 0:
        raise InvalidArgumentError(f"{name} length must be at least 1")
    return view.cast("B")


def validate_byte_order(
    value: Union[ByteOrder, str],
    name: str = "byte_order"
) -> ByteOrder:
    """Validate and coerce a byte order ("little", "big" or "native").

    Returns:
        The matching ByteOrder member.
    """
    if isinstance(value, ByteOrder):
        return value
    try:
        return ByteOrder(str(value).lower())
    except ValueError:
        valid = [b.value for b in ByteOrder]
        raise InvalidArgumentError(f"{name} must be one of {valid}, got {value!r}")


def validate_max_rejections(
    value: Any,
    name: str = "max_rejections"
) -> None:
    """Validate an optional rejection cap: None or a positive int."""
    if value is not None:
        validate_positive_int(value, name)
