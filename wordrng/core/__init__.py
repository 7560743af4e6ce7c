"""
wordrng.core

Core infrastructure for wordrng.

Exports:
- Exception classes
- Word arithmetic helpers
- Core types and constants
- Validation utilities

The composed generator lives in wordrng.core.rng and is imported from
there directly, since it depends on the engines and sampling packages
which in turn depend on this one.
"""

from .exceptions import (
    WordRngError,
    InvalidArgumentError,
    InsufficientSeedMaterialError,
    EntropySourceError,
    RejectionLimitError,
    ConfigError,
    RegistryError,
)

from .types import (
    WORD32,
    WORD64,
    MASK32,
    MASK64,
    DOUBLE_BITS,
    DOUBLE_UNIT,
    ByteOrder,
    CheckResult,
)

from .words import (
    mask,
    rotl32,
    rotl64,
    rotr32,
    multiply_high_low,
    join32,
)

from .validation import (
    validate_bounds,
    validate_finite_bounds,
    validate_not_nan,
    validate_positive,
    validate_non_negative,
    validate_positive_int,
    validate_non_empty_sequence,
    validate_mutable_sequence,
    validate_count,
    validate_writable_buffer,
    validate_byte_order,
    validate_max_rejections,
)

__all__ = [
    # Exceptions
    "WordRngError",
    "InvalidArgumentError",
    "InsufficientSeedMaterialError",
    "EntropySourceError",
    "RejectionLimitError",
    "ConfigError",
    "RegistryError",
    # Types
    "WORD32",
    "WORD64",
    "MASK32",
    "MASK64",
    "DOUBLE_BITS",
    "DOUBLE_UNIT",
    "ByteOrder",
    "CheckResult",
    # Words
    "mask",
    "rotl32",
    "rotl64",
    "rotr32",
    "multiply_high_low",
    "join32",
    # Validation
    "validate_bounds",
    "validate_finite_bounds",
    "validate_not_nan",
    "validate_positive",
    "validate_non_negative",
    "validate_positive_int",
    "validate_non_empty_sequence",
    "validate_mutable_sequence",
    "validate_count",
    "validate_writable_buffer",
    "validate_byte_order",
    "validate_max_rejections",
]
