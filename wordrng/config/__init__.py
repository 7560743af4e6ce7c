"""
wordrng.config

Configuration management for wordrng.

Exports:
- Config schemas
- Loading/saving utilities
- Hashing for reproducibility
"""

from .schema import (
    WordRngConfig,
    EngineConfig,
    SamplingConfig,
    DiagnosticsConfig,
)

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

from .hashing import (
    hash_config,
    hash_dict,
    hash_stream,
    stream_fingerprint,
    config_signature,
)

__all__ = [
    # Schemas
    "WordRngConfig",
    "EngineConfig",
    "SamplingConfig",
    "DiagnosticsConfig",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
    # Hashing
    "hash_config",
    "hash_dict",
    "hash_stream",
    "stream_fingerprint",
    "config_signature",
]
