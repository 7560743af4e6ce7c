"""
wordrng.config.hashing

Config hashing for reproducibility tracking.

Design: Two hashes are kept apart.
- hash_config covers every field, so any edit to a run config shows up.
- hash_stream covers only what decides the values drawn: the engine,
  the seed words it is actually loaded with, and the resolved byte order.
  Configs that produce the same stream share a stream hash even when they
  spell it differently (an integer seed vs. its expanded words, "native"
  vs. the host order, extra seed words the engine ignores).
"""

import hashlib
import json
from typing import Any, Dict

from wordrng.core.exceptions import InsufficientSeedMaterialError
from wordrng.core.types import ByteOrder
from wordrng.core.words import mask
from wordrng.engines import create_default_registry, seed_for
from .schema import WordRngConfig
from .load import config_to_dict

HASH_CHARS = 16


def hash_dict(d: Dict[str, Any]) -> str:
    """SHA-256 over canonical JSON (sorted keys), first 16 hex chars."""
    payload = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode()).hexdigest()[:HASH_CHARS]


def hash_config(config: WordRngConfig) -> str:
    """Hash of every config field, diagnostics included."""
    return hash_dict(config_to_dict(config))


def stream_fingerprint(config: WordRngConfig) -> Dict[str, Any]:
    """The config fields that determine the drawn values, in canonical form.

    max_rejections is left out: a cap only decides whether a long
    rejection run raises, never which value is returned.

    Raises:
        RegistryError: The engine name is not registered.
        InsufficientSeedMaterialError: Fewer seed words than the engine needs.
    """
    engine_cls = create_default_registry().get_by_name(config.engine.name)

    if config.engine.seed_words:
        if len(config.engine.seed_words) < engine_cls.seed_words:
            raise InsufficientSeedMaterialError(
                f"{engine_cls.name} needs {engine_cls.seed_words} seed words, "
                f"got {len(config.engine.seed_words)}"
            )
        word_mask = mask(engine_cls.seed_bits)
        words = [int(w) & word_mask for w in config.engine.seed_words[:engine_cls.seed_words]]
    else:
        words = seed_for(engine_cls, config.seed)

    return {
        "engine": engine_cls.name,
        "seed_words": words,
        "byte_order": ByteOrder(config.sampling.byte_order).resolve().value,
    }


def hash_stream(config: WordRngConfig) -> str:
    """Hash identifying the stream a config produces."""
    return hash_dict(stream_fingerprint(config))


def config_signature(config: WordRngConfig) -> str:
    """Human-readable stream signature.

    Format: {engine}_{resolved byte order}_{stream hash}

    Example: "pcg32_little_a1b2c3d4e5f6a7b8"
    """
    fingerprint = stream_fingerprint(config)
    return f"{fingerprint['engine']}_{fingerprint['byte_order']}_{hash_dict(fingerprint)}"
