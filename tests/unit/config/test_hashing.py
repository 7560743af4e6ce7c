"""
Tests for wordrng.config.hashing

Verify full-config and stream hashing.
"""

import sys

import pytest

from wordrng.config.hashing import (
    config_signature,
    hash_config,
    hash_dict,
    hash_stream,
    stream_fingerprint,
)
from wordrng.config.schema import (
    DiagnosticsConfig,
    EngineConfig,
    SamplingConfig,
    WordRngConfig,
)
from wordrng.core.exceptions import InsufficientSeedMaterialError, RegistryError
from wordrng.core.rng import RandomGenerator
from wordrng.engines import Pcg32, Sfc64, seed_for


class TestHashDict:
    """Tests for hash_dict."""

    def test_order_independent(self):
        assert hash_dict({"a": 1, "b": 2}) == hash_dict({"b": 2, "a": 1})

    def test_nested_values_matter(self):
        assert hash_dict({"a": {"b": 1}}) != hash_dict({"a": {"b": 2}})

    def test_hash_length(self):
        h = hash_dict({"a": 1})
        assert len(h) == 16
        int(h, 16)


class TestHashConfig:
    """Every field, diagnostics included, feeds hash_config."""

    def test_deterministic(self):
        assert hash_config(WordRngConfig()) == hash_config(WordRngConfig())

    def test_seed_matters(self):
        assert hash_config(WordRngConfig(seed=1)) != hash_config(WordRngConfig(seed=2))

    def test_diagnostics_matter(self):
        a = WordRngConfig(diagnostics=DiagnosticsConfig(output_dir="a"))
        b = WordRngConfig(diagnostics=DiagnosticsConfig(output_dir="b"))
        assert hash_config(a) != hash_config(b)


class TestStreamFingerprint:
    """Only stream-determining fields reach the fingerprint."""

    def test_integer_seed_expanded(self):
        fp = stream_fingerprint(WordRngConfig(seed=9, engine=EngineConfig(name="pcg32")))
        assert fp["engine"] == "pcg32"
        assert fp["seed_words"] == seed_for(Pcg32, 9)

    def test_native_resolved(self):
        fp = stream_fingerprint(WordRngConfig())
        assert fp["byte_order"] == sys.byteorder

    def test_extra_seed_words_dropped(self):
        config = WordRngConfig(engine=EngineConfig(name="pcg32", seed_words=[42, 54, 99]))
        assert stream_fingerprint(config)["seed_words"] == [42, 54]

    def test_short_seed_words_raise(self):
        config = WordRngConfig(engine=EngineConfig(name="pcg32", seed_words=[42]))
        with pytest.raises(InsufficientSeedMaterialError):
            stream_fingerprint(config)

    def test_unknown_engine_raises(self):
        with pytest.raises(RegistryError):
            stream_fingerprint(WordRngConfig(engine=EngineConfig(name="mt19937")))


class TestHashStream:
    """Configs giving the same stream share a stream hash."""

    def test_diagnostics_ignored(self):
        a = WordRngConfig(diagnostics=DiagnosticsConfig(n_draws=10))
        b = WordRngConfig(diagnostics=DiagnosticsConfig(n_draws=20))
        assert hash_stream(a) == hash_stream(b)
        assert hash_config(a) != hash_config(b)

    def test_max_rejections_ignored(self):
        a = WordRngConfig(sampling=SamplingConfig(max_rejections=5))
        assert hash_stream(a) == hash_stream(WordRngConfig())

    def test_native_equals_host_order(self):
        native = WordRngConfig(sampling=SamplingConfig(byte_order="native"))
        host = WordRngConfig(sampling=SamplingConfig(byte_order=sys.byteorder))
        assert hash_stream(native) == hash_stream(host)

    def test_byte_order_matters(self):
        little = WordRngConfig(sampling=SamplingConfig(byte_order="little"))
        big = WordRngConfig(sampling=SamplingConfig(byte_order="big"))
        assert hash_stream(little) != hash_stream(big)

    def test_seed_words_ignore_integer_seed(self):
        a = WordRngConfig(seed=1, engine=EngineConfig(name="pcg32", seed_words=[42, 54]))
        b = WordRngConfig(seed=2, engine=EngineConfig(name="pcg32", seed_words=[42, 54]))
        assert hash_stream(a) == hash_stream(b)

    def test_expanded_words_match_integer_seed(self):
        by_seed = WordRngConfig(seed=7, engine=EngineConfig(name="sfc64"))
        by_words = WordRngConfig(
            engine=EngineConfig(name="sfc64", seed_words=seed_for(Sfc64, 7)),
        )
        assert hash_stream(by_seed) == hash_stream(by_words)

        a = RandomGenerator.from_config(by_seed)
        b = RandomGenerator.from_config(by_words)
        assert a.next_bytes(16) == b.next_bytes(16)

    def test_engine_matters(self):
        a = WordRngConfig(engine=EngineConfig(name="pcg32"))
        b = WordRngConfig(engine=EngineConfig(name="sfc32"))
        assert hash_stream(a) != hash_stream(b)


class TestConfigSignature:
    """Tests for config_signature."""

    def test_format(self):
        cfg = WordRngConfig()
        sig = config_signature(cfg)
        assert sig.startswith(f"xoshiro256**_{sys.byteorder}_")
        assert sig.endswith(hash_stream(cfg))

    def test_engine_in_signature(self):
        cfg = WordRngConfig(engine=EngineConfig(name="pcg32"))
        assert config_signature(cfg).startswith("pcg32_")

    def test_minimal_differs_from_default(self):
        assert config_signature(WordRngConfig.minimal()) != config_signature(WordRngConfig())
