"""
Tests for wordrng.config.schema

Verify config validation and defaults.
"""

import pytest
from wordrng.config.schema import (
    WordRngConfig,
    EngineConfig,
    SamplingConfig,
    DiagnosticsConfig,
)


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self):
        cfg = EngineConfig()
        assert cfg.name == "xoshiro256**"
        assert cfg.seed_words is None

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="non-empty"):
            EngineConfig(name="")

    def test_seed_words_copied_to_list(self):
        cfg = EngineConfig(name="pcg32", seed_words=(42, 54))
        assert cfg.seed_words == [42, 54]

    def test_negative_seed_word_raises(self):
        with pytest.raises(ValueError, match="seed_words"):
            EngineConfig(seed_words=[1, -2])


class TestSamplingConfig:
    """Tests for SamplingConfig."""

    def test_defaults(self):
        cfg = SamplingConfig()
        assert cfg.byte_order == "native"
        assert cfg.max_rejections is None

    def test_invalid_byte_order_raises(self):
        with pytest.raises(ValueError, match="Invalid byte_order"):
            SamplingConfig(byte_order="middle")

    @pytest.mark.parametrize("cap", [0, -1, 2.5])
    def test_invalid_max_rejections_raises(self, cap):
        with pytest.raises(ValueError, match="max_rejections"):
            SamplingConfig(max_rejections=cap)


class TestDiagnosticsConfig:
    """Tests for DiagnosticsConfig."""

    def test_defaults(self):
        cfg = DiagnosticsConfig()
        assert cfg.n_draws == 100_000
        assert cfg.n_bins == 10
        assert cfg.significance == 0.001

    def test_non_positive_draws_raises(self):
        with pytest.raises(ValueError, match="n_draws"):
            DiagnosticsConfig(n_draws=0)

    def test_single_bin_raises(self):
        with pytest.raises(ValueError, match="n_bins"):
            DiagnosticsConfig(n_bins=1)

    @pytest.mark.parametrize("level", [0.0, 1.0])
    def test_significance_bounds(self, level):
        with pytest.raises(ValueError, match="significance"):
            DiagnosticsConfig(significance=level)


class TestWordRngConfig:
    """Tests for top-level WordRngConfig."""

    def test_defaults(self):
        cfg = WordRngConfig()
        assert cfg.seed == 42
        assert cfg.engine.name == "xoshiro256**"

    def test_minimal(self):
        cfg = WordRngConfig.minimal()
        assert cfg.engine.name == "splitmix64"
        assert cfg.diagnostics.n_draws < WordRngConfig().diagnostics.n_draws

    def test_negative_seed_raises(self):
        with pytest.raises(ValueError, match="seed"):
            WordRngConfig(seed=-1)
