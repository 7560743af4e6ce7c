"""
Tests for wordrng.config.load

Verify config loading/saving.
"""

import pytest
import tempfile
from pathlib import Path
from wordrng.config.load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)
from wordrng.config.schema import WordRngConfig, EngineConfig
from wordrng.core.exceptions import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class TestConfigFromDict:
    """Tests for config_from_dict."""

    def test_empty_dict_uses_defaults(self):
        cfg = config_from_dict({})
        assert cfg.seed == 42
        assert cfg.engine.name == "xoshiro256**"

    def test_partial_override(self):
        cfg = config_from_dict({
            "seed": 123,
            "engine": {"name": "sfc64"},
        })
        assert cfg.seed == 123
        assert cfg.engine.name == "sfc64"
        assert cfg.sampling.byte_order == "native"  # Default preserved

    def test_null_sections_use_defaults(self):
        cfg = config_from_dict({"sampling": None})
        assert cfg.sampling.byte_order == "native"

    def test_unknown_engine_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            config_from_dict({"engine": {"name": "mersenne"}})

    def test_unknown_field_raises(self):
        with pytest.raises(ConfigError, match="Invalid config"):
            config_from_dict({"sampling": {"endianness": "big"}})

    def test_invalid_value_raises(self):
        with pytest.raises(ConfigError, match="byte_order"):
            config_from_dict({"sampling": {"byte_order": "middle"}})

    def test_too_few_seed_words_raises(self):
        with pytest.raises(ConfigError, match="needs 4 seed_words"):
            config_from_dict({"engine": {"name": "xoshiro256**", "seed_words": [1, 2]}})


class TestConfigToDict:
    """Tests for config_to_dict."""

    def test_roundtrip(self):
        cfg1 = WordRngConfig(engine=EngineConfig(name="pcg32", seed_words=[42, 54]), seed=999)
        d = config_to_dict(cfg1)
        cfg2 = config_from_dict(d)

        assert cfg2.seed == 999
        assert cfg2.engine.seed_words == [42, 54]
        assert cfg2 == cfg1

    def test_seed_words_omitted_when_unset(self):
        assert "seed_words" not in config_to_dict(WordRngConfig())["engine"]


class TestLoadSaveConfig:
    """Tests for load_config and save_config."""

    def test_save_and_load(self):
        cfg1 = WordRngConfig.minimal()

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "config.yaml"
            save_config(cfg1, path)
            cfg2 = load_config(path)

        assert cfg2 == cfg1

    def test_load_nonexistent_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("/nonexistent/path/config.yaml")

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("engine: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == WordRngConfig()

    @pytest.mark.parametrize("name", ["default.yaml", "minimal.yaml"])
    def test_shipped_configs_load(self, name):
        cfg = load_config(PROJECT_ROOT / "configs" / name)
        assert isinstance(cfg, WordRngConfig)
