"""
wordrng.config.load

Config loading and validation.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import WordRngConfig, EngineConfig, SamplingConfig, DiagnosticsConfig
from ..core.exceptions import ConfigError, RegistryError
from ..engines import create_default_registry


def load_config(path: Union[str, Path]) -> WordRngConfig:
    """Load configuration from YAML file."""
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping in {path}")

    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> WordRngConfig:
    """Create WordRngConfig from dictionary.

    The engine name is checked against the default registry.
    """
    try:
        engine = EngineConfig(**(d.get("engine") or {}))
        sampling = SamplingConfig(**(d.get("sampling") or {}))
        diagnostics = DiagnosticsConfig(**(d.get("diagnostics") or {}))

        config = WordRngConfig(
            engine=engine,
            sampling=sampling,
            diagnostics=diagnostics,
            seed=d.get("seed", 42),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")

    try:
        engine_cls = create_default_registry().get_by_name(engine.name)
    except RegistryError as e:
        raise ConfigError(f"Invalid config: {e}")

    if engine.seed_words is not None and len(engine.seed_words) < engine_cls.seed_words:
        raise ConfigError(
            f"Invalid config: engine '{engine.name}' needs "
            f"{engine_cls.seed_words} seed_words, got {len(engine.seed_words)}"
        )

    return config


def save_config(config: WordRngConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    d = config_to_dict(config)

    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: WordRngConfig) -> Dict[str, Any]:
    """Convert WordRngConfig to dictionary."""
    engine_dict: Dict[str, Any] = {"name": config.engine.name}
    if config.engine.seed_words is not None:
        engine_dict["seed_words"] = list(config.engine.seed_words)

    return {
        "engine": engine_dict,
        "sampling": {
            "byte_order": config.sampling.byte_order,
            "max_rejections": config.sampling.max_rejections,
        },
        "diagnostics": {
            "n_draws": config.diagnostics.n_draws,
            "n_bins": config.diagnostics.n_bins,
            "significance": config.diagnostics.significance,
            "output_dir": config.diagnostics.output_dir,
        },
        "seed": config.seed,
    }
