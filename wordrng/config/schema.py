"""
wordrng.config.schema

Configuration schemas using dataclasses.

Design: All config fields have explicit types. Defaults only at top level.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class EngineConfig:
    """Engine selection and optional explicit seed words."""
    name: str = "xoshiro256**"
    seed_words: Optional[List[int]] = None  # Overrides the integer seed when set

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("engine name must be a non-empty string")
        if self.seed_words is not None:
            self.seed_words = list(self.seed_words)
            if any(not isinstance(w, int) or w < 0 for w in self.seed_words):
                raise ValueError("seed_words must be non-negative integers")


@dataclass
class SamplingConfig:
    """Derived-layer configuration."""
    byte_order: str = "native"  # "little" | "big" | "native"
    max_rejections: Optional[int] = None  # None = unbounded rejection loops

    def __post_init__(self):
        if self.byte_order not in ("little", "big", "native"):
            raise ValueError(f"Invalid byte_order: {self.byte_order}")
        if self.max_rejections is not None and (
            not isinstance(self.max_rejections, int) or self.max_rejections <= 0
        ):
            raise ValueError("max_rejections must be a positive int or None")


@dataclass
class DiagnosticsConfig:
    """Statistical self-check configuration."""
    n_draws: int = 100_000
    n_bins: int = 10
    significance: float = 0.001
    output_dir: str = "runs"

    def __post_init__(self):
        if self.n_draws <= 0:
            raise ValueError("n_draws must be positive")
        if self.n_bins < 2:
            raise ValueError("n_bins must be at least 2")
        if not (0 < self.significance < 1):
            raise ValueError("significance must be in (0, 1)")


@dataclass
class WordRngConfig:
    """Top-level configuration.

    This is the ONLY place defaults are specified.
    All sub-configs receive explicit values.
    """
    engine: EngineConfig = field(default_factory=EngineConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)

    seed: int = 42

    def __post_init__(self):
        if not isinstance(self.seed, int) or self.seed < 0:
            raise ValueError("seed must be a non-negative int")

    @classmethod
    def minimal(cls) -> "WordRngConfig":
        """Factory for minimal testing configuration."""
        return cls(
            engine=EngineConfig(name="splitmix64"),
            sampling=SamplingConfig(byte_order="little"),
            diagnostics=DiagnosticsConfig(n_draws=20_000, n_bins=8),
        )
