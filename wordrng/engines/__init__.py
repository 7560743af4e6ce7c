"""
wordrng.engines

Word-source engines.

This module provides:
- Abstract WordSource contract (Engine32 / Engine64 bases)
- Concrete engine implementations across six families
- Registry for looking engines up by name
- Seed expansion from a single integer
"""

from .base import WordSource, Engine32, Engine64
from .registry import EngineRegistry
from .seeding import expand_seed, seed_for

from .families import (
    ALL_ENGINES,
    # xoshiro
    Xoshiro256Plus,
    Xoshiro256PlusPlus,
    Xoshiro256StarStar,
    Xoshiro512Plus,
    Xoshiro512StarStar,
    Xoroshiro128Plus,
    Xoroshiro128PlusPlus,
    Xoroshiro128StarStar,
    Seiran,
    Shioi,
    # pcg
    Pcg32,
    PcgXshRs32,
    PcgRxsMXs64,
    # romu
    RomuDuo,
    RomuDuoJr,
    RomuTrio,
    RomuQuad,
    RomuMono32,
    RomuTrio32,
    RomuQuad32,
    # chaotic
    Sfc32,
    Sfc64,
    Jsf32,
    Jsf32t,
    Jsf64,
    GJrand64,
    Tyche,
    TycheI,
    # weyl
    SplitMix64,
    Wyrand,
    MiddleSquareWeyl,
    Squares,
    # shishua
    Shishua,
)

__all__ = [
    # Core classes
    "WordSource",
    "Engine32",
    "Engine64",
    "EngineRegistry",
    "expand_seed",
    "seed_for",
    "create_default_registry",
    "ALL_ENGINES",
    # xoshiro
    "Xoshiro256Plus",
    "Xoshiro256PlusPlus",
    "Xoshiro256StarStar",
    "Xoshiro512Plus",
    "Xoshiro512StarStar",
    "Xoroshiro128Plus",
    "Xoroshiro128PlusPlus",
    "Xoroshiro128StarStar",
    "Seiran",
    "Shioi",
    # pcg
    "Pcg32",
    "PcgXshRs32",
    "PcgRxsMXs64",
    # romu
    "RomuDuo",
    "RomuDuoJr",
    "RomuTrio",
    "RomuQuad",
    "RomuMono32",
    "RomuTrio32",
    "RomuQuad32",
    # chaotic
    "Sfc32",
    "Sfc64",
    "Jsf32",
    "Jsf32t",
    "Jsf64",
    "GJrand64",
    "Tyche",
    "TycheI",
    # weyl
    "SplitMix64",
    "Wyrand",
    "MiddleSquareWeyl",
    "Squares",
    # shishua
    "Shishua",
]


def create_default_registry() -> EngineRegistry:
    """Create the registry of every bundled engine.

    Names follow the lower-case algorithm spelling, e.g. "xoshiro256**",
    "pcg32", "romu-trio", "sfc64", "splitmix64".
    """
    return EngineRegistry(ALL_ENGINES)
