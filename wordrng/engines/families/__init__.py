"""
wordrng.engines.families

Engine family implementations.

Families:
- xoshiro: xoshiro / xoroshiro / Seiran / Shioi (linear, jumpable)
- pcg: permuted congruential generators
- romu: multiply-rotate engines
- chaotic: SFC, JSF (two- and three-rotate), gjrand, Tyche
- weyl: counter-driven engines (SplitMix64, wyrand, MSWS, Squares)
- shishua: buffered SIMD-style engine (scalar form)
"""

from .xoshiro import (
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
)

from .pcg import (
    Pcg32,
    PcgXshRs32,
    PcgRxsMXs64,
)

from .romu import (
    RomuDuo,
    RomuDuoJr,
    RomuTrio,
    RomuQuad,
    RomuMono32,
    RomuTrio32,
    RomuQuad32,
)

from .chaotic import (
    Sfc32,
    Sfc64,
    Jsf32,
    Jsf32t,
    Jsf64,
    GJrand64,
    Tyche,
    TycheI,
)

from .weyl import (
    SplitMix64,
    Wyrand,
    MiddleSquareWeyl,
    Squares,
)

from .shishua import Shishua

ALL_ENGINES = (
    SplitMix64,
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
    Pcg32,
    PcgXshRs32,
    PcgRxsMXs64,
    RomuDuo,
    RomuDuoJr,
    RomuTrio,
    RomuQuad,
    RomuMono32,
    RomuTrio32,
    RomuQuad32,
    Sfc32,
    Sfc64,
    Jsf32,
    Jsf32t,
    Jsf64,
    GJrand64,
    Tyche,
    TycheI,
    Wyrand,
    MiddleSquareWeyl,
    Squares,
    Shishua,
)

__all__ = [
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
    "ALL_ENGINES",
]
