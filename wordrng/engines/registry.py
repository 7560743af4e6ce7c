"""
wordrng.engines.registry

Engine registry management.

Design: Registry holds a finite, validated set of engine classes keyed by
their registry name. Engines are instantiated on demand so each caller
gets an independent state.
"""

from typing import Dict, List, Sequence, Tuple, Type

from wordrng.core.exceptions import RegistryError
from wordrng.core.types import WORD32, WORD64
from .base import WordSource


class EngineRegistry:
    """Manages a finite set of engine classes.

    Validates:
    - At least one engine
    - Every entry is a WordSource subclass
    - Unique engine names

    Attributes:
        engines: Tuple of engine classes in registration order.
    """

    def __init__(self, engine_classes: Sequence[Type[WordSource]]):
        if len(engine_classes) == 0:
            raise RegistryError("Registry must have at least one engine")

        for cls in engine_classes:
            if not (isinstance(cls, type) and issubclass(cls, WordSource)):
                raise RegistryError(f"{cls!r} is not a WordSource subclass")

        names = [cls.name for cls in engine_classes]
        if len(names) != len(set(names)):
            duplicates = [n for n in names if names.count(n) > 1]
            raise RegistryError(f"Duplicate engine names: {sorted(set(duplicates))}")

        self._engines: Tuple[Type[WordSource], ...] = tuple(engine_classes)
        self._name_to_cls: Dict[str, Type[WordSource]] = {
            cls.name: cls for cls in self._engines
        }

    @property
    def engines(self) -> Tuple[Type[WordSource], ...]:
        return self._engines

    @property
    def names(self) -> List[str]:
        return [cls.name for cls in self._engines]

    def __len__(self) -> int:
        return len(self._engines)

    def __contains__(self, name: str) -> bool:
        return name in self._name_to_cls

    def get_by_name(self, name: str) -> Type[WordSource]:
        """Get engine class by registry name."""
        if name not in self._name_to_cls:
            raise RegistryError(f"Engine '{name}' not found")
        return self._name_to_cls[name]

    def create(self, name: str, *seed: int) -> WordSource:
        """Instantiate an engine by name.

        Args:
            name: Registry name, e.g. "pcg32".
            *seed: Explicit seed values. With none, the engine seeds itself
                from the OS entropy source.

        Returns:
            A fresh engine instance.
        """
        return self.get_by_name(name)(*seed)

    def names_for_width(self, bits: int) -> List[str]:
        """Get names of all engines with the given native word width.

        Args:
            bits: 32 or 64.
        """
        if bits not in (WORD32, WORD64):
            raise RegistryError(f"Word width must be 32 or 64, got {bits}")
        return [cls.name for cls in self._engines if cls.word_bits == bits]

    def width_counts(self) -> Dict[int, int]:
        """Return count of engines per native word width."""
        counts = {WORD32: 0, WORD64: 0}
        for cls in self._engines:
            counts[cls.word_bits] += 1
        return counts

    def __iter__(self):
        return iter(self._engines)

    def __repr__(self) -> str:
        counts = self.width_counts()
        return (
            f"EngineRegistry(n={len(self)}, "
            f"32-bit={counts[WORD32]}, 64-bit={counts[WORD64]})"
        )
