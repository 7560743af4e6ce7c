"""
wordrng.core.rng

The composed random generator.

Design Principles:
- One WordSource per generator, exclusively owned
- Every derived operation is delegated to a sampling layer
- Reproducible by construction: from_seed() and spawn() are deterministic
- NOT thread-safe and NOT cryptographically secure
"""

import threading
from concurrent.futures import Executor
from typing import Any, Iterable, List, MutableSequence, Optional, Union

from wordrng.core.types import ByteOrder, WORD32
from wordrng.core.validation import validate_positive_int
from wordrng.engines import EngineRegistry, WordSource, create_default_registry, seed_for
from wordrng.sampling import BoundedSampler, ByteExtractor, DistributionSampler, SequenceOps

DEFAULT_ENGINE = "xoshiro256**"


class RandomGenerator:
    """A WordSource coupled with every derived operation.

    All randomness flows from the single source; the sampling layers
    hold no entropy of their own apart from the cached Gaussian spare.

    Usage:
        rng = RandomGenerator.from_seed(42)
        k = rng.bounded_int(0, 10)
        picks = rng.sample(range(100), 5)
        child = rng.spawn()  # Independent, reproducible stream

    Instances must not be shared between threads without an external
    lock. reseed() draws seed material from the OS, which does not make
    the stream suitable for cryptographic use.
    """

    def __init__(
        self,
        source: WordSource,
        byte_order: Union[ByteOrder, str] = ByteOrder.NATIVE,
        max_rejections: Optional[int] = None,
    ):
        self._source = source
        self._bounded = BoundedSampler(source, max_rejections=max_rejections)
        self._byte_extractor = ByteExtractor(source, self._bounded, byte_order=byte_order)
        self._sequence = SequenceOps(self._bounded)
        self._distributions = DistributionSampler(source, max_rejections=max_rejections)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_seed(
        cls,
        seed: int,
        engine: str = DEFAULT_ENGINE,
        registry: Optional[EngineRegistry] = None,
        **kwargs,
    ) -> "RandomGenerator":
        """Build a generator from one integer seed.

        The seed is expanded into the engine's seed words with numpy's
        SeedSequence, so nearby seeds give unrelated streams.

        Args:
            seed: Non-negative integer.
            engine: Registry name of the engine.
            registry: Registry to look the engine up in (default: all
                bundled engines).
            **kwargs: Forwarded to the constructor (byte_order,
                max_rejections).
        """
        registry = registry or create_default_registry()
        engine_cls = registry.get_by_name(engine)
        return cls(engine_cls(*seed_for(engine_cls, seed)), **kwargs)

    @classmethod
    def from_config(
        cls,
        config,
        registry: Optional[EngineRegistry] = None,
    ) -> "RandomGenerator":
        """Build a generator from a WordRngConfig.

        Explicit engine seed words take precedence over the integer seed.
        """
        registry = registry or create_default_registry()
        kwargs = {
            "byte_order": config.sampling.byte_order,
            "max_rejections": config.sampling.max_rejections,
        }
        if config.engine.seed_words:
            source = registry.create(config.engine.name, *config.engine.seed_words)
            return cls(source, **kwargs)
        return cls.from_seed(config.seed, config.engine.name, registry, **kwargs)

    def spawn(self) -> "RandomGenerator":
        """Create a child generator of the same engine.

        The child is seeded from the parent's next draws, so a fixed
        parent seed gives a fixed sequence of children.
        """
        engine_cls = type(self._source)
        if engine_cls.seed_bits == WORD32:
            values = [self._source.next32() for _ in range(engine_cls.seed_words)]
        else:
            values = [self._source.next64() for _ in range(engine_cls.seed_words)]
        return RandomGenerator(
            engine_cls(*values),
            byte_order=self._byte_extractor.byte_order,
            max_rejections=self._bounded.max_rejections,
        )

    def spawn_many(self, n: int) -> List["RandomGenerator"]:
        """Create n child generators."""
        validate_positive_int(n, "n")
        return [self.spawn() for _ in range(n)]

    # ------------------------------------------------------------------
    # Source access and lifecycle
    # ------------------------------------------------------------------

    @property
    def source(self) -> WordSource:
        return self._source

    @property
    def word_bits(self) -> int:
        return self._source.word_bits

    def algorithm_name(self) -> str:
        return self._source.algorithm_name()

    def reseed(self) -> None:
        """Reseed from the OS entropy source and drop the Gaussian spare."""
        self._source.reseed()
        self._distributions.reset()

    def set_seed(self, *values: int) -> None:
        """Reseed from explicit values and drop the Gaussian spare."""
        self._source.set_seed(*values)
        self._distributions.reset()

    def clear(self) -> None:
        """Zero the engine state and drop the Gaussian spare."""
        self._source.clear()
        self._distributions.reset()

    def __enter__(self) -> "RandomGenerator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    # ------------------------------------------------------------------
    # Raw words
    # ------------------------------------------------------------------

    def next(self) -> int:
        """One native-width word."""
        return self._source.next_word()

    def next32(self) -> int:
        return self._source.next32()

    def next64(self) -> int:
        return self._source.next64()

    # ------------------------------------------------------------------
    # Bounded integers and bytes
    # ------------------------------------------------------------------

    def bounded_int(self, lower: int, upper: int) -> int:
        return self._bounded.bounded_int(lower, upper)

    def bounded_long(self, lower: int, upper: int) -> int:
        return self._bounded.bounded_long(lower, upper)

    def next_bytes(self, length: int, byte_order: Optional[Union[ByteOrder, str]] = None) -> bytes:
        return self._byte_extractor.next_bytes(length, byte_order)

    def fill(self, buffer: Any, byte_order: Optional[Union[ByteOrder, str]] = None) -> None:
        self._byte_extractor.fill(buffer, byte_order)

    def next_byte(self, lower: Optional[int] = None, upper: Optional[int] = None) -> int:
        return self._byte_extractor.next_byte(lower, upper)

    # ------------------------------------------------------------------
    # Scalars and distributions
    # ------------------------------------------------------------------

    def next_boolean(self) -> bool:
        return self._distributions.next_boolean()

    def next_double(self) -> float:
        return self._distributions.next_double()

    def uniform(self, lower: float, upper: float) -> float:
        return self._distributions.uniform(lower, upper)

    def next_gaussian(self, mean: float = 0.0, std: float = 1.0) -> float:
        return self._distributions.next_gaussian(mean, std)

    def next_gamma(self, alpha: float, beta: float) -> float:
        return self._distributions.next_gamma(alpha, beta)

    # ------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------

    def choice(self, items: Iterable, select: Optional[int] = None) -> Any:
        return self._sequence.choice(items, select)

    def sample(self, items: Iterable, k: int) -> List[Any]:
        return self._sequence.sample(items, k)

    def shuffle(self, items: Iterable) -> List[Any]:
        return self._sequence.shuffle(items)

    def shuffle_in_place(self, items: MutableSequence) -> None:
        self._sequence.shuffle_in_place(items)

    async def choice_async(
        self,
        items: Iterable,
        select: Optional[int] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> Any:
        return await self._sequence.choice_async(
            items, select, cancel_event=cancel_event, executor=executor
        )

    async def sample_async(
        self,
        items: Iterable,
        k: int,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> List[Any]:
        return await self._sequence.sample_async(
            items, k, cancel_event=cancel_event, executor=executor
        )

    async def shuffle_async(
        self,
        items: Iterable,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> List[Any]:
        return await self._sequence.shuffle_async(
            items, cancel_event=cancel_event, executor=executor
        )

    async def shuffle_in_place_async(
        self,
        items: MutableSequence,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        await self._sequence.shuffle_in_place_async(
            items, cancel_event=cancel_event, executor=executor
        )

    # ------------------------------------------------------------------
    # Layer access (for diagnostics)
    # ------------------------------------------------------------------

    @property
    def bounded(self) -> BoundedSampler:
        return self._bounded

    @property
    def byte_extractor(self) -> ByteExtractor:
        return self._byte_extractor

    @property
    def sequence(self) -> SequenceOps:
        return self._sequence

    @property
    def distributions(self) -> DistributionSampler:
        return self._distributions

    def __repr__(self) -> str:
        return (
            f"RandomGenerator(engine={self._source.name!r}, "
            f"word_bits={self._source.word_bits}, "
            f"byte_order={self._byte_extractor.byte_order.value!r})"
        )
