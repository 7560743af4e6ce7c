"""
Tests for wordrng.core.rng

Verify the composed generator: construction, seeding and delegation.
"""

import numpy as np
import pytest

from wordrng.config.schema import WordRngConfig, EngineConfig, SamplingConfig
from wordrng.core.exceptions import InvalidArgumentError, RegistryError
from wordrng.core.rng import RandomGenerator
from wordrng.core.types import ByteOrder
from wordrng.engines import Pcg32, SplitMix64, Xoshiro256StarStar


class TestConstruction:
    """Tests for from_seed and from_config."""

    def test_from_seed_deterministic(self):
        a = RandomGenerator.from_seed(42)
        b = RandomGenerator.from_seed(42)
        assert [a.next64() for _ in range(10)] == [b.next64() for _ in range(10)]

    def test_different_seeds_differ(self):
        a = RandomGenerator.from_seed(1)
        b = RandomGenerator.from_seed(2)
        assert [a.next64() for _ in range(4)] != [b.next64() for _ in range(4)]

    def test_default_engine(self):
        rng = RandomGenerator.from_seed(0)
        assert isinstance(rng.source, Xoshiro256StarStar)
        assert rng.algorithm_name() == "Xoshiro 256**"

    def test_named_engine(self):
        rng = RandomGenerator.from_seed(0, engine="pcg32")
        assert isinstance(rng.source, Pcg32)
        assert rng.word_bits == 32

    def test_unknown_engine_raises(self):
        with pytest.raises(RegistryError, match="not found"):
            RandomGenerator.from_seed(0, engine="mersenne")

    def test_negative_seed_raises(self):
        with pytest.raises(InvalidArgumentError):
            RandomGenerator.from_seed(-1)

    def test_from_config_seed_words(self):
        config = WordRngConfig(engine=EngineConfig(name="pcg32", seed_words=[42, 54]))
        rng = RandomGenerator.from_config(config)
        assert rng.next() == 2707161783

    def test_from_config_integer_seed(self):
        config = WordRngConfig(engine=EngineConfig(name="sfc64"), seed=7)
        a = RandomGenerator.from_config(config)
        b = RandomGenerator.from_seed(7, engine="sfc64")
        assert a.next64() == b.next64()

    def test_from_config_sampling_options(self):
        config = WordRngConfig(sampling=SamplingConfig(byte_order="big", max_rejections=50))
        rng = RandomGenerator.from_config(config)
        assert rng.byte_extractor.byte_order is ByteOrder.BIG
        assert rng.bounded.max_rejections == 50
        assert rng.distributions.max_rejections == 50


class TestSpawn:
    """Tests for spawn and spawn_many."""

    def test_spawn_deterministic(self):
        child_a = RandomGenerator.from_seed(5).spawn()
        child_b = RandomGenerator.from_seed(5).spawn()
        assert [child_a.next64() for _ in range(5)] == [child_b.next64() for _ in range(5)]

    def test_spawn_same_engine(self):
        parent = RandomGenerator.from_seed(5, engine="romu-trio32")
        child = parent.spawn()
        assert type(child.source) is type(parent.source)

    def test_child_differs_from_parent(self):
        parent = RandomGenerator.from_seed(5)
        child = parent.spawn()
        assert [parent.next64() for _ in range(4)] != [child.next64() for _ in range(4)]

    def test_spawn_many(self):
        children = RandomGenerator.from_seed(9).spawn_many(3)
        assert len(children) == 3
        firsts = {c.next64() for c in children}
        assert len(firsts) == 3

    def test_spawn_many_invalid_raises(self):
        with pytest.raises(InvalidArgumentError):
            RandomGenerator.from_seed(9).spawn_many(0)

    def test_spawn_inherits_options(self):
        parent = RandomGenerator(SplitMix64(1), byte_order="big", max_rejections=10)
        child = parent.spawn()
        assert child.byte_extractor.byte_order is ByteOrder.BIG
        assert child.bounded.max_rejections == 10


class TestLifecycle:
    """Tests for reseed, set_seed, clear and the context manager."""

    def test_set_seed_reproduces(self):
        rng = RandomGenerator(SplitMix64(1234567))
        first = [rng.next64() for _ in range(3)]
        rng.set_seed(1234567)
        assert [rng.next64() for _ in range(3)] == first

    def test_set_seed_clears_spare(self):
        rng = RandomGenerator(SplitMix64(1))
        rng.next_gaussian()
        assert rng.distributions.has_spare
        rng.set_seed(1)
        assert not rng.distributions.has_spare

    def test_reseed_clears_spare(self):
        rng = RandomGenerator(SplitMix64(1))
        rng.next_gaussian()
        rng.reseed()
        assert not rng.distributions.has_spare

    def test_clear_zeros_state(self):
        rng = RandomGenerator(Xoshiro256StarStar(1, 2, 3, 4))
        rng.clear()
        assert rng.source.state == (0, 0, 0, 0)

    def test_context_manager_clears(self):
        with RandomGenerator(SplitMix64(99)) as rng:
            rng.next64()
        assert rng.source.state == (0,)


class TestDelegation:
    """Facade methods route to the right layer."""

    def test_next_is_native_word(self):
        rng = RandomGenerator(Pcg32(42, 54))
        assert rng.next() == 2707161783

    def test_next32_on_64_bit_engine(self):
        rng = RandomGenerator(SplitMix64(1234567))
        assert rng.next32() == 6457827717110365317 >> 32

    def test_bounded_int_golden(self):
        rng = RandomGenerator(SplitMix64(1234567))
        assert [rng.bounded_int(0, 10) for _ in range(5)] == [3, 1, 5, 2, 8]

    def test_bounded_long_golden(self):
        rng = RandomGenerator(SplitMix64(1234567))
        assert [rng.bounded_long(0, 10) for _ in range(5)] == [3, 1, 5, 2, 8]

    def test_next_bytes_length(self, rng):
        assert len(rng.next_bytes(13)) == 13

    def test_fill(self, rng):
        buf = bytearray(16)
        rng.fill(buf)
        assert any(buf)

    def test_scalar_outputs(self, rng):
        assert isinstance(rng.next_boolean(), bool)
        assert 0 <= rng.next_byte() < 256
        assert 10 <= rng.next_byte(10, 20) < 20
        assert 0.0 <= rng.next_double() < 1.0
        assert -2.0 <= rng.uniform(-2.0, 3.0) <= 3.0

    def test_distributions(self, rng):
        assert isinstance(rng.next_gaussian(1.0, 2.0), float)
        assert rng.next_gamma(2.0, 1.0) > 0.0

    def test_sequences(self, rng):
        items = list(range(10))
        assert rng.choice(items) in items
        assert len(rng.choice(items, 4)) == 4
        assert len(set(rng.sample(items, 4))) == 4
        assert sorted(rng.shuffle(items)) == items
        data = list(items)
        rng.shuffle_in_place(data)
        assert sorted(data) == items

    def test_numpy_integer_arguments(self):
        rng = RandomGenerator(SplitMix64(1234567))
        assert len(rng.next_bytes(np.int64(4))) == 4
        assert len(rng.sample(list(range(10)), np.int64(2))) == 2
        assert len(rng.choice(list(range(10)), np.int32(3))) == 3
        assert len(rng.spawn_many(np.int64(2))) == 2

    def test_layer_properties(self):
        rng = RandomGenerator(SplitMix64(1), byte_order="big")
        assert rng.bounded.source is rng.source
        assert rng.byte_extractor.byte_order is ByteOrder.BIG
        assert rng.sequence is not None
        assert not rng.distributions.has_spare

    def test_repr(self):
        rng = RandomGenerator(SplitMix64(1), byte_order="little")
        assert repr(rng) == "RandomGenerator(engine='splitmix64', word_bits=64, byte_order='little')"
