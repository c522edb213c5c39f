"""
Tests for directed and randomized event generation.
"""
import random

import pytest

from dutcheck.engine import checksum
from dutcheck.engine.packet_generator import DEFAULT_ALPHABET, PacketGenerator
from dutcheck.exceptions import ConfigurationError


class TestDirected:

    def test_passes_fields_through(self):
        event = PacketGenerator.directed("Q", "??", False)
        assert event.data_in == "Q"
        assert event.checksum_in == "??"
        assert event.valid_in is False


class TestRandomized:

    def test_same_seed_same_events(self):
        first = PacketGenerator(rng=random.Random(42))
        second = PacketGenerator(rng=random.Random(42))
        assert [first.randomized() for _ in range(50)] == [second.randomized() for _ in range(50)]

    def test_events_are_well_formed(self):
        generator = PacketGenerator(rng=random.Random(1))
        for _ in range(200):
            event = generator.randomized()
            assert event.data_in in DEFAULT_ALPHABET
            assert event.valid_in is True
            assert event.checksum_in in (checksum.compute(event.data_in), generator.bad_checksum)

    def test_probability_one_always_valid(self):
        generator = PacketGenerator(rng=random.Random(3), valid_checksum_probability=1.0)
        for _ in range(100):
            event = generator.randomized()
            assert checksum.validate(event.data_in, event.checksum_in)

    def test_probability_zero_always_sentinel(self):
        generator = PacketGenerator(rng=random.Random(3), valid_checksum_probability=0.0)
        for _ in range(100):
            event = generator.randomized()
            assert event.checksum_in == "BB"
            assert not checksum.validate(event.data_in, event.checksum_in)

    def test_default_probability_roughly_eighty_percent(self):
        generator = PacketGenerator(rng=random.Random(2024))
        valid = sum(
            checksum.validate(e.data_in, e.checksum_in)
            for e in (generator.randomized() for _ in range(2000))
        )
        assert 1500 < valid < 1700

    def test_draws_every_symbol(self):
        generator = PacketGenerator(rng=random.Random(5))
        seen = {generator.randomized().data_in for _ in range(200)}
        assert seen == set(DEFAULT_ALPHABET)

    def test_override_rng_leaves_own_source_untouched(self):
        generator = PacketGenerator(rng=random.Random(9))
        reference = PacketGenerator(rng=random.Random(9))
        generator.randomized(random.Random(100))
        assert generator.randomized() == reference.randomized()


class TestConfiguration:

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_probability_out_of_range(self, probability):
        with pytest.raises(ConfigurationError):
            PacketGenerator(valid_checksum_probability=probability)

    def test_empty_alphabet(self):
        with pytest.raises(ConfigurationError):
            PacketGenerator(alphabet=())

    def test_sentinel_must_not_be_a_real_checksum(self):
        with pytest.raises(ConfigurationError):
            PacketGenerator(bad_checksum="ac")
