"""
Test event generation - directed and randomized.

Randomized events draw from an injected random.Random so runs are
reproducible under a seed.
"""
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import structlog

from dutcheck.config import settings
from dutcheck.engine import checksum
from dutcheck.exceptions import ConfigurationError

logger = structlog.get_logger()

DEFAULT_ALPHABET: Tuple[str, ...] = ("S", "K", "Z", "X", "Y")


@dataclass(frozen=True)
class TestEvent:
    """A single input event for the runner"""
    __test__ = False

    data_in: str
    checksum_in: str
    valid_in: bool = True


class PacketGenerator:
    """
    Produces test events for the runner.

    Args:
        rng: Random source for randomized mode; a fresh unseeded
            random.Random when omitted
        valid_checksum_probability: Chance a randomized event carries the
            correct checksum
        bad_checksum: Checksum emitted for the corrupted case
        alphabet: Symbols drawn uniformly in randomized mode
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        valid_checksum_probability: Optional[float] = None,
        bad_checksum: Optional[str] = None,
        alphabet: Sequence[str] = DEFAULT_ALPHABET,
    ):
        if valid_checksum_probability is None:
            valid_checksum_probability = settings.valid_checksum_probability
        if bad_checksum is None:
            bad_checksum = settings.bad_checksum

        if not 0.0 <= valid_checksum_probability <= 1.0:
            raise ConfigurationError(
                "valid_checksum_probability must be within [0, 1]",
                {"value": valid_checksum_probability},
            )
        if not alphabet:
            raise ConfigurationError("alphabet must not be empty")

        colliding = [s for s in alphabet if checksum.validate(s, bad_checksum)]
        if colliding:
            raise ConfigurationError(
                "bad_checksum is the valid checksum of an alphabet symbol",
                {"bad_checksum": bad_checksum, "symbols": colliding},
            )

        self.rng = rng if rng is not None else random.Random()
        self.valid_checksum_probability = valid_checksum_probability
        self.bad_checksum = bad_checksum
        self.alphabet = tuple(alphabet)

    @staticmethod
    def directed(data_in: str, checksum_in: str, valid_in: bool = True) -> TestEvent:
        """Caller-specified event, passed through without substitution"""
        return TestEvent(data_in=data_in, checksum_in=checksum_in, valid_in=valid_in)

    def randomized(self, rng: Optional[random.Random] = None) -> TestEvent:
        """
        Draw a random event.

        Args:
            rng: Overrides the generator's own source for this draw

        Returns:
            Event with valid_in always True
        """
        source = rng if rng is not None else self.rng
        data_in = source.choice(self.alphabet)
        use_valid = source.random() < self.valid_checksum_probability
        checksum_in = checksum.compute(data_in) if use_valid else self.bad_checksum

        logger.debug(
            "random_event_generated",
            data_in=data_in,
            checksum_in=checksum_in,
            valid_checksum=use_valid,
        )
        return TestEvent(data_in=data_in, checksum_in=checksum_in, valid_in=True)
