"""
Identifier generator

Builds 20-character identifiers: 8 characters of millisecond timestamp
followed by 12 characters of suffix. The suffix is random when the generator
is created and is incremented by one whenever two identifiers share a
millisecond, so identifiers from one generator never repeat and always sort
in generation order.

Fun fact: 12 base-63 digits give about 2^71.7 suffix values - you could
generate a billion identifiers in a single millisecond every millisecond for
over 120 years before one generator's suffix wrapped around!
"""

import operator
import random
import threading
import time

from betterguid.kernel.alphabet import (
    ASCENDING,
    DESCENDING,
    Alphabet,
    Order,
    alphabet_for,
)
from betterguid.kernel.logging import get_logger
from betterguid.kernel.metrics import record_generation
from betterguid.kernel.settings import GeneratorSettings, default_settings
from betterguid.kernel.state import GeneratorState
from betterguid.kernel.time import Clock, default_clock

logger = get_logger(__name__)


class Generator:
    """
    Thread-safe generator of sortable identifiers

    Each generator owns its state, so two generators in one process can emit
    the same identifier for the same millisecond if their seeds collide.
    Share one generator per process (see get_default_generator) unless you
    need isolation, e.g. in tests.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize generator

        Args:
            settings: Generator settings (defaults to default_settings)
            clock: Source of the current time (defaults to the system clock)
            rng: Random source for suffixes (defaults to random.Random seeded
                from settings.seed, or from the clock when no seed is set)
        """
        self.settings = settings if settings is not None else default_settings
        self._clock = clock if clock is not None else default_clock
        if rng is None:
            seed = self.settings.seed
            rng = random.Random(time.time_ns() if seed is None else seed)
        self._rng = rng
        self._state = GeneratorState.seeded(rng)
        self._lock = threading.Lock()

        logger.debug(
            "generator_created",
            seeded=self.settings.seed is not None,
            refresh_suffix_per_ms=self.settings.refresh_suffix_per_ms,
            metrics_enabled=self.settings.metrics_enabled,
        )

    def new(self) -> str:
        """Generate an ascending identifier for the current time"""
        return self.ascending()

    def ascending(self) -> str:
        """Generate an ascending identifier for the current time"""
        return self._generate(ASCENDING, None)

    def descending(self) -> str:
        """Generate a descending identifier for the current time"""
        return self._generate(DESCENDING, None)

    def ascending_from(self, timestamp_ms: int) -> str:
        """
        Generate an ascending identifier for a given epoch millisecond

        Raises:
            TypeError: If timestamp_ms is not an integer (floats included)
        """
        return self._generate(ASCENDING, timestamp_ms)

    def descending_from(self, timestamp_ms: int) -> str:
        """Generate a descending identifier for a given epoch millisecond"""
        return self._generate(DESCENDING, timestamp_ms)

    def generate(self, timestamp_ms: int, order: Order | str = Order.ASCENDING) -> str:
        """
        Generate an identifier for a given millisecond and sort order

        Args:
            timestamp_ms: Milliseconds since the Unix epoch
            order: Order.ASCENDING or Order.DESCENDING (or their string values)

        Returns:
            20-character identifier
        """
        return self._generate(alphabet_for(order), timestamp_ms)

    def snapshot(self) -> GeneratorState:
        """Return a copy of the current state"""
        with self._lock:
            return self._state.copy()

    def _generate(self, alphabet: Alphabet, timestamp_ms: int | None) -> str:
        if timestamp_ms is not None:
            # TypeError for floats and other non-integers, before state is touched
            timestamp_ms = operator.index(timestamp_ms)
        with self._lock:
            # Reading the clock under the lock keeps timestamps in lock order
            if timestamp_ms is None:
                timestamp_ms = operator.index(self._clock.now_ms())
            state = self._state
            collided = timestamp_ms == state.last_timestamp_ms
            wrapped = False
            if collided:
                wrapped = state.increment_suffix()
            elif self.settings.refresh_suffix_per_ms:
                state.reseed(self._rng)
            state.last_timestamp_ms = timestamp_ms
            suffix = alphabet.encode_suffix(state.last_random_digits)

        prefix = alphabet.encode_timestamp(timestamp_ms)

        if wrapped:
            logger.warning(
                "suffix_wrapped",
                timestamp_ms=timestamp_ms,
                order=alphabet.order.value,
            )
        if self.settings.metrics_enabled:
            record_generation(alphabet.order.value, collided, wrapped)

        return prefix + suffix


class AscendingIdFactory:
    """IdFactory producing ascending identifiers"""

    def __init__(self, generator: Generator | None = None) -> None:
        self._generator = generator

    def generate_id(self) -> str:
        return (self._generator or get_default_generator()).ascending()


class DescendingIdFactory:
    """IdFactory producing descending (newest first) identifiers"""

    def __init__(self, generator: Generator | None = None) -> None:
        self._generator = generator

    def generate_id(self) -> str:
        return (self._generator or get_default_generator()).descending()


# =============================================================================
# Process-wide default generator
# =============================================================================

_default_generator: Generator | None = None
_default_lock = threading.Lock()


def get_default_generator() -> Generator:
    """Return the process-wide generator, creating it on first use"""
    global _default_generator
    if _default_generator is None:
        with _default_lock:
            if _default_generator is None:
                _default_generator = Generator()
    return _default_generator


def reset_default_generator(settings: GeneratorSettings | None = None) -> Generator:
    """
    Replace the process-wide generator

    Identifiers from the old and new generators may collide within the same
    millisecond, so only do this when nothing else is generating (tests,
    or right after fork).
    """
    global _default_generator
    with _default_lock:
        _default_generator = Generator(settings)
        return _default_generator


def new() -> str:
    """Generate an ascending identifier for the current time"""
    return get_default_generator().ascending()


def ascending() -> str:
    """Generate an ascending identifier for the current time"""
    return get_default_generator().ascending()


def descending() -> str:
    """Generate a descending identifier for the current time"""
    return get_default_generator().descending()


def ascending_from(timestamp_ms: int) -> str:
    """Generate an ascending identifier for a given epoch millisecond"""
    return get_default_generator().ascending_from(timestamp_ms)


def descending_from(timestamp_ms: int) -> str:
    """Generate a descending identifier for a given epoch millisecond"""
    return get_default_generator().descending_from(timestamp_ms)
