"""
Kernel - building blocks of identifier generation

Alphabets and encoding, generator state, clocks, settings, errors and the
logging/metrics plumbing. The Generator in betterguid.generator ties them
together.
"""

from betterguid.kernel.alphabet import (
    ASCENDING,
    ASCENDING_CHARS,
    DESCENDING,
    DESCENDING_CHARS,
    ID_LENGTH,
    MAX_ASCENDING,
    MAX_DESCENDING,
    MAX_ID,
    MIN_ID,
    Alphabet,
    Order,
    alphabet_for,
)
from betterguid.kernel.errors import (
    BetterGuidError,
    ConfigurationError,
    InvalidIdentifierError,
    InvalidOrderError,
)
from betterguid.kernel.ids import IdFactory
from betterguid.kernel.settings import GeneratorSettings
from betterguid.kernel.state import GeneratorState
from betterguid.kernel.time import Clock, RealClock, TestClock

__all__ = [
    # Alphabets
    "Alphabet",
    "Order",
    "ASCENDING",
    "DESCENDING",
    "ASCENDING_CHARS",
    "DESCENDING_CHARS",
    "ID_LENGTH",
    "MAX_ID",
    "MIN_ID",
    "MAX_ASCENDING",
    "MAX_DESCENDING",
    "alphabet_for",
    # State & settings
    "GeneratorState",
    "GeneratorSettings",
    "IdFactory",
    # Time
    "Clock",
    "RealClock",
    "TestClock",
    # Errors
    "BetterGuidError",
    "ConfigurationError",
    "InvalidIdentifierError",
    "InvalidOrderError",
]
