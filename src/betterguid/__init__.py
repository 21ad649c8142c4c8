"""
betterguid - URL-safe, lexicographically sortable unique identifiers

Each identifier is 20 characters: an 8-character millisecond timestamp and a
12-character suffix that is random per process and incremented on
same-millisecond collisions. Clients generate them independently and still
get chronological order by plain string comparison.

Fun fact: The scheme descends from Firebase "push IDs" (2015), which had to
sort correctly in a realtime database that only knew how to order keys as
strings!
"""

from betterguid.generator import (
    AscendingIdFactory,
    DescendingIdFactory,
    Generator,
    ascending,
    ascending_from,
    descending,
    descending_from,
    get_default_generator,
    new,
    reset_default_generator,
)
from betterguid.kernel import (
    ASCENDING_CHARS,
    DESCENDING_CHARS,
    ID_LENGTH,
    MAX_ASCENDING,
    MAX_DESCENDING,
    MAX_ID,
    MIN_ID,
    BetterGuidError,
    ConfigurationError,
    GeneratorSettings,
    InvalidIdentifierError,
    InvalidOrderError,
    Order,
    TestClock,
)
from betterguid.parsing import ParsedId, is_valid, parse, timestamp_of

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Generation
    "new",
    "ascending",
    "descending",
    "ascending_from",
    "descending_from",
    "Generator",
    "GeneratorSettings",
    "AscendingIdFactory",
    "DescendingIdFactory",
    "get_default_generator",
    "reset_default_generator",
    "TestClock",
    "Order",
    # Parsing
    "ParsedId",
    "parse",
    "is_valid",
    "timestamp_of",
    # Constants
    "ASCENDING_CHARS",
    "DESCENDING_CHARS",
    "ID_LENGTH",
    "MAX_ID",
    "MIN_ID",
    "MAX_ASCENDING",
    "MAX_DESCENDING",
    # Errors
    "BetterGuidError",
    "ConfigurationError",
    "InvalidIdentifierError",
    "InvalidOrderError",
]
