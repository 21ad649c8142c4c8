"""
Test Helper Functions - independent reference arithmetic and assertions

The helpers recompute suffix increments with plain integers instead of the
digit loop in GeneratorState, so tests check one implementation against
another rather than against itself.
"""

from collections.abc import Sequence

from betterguid.kernel.alphabet import ASCENDING_CHARS, BASE, SUFFIX_LENGTH

# 2025-01-15 12:00:00 UTC
FIXED_MS = 1_736_942_400_000


def suffix_to_int(suffix: str, chars: str = ASCENDING_CHARS) -> int:
    """Read a 12-character suffix as a base-63 number"""
    value = 0
    for char in suffix:
        value = value * BASE + chars.index(char)
    return value


def int_to_suffix(value: int, chars: str = ASCENDING_CHARS) -> str:
    """Write a number as a 12-character suffix (wrapping at BASE**12)"""
    value %= BASE**SUFFIX_LENGTH
    out = []
    for _ in range(SUFFIX_LENGTH):
        value, digit = divmod(value, BASE)
        out.append(chars[digit])
    return "".join(reversed(out))


def assert_strictly_increasing(ids: Sequence[str]) -> None:
    """Assert every identifier sorts after the one before it"""
    for prev, current in zip(ids, ids[1:]):
        assert current > prev, f"{current!r} must be > {prev!r}"


def assert_strictly_decreasing(ids: Sequence[str]) -> None:
    """Assert every identifier sorts before the one before it"""
    for prev, current in zip(ids, ids[1:]):
        assert current < prev, f"{current!r} must be < {prev!r}"
