"""
Generator state - the only mutable data behind identifier generation

Holds the last timestamp used and the last suffix digits emitted. The state
itself is not synchronized; the owning Generator serializes access with its
lock.
"""

import random

from betterguid.kernel.alphabet import BASE, SUFFIX_LENGTH


class GeneratorState:
    """
    Last timestamp and suffix digits of a generator

    `last_random_digits` is least significant first: digit 0 is rendered as
    the final character of an identifier and is the one incremented first on
    a same-millisecond collision.
    """

    __slots__ = ("last_timestamp_ms", "last_random_digits")

    def __init__(self, last_timestamp_ms: int, last_random_digits: list[int]) -> None:
        if len(last_random_digits) != SUFFIX_LENGTH:
            raise ValueError(f"Suffix must have {SUFFIX_LENGTH} digits")
        if any(not 0 <= digit < BASE for digit in last_random_digits):
            raise ValueError(f"Suffix digits must be in range [0, {BASE})")
        self.last_timestamp_ms = last_timestamp_ms
        self.last_random_digits = list(last_random_digits)

    @classmethod
    def seeded(cls, rng: random.Random) -> "GeneratorState":
        """Fresh state with a random suffix drawn from rng"""
        return cls(0, random_digits(rng))

    def __repr__(self) -> str:
        return (
            f"GeneratorState(last_timestamp_ms={self.last_timestamp_ms}, "
            f"last_random_digits={self.last_random_digits})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneratorState):
            return NotImplemented
        return (
            self.last_timestamp_ms == other.last_timestamp_ms
            and self.last_random_digits == other.last_random_digits
        )

    def copy(self) -> "GeneratorState":
        return GeneratorState(self.last_timestamp_ms, self.last_random_digits)

    def increment_suffix(self) -> bool:
        """
        Add one to the suffix as a base-63 counter

        Returns True when the carry ran off the most significant digit, in
        which case every digit is now zero.
        """
        digits = self.last_random_digits
        for i in range(SUFFIX_LENGTH):
            digits[i] += 1
            if digits[i] < BASE:
                return False
            digits[i] = 0
        return True

    def reseed(self, rng: random.Random) -> None:
        """Replace the suffix with fresh random digits"""
        self.last_random_digits = random_digits(rng)


def random_digits(rng: random.Random) -> list[int]:
    return [rng.randrange(BASE) for _ in range(SUFFIX_LENGTH)]
