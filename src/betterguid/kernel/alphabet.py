"""
Alphabets and positional encoding for sortable identifiers

Identifiers are written in base 63 using characters whose ASCII order matches
their numeric value, so plain string comparison sorts identifiers by the
numbers they encode. The descending alphabet is the exact reverse, which flips
that order for "newest first" keys.

Fun fact: "0" < "9" < "A" < "Z" < "_" < "a" < "z" in ASCII - the underscore
sits between the two letter cases, which is why it lands at index 36 here
instead of at the end like in RFC 4648 base64url!
"""

from enum import Enum

from betterguid.kernel.errors import InvalidOrderError

ASCENDING_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"
DESCENDING_CHARS = ASCENDING_CHARS[::-1]

# Digits, upper case, underscore, lower case
BASE = 63
TIMESTAMP_LENGTH = 8
SUFFIX_LENGTH = 12
ID_LENGTH = TIMESTAMP_LENGTH + SUFFIX_LENGTH

# Timestamps at or beyond this value wrap (around year 9833 in epoch milliseconds)
TIMESTAMP_MODULUS = BASE**TIMESTAMP_LENGTH

# Range-query sentinels for stored sort keys
MAX_ID = ASCENDING_CHARS[-1] * ID_LENGTH
MIN_ID = ASCENDING_CHARS[0] * ID_LENGTH

# Historical names: all-"z" is the first descending key, all-"0" the first ascending one
MAX_DESCENDING = MAX_ID
MAX_ASCENDING = MIN_ID


class Order(str, Enum):
    """Sort direction of generated identifiers"""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class Alphabet:
    """
    A 63-character positional numeral system

    Index i of `chars` is the character for digit value i. Lookups in both
    directions are precomputed since they sit on the generation hot path.
    """

    __slots__ = ("order", "chars", "_index")

    def __init__(self, order: Order, chars: str) -> None:
        if len(chars) != BASE or len(set(chars)) != BASE:
            raise ValueError(f"Alphabet must have {BASE} distinct characters")
        self.order = order
        self.chars = chars
        self._index = {char: value for value, char in enumerate(chars)}

    def __repr__(self) -> str:
        return f"Alphabet({self.order.value})"

    def __contains__(self, char: object) -> bool:
        return char in self._index

    def value_of(self, char: str) -> int:
        """Digit value of a character (KeyError if not in the alphabet)"""
        return self._index[char]

    def encode_timestamp(self, timestamp_ms: int) -> str:
        """
        Encode a millisecond timestamp as 8 digits, most significant first

        Values outside [0, 63**8) keep only their low 8 digits.
        """
        chars = self.chars
        digits = [""] * TIMESTAMP_LENGTH
        value = timestamp_ms % TIMESTAMP_MODULUS
        for position in range(TIMESTAMP_LENGTH - 1, -1, -1):
            value, digit = divmod(value, BASE)
            digits[position] = chars[digit]
        return "".join(digits)

    def decode_timestamp(self, prefix: str) -> int:
        """Inverse of encode_timestamp for an 8-character prefix"""
        value = 0
        for char in prefix:
            value = value * BASE + self._index[char]
        return value

    def encode_suffix(self, digits: list[int]) -> str:
        """
        Render suffix digits (least significant first) as 12 characters

        Digit 0 becomes the last character of the identifier.
        """
        chars = self.chars
        return "".join(chars[digit] for digit in reversed(digits))

    def decode_suffix(self, suffix: str) -> list[int]:
        """Inverse of encode_suffix: digits least significant first"""
        return [self._index[char] for char in reversed(suffix)]


ASCENDING = Alphabet(Order.ASCENDING, ASCENDING_CHARS)
DESCENDING = Alphabet(Order.DESCENDING, DESCENDING_CHARS)

_ALPHABETS = {
    Order.ASCENDING: ASCENDING,
    Order.DESCENDING: DESCENDING,
}


def alphabet_for(order: Order | str) -> Alphabet:
    """
    Look up the alphabet for a sort order (accepts the enum or its value)

    Raises:
        InvalidOrderError: If order is not a known sort order
    """
    try:
        return _ALPHABETS[Order(order)]
    except ValueError as e:
        raise InvalidOrderError(order) from e
