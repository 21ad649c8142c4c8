"""
Decoding identifiers back into their parts

An identifier does not record which alphabet produced it (both alphabets use
the same 63 characters), so callers pass the order they generated with.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from betterguid.kernel.alphabet import (
    ASCENDING,
    ID_LENGTH,
    TIMESTAMP_LENGTH,
    Order,
    alphabet_for,
)
from betterguid.kernel.errors import InvalidIdentifierError
from betterguid.kernel.time import ms_to_datetime


class ParsedId(BaseModel):
    """Timestamp and suffix decoded from an identifier"""

    identifier: str = Field(..., description="The identifier that was parsed")

    order: Order = Field(..., description="Alphabet the identifier was decoded with")

    timestamp_ms: int = Field(
        ...,
        ge=0,
        description="Milliseconds since the Unix epoch encoded in the first 8 characters",
    )

    created_at: datetime = Field(..., description="timestamp_ms as a UTC datetime")

    suffix_digits: list[int] = Field(
        ...,
        description="Suffix digit values, least significant first",
    )

    model_config = {"frozen": True}


def is_valid(identifier: object) -> bool:
    """True if identifier is a 20-character string over the alphabet"""
    return (
        isinstance(identifier, str)
        and len(identifier) == ID_LENGTH
        and all(char in ASCENDING for char in identifier)
    )


def _check(identifier: str) -> None:
    if not isinstance(identifier, str):
        raise InvalidIdentifierError(repr(identifier), "not a string")
    if len(identifier) != ID_LENGTH:
        raise InvalidIdentifierError(
            identifier, f"expected {ID_LENGTH} characters, got {len(identifier)}"
        )
    for position, char in enumerate(identifier):
        if char not in ASCENDING:
            raise InvalidIdentifierError(
                identifier, f"character {char!r} at position {position} is not in the alphabet"
            )


def timestamp_of(identifier: str, order: Order | str = Order.ASCENDING) -> int:
    """
    Decode the millisecond timestamp of an identifier

    Raises:
        InvalidIdentifierError: If identifier is malformed
        InvalidOrderError: If order is not a known sort order
    """
    _check(identifier)
    return alphabet_for(order).decode_timestamp(identifier[:TIMESTAMP_LENGTH])


def parse(identifier: str, order: Order | str = Order.ASCENDING) -> ParsedId:
    """
    Split an identifier into its timestamp and suffix

    Raises:
        InvalidIdentifierError: If identifier is malformed
        InvalidOrderError: If order is not a known sort order
    """
    _check(identifier)
    alphabet = alphabet_for(order)
    timestamp_ms = alphabet.decode_timestamp(identifier[:TIMESTAMP_LENGTH])
    return ParsedId(
        identifier=identifier,
        order=alphabet.order,
        timestamp_ms=timestamp_ms,
        created_at=ms_to_datetime(timestamp_ms),
        suffix_digits=alphabet.decode_suffix(identifier[TIMESTAMP_LENGTH:]),
    )
