"""
Custom exceptions for betterguid

Generation itself never raises; these cover the edges where callers hand
values in: identifiers to parse and settings to validate.
"""


class BetterGuidError(Exception):
    """Base exception for all betterguid errors"""

    pass


class InvalidIdentifierError(BetterGuidError, ValueError):
    """
    Raised when a string is not a well-formed identifier

    Subclasses ValueError so callers validating user input can catch either.
    """

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid identifier {identifier!r}: {reason}")


class InvalidOrderError(BetterGuidError, ValueError):
    """Raised when a sort order name is neither 'ascending' nor 'descending'"""

    def __init__(self, order: object) -> None:
        self.order = order
        super().__init__(f"Unknown order {order!r}: expected 'ascending' or 'descending'")


class ConfigurationError(BetterGuidError):
    """Raised when generator settings fail validation"""

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)
