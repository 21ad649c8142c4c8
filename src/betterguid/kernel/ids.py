"""
ID factory protocol

Code that needs identifiers should depend on an IdFactory rather than on a
module-level function, so tests can substitute a generator driven by a
TestClock and a fixed seed.
"""

from typing import Protocol


class IdFactory(Protocol):
    """Protocol for ID generation strategies"""

    def generate_id(self) -> str:
        """Generate a new unique ID"""
        ...
