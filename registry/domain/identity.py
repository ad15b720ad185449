"""
Person Identity Allocation

Issues integer person identifiers from one strictly increasing sequence.
A single allocator is shared by every person constructor of a registry, so
students and teachers draw from the same sequence.
"""

import structlog

logger = structlog.get_logger(__name__)


class IdentityAllocator:
    """
    Monotonic identifier source.

    Not thread-safe: the registry is a single-threaded object graph.
    """

    def __init__(self, start: int = 1):
        """
        Initialize allocator.

        Args:
            start: First identifier to issue (must be positive)
        """
        if start < 1:
            raise ValueError("Identifier sequence must start at 1 or above")
        self._next_id = start

    def next(self) -> int:
        """Issue the next identifier."""
        issued = self._next_id
        self._next_id += 1
        logger.debug("Person identifier issued", person_id=issued)
        return issued

    def peek(self) -> int:
        """Return the identifier the next call to next() will issue."""
        return self._next_id

    def __repr__(self) -> str:
        return f"IdentityAllocator(next_id={self._next_id})"
