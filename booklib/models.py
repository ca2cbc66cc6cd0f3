"""Book record and id generation."""

import time
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional


def clean_field(value: Optional[str]) -> str:
    """Trim a user-entered field. ``None`` counts as empty."""
    if value is None:
        return ""
    return value.strip()


@dataclass(frozen=True)
class Book:
    """A single book in the library."""
    id: int
    title: str
    author: str

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against title or author."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.author.lower()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"


class IdGenerator:
    """
    Timestamp-based id source.

    Ids are milliseconds since the epoch, bumped past the previous id when
    the clock has not advanced, so they are unique within a process.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0

    def __call__(self) -> int:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate
