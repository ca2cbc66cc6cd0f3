"""
Edit session state.

At most one book is edited at a time. The session is either ``Idle`` or
``Editing`` a single book, with the unsaved drafts carried by the
``Editing`` value itself.
"""

from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class Idle:
    """No book is being edited."""


@dataclass(frozen=True)
class Editing:
    """A book is being edited with unsaved draft values."""
    book_id: int
    title: str
    author: str

    def with_title(self, title: str) -> "Editing":
        return replace(self, title=title)

    def with_author(self, author: str) -> "Editing":
        return replace(self, author=author)


EditSession = Union[Idle, Editing]

IDLE = Idle()
