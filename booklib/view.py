"""
Rendering of controller state.

``render`` is a pure function: the same state always produces an equal
``LibraryView``. Both the Streamlit page and the terminal shell draw from it.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .models import Book
from .session import EditSession, Editing

PAGE_TITLE = "📚 My Library"
TAGLINE = "Manage your favorite books with joy!"
SEARCH_PLACEHOLDER = "Search books by title or author..."
ADD_FORM_HEADING = "➕ Add a New Book"
TITLE_LABEL = "📖 Book Title"
AUTHOR_LABEL = "✍️ Author Name"
TITLE_PLACEHOLDER = "Enter book title"
AUTHOR_PLACEHOLDER = "Enter author name"
EDITING_HEADING = "✏️ Editing Book"

ADD_LABEL = "➕ Add Book"
EDIT_LABEL = "✏️ Edit"
REMOVE_LABEL = "🗑️ Remove"
SAVE_LABEL = "💾 Save"
CANCEL_LABEL = "❌ Cancel"

COLLECTION_HEADING = "📚 My Collection"
NO_MATCHES_MESSAGE = "No books match your search 🔍"
EMPTY_LIBRARY_MESSAGE = "Your library is empty. Start adding books! 🎉"


@dataclass(frozen=True)
class LibraryView:
    """Everything a front end needs to draw the page."""
    books: Tuple[Book, ...]
    total: int
    query: str
    draft_title: str
    draft_author: str
    session: EditSession
    heading: str
    empty_message: Optional[str]

    @property
    def count(self) -> int:
        return len(self.books)

    def is_editing(self, book_id: int) -> bool:
        return isinstance(self.session, Editing) and self.session.book_id == book_id


def collection_heading(total: int, shown: int) -> str:
    """Heading with the filtered count, shown once the library has books."""
    if total > 0:
        return f"{COLLECTION_HEADING} ({shown})"
    return COLLECTION_HEADING


def empty_message(shown: int, query: str) -> Optional[str]:
    """Tell 'nothing matches' apart from 'nothing exists'."""
    if shown:
        return None
    return NO_MATCHES_MESSAGE if query else EMPTY_LIBRARY_MESSAGE


def render(books, total: int, query: str, draft_title: str, draft_author: str,
           session: EditSession) -> LibraryView:
    shown = tuple(books)
    return LibraryView(
        books=shown,
        total=total,
        query=query,
        draft_title=draft_title,
        draft_author=draft_author,
        session=session,
        heading=collection_heading(total, len(shown)),
        empty_message=empty_message(len(shown), query),
    )
