"""
View controller for the library page.

Owns the store together with transient UI state (search query, add-form
drafts, edit session) and funnels every change through named operations.
Listeners registered with ``subscribe`` receive a fresh ``LibraryView``
after each mutation.
"""

import logging
from typing import Callable, List, Optional

from .models import Book
from .session import IDLE, EditSession, Editing
from .store import LibraryStore
from .view import LibraryView, render

logger = logging.getLogger(__name__)

Listener = Callable[[LibraryView], None]


class LibraryController:
    """Bridges user actions to store operations."""

    def __init__(self, store: Optional[LibraryStore] = None):
        self.store = store if store is not None else LibraryStore()
        self.query = ""
        self.draft_title = ""
        self.draft_author = ""
        self.session: EditSession = IDLE
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def visible_books(self) -> List[Book]:
        return self.store.filter(self.query)

    def view(self) -> LibraryView:
        return render(
            self.visible_books(),
            total=len(self.store),
            query=self.query,
            draft_title=self.draft_title,
            draft_author=self.draft_author,
            session=self.session,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        if not self._listeners:
            return
        view = self.view()
        for listener in list(self._listeners):
            listener(view)

    # ------------------------------------------------------------------
    # Search and add form
    # ------------------------------------------------------------------

    def set_query(self, text: str) -> None:
        self.query = text or ""
        self._changed()

    def set_draft_title(self, text: str) -> None:
        self.draft_title = text or ""
        self._changed()

    def set_draft_author(self, text: str) -> None:
        self.draft_author = text or ""
        self._changed()

    def submit_add(self) -> bool:
        """Add the drafted book. Drafts are cleared only when it was added."""
        added = self.store.add(self.draft_title, self.draft_author)
        if added:
            self.draft_title = ""
            self.draft_author = ""
        self._changed()
        return added

    def remove(self, book_id: int) -> bool:
        removed = self.store.remove(book_id)
        if removed and self.is_editing(book_id):
            logger.debug(f"Closing edit session for removed book {book_id}")
            self.session = IDLE
        self._changed()
        return removed

    # ------------------------------------------------------------------
    # Edit session
    # ------------------------------------------------------------------

    def is_editing(self, book_id: Optional[int] = None) -> bool:
        """Whether a session is open, or open for ``book_id`` when given."""
        if not isinstance(self.session, Editing):
            return False
        return book_id is None or self.session.book_id == book_id

    def start_edit(self, book: Book) -> None:
        """Open an edit session for ``book``, dropping any other unsaved draft."""
        if isinstance(self.session, Editing) and self.session.book_id != book.id:
            logger.debug(f"Discarding draft for book {self.session.book_id}")
        self.session = Editing(book_id=book.id, title=book.title, author=book.author)
        self._changed()

    def set_edit_title(self, text: str) -> None:
        if isinstance(self.session, Editing):
            self.session = self.session.with_title(text or "")
            self._changed()

    def set_edit_author(self, text: str) -> None:
        if isinstance(self.session, Editing):
            self.session = self.session.with_author(text or "")
            self._changed()

    def save_edit(self, book_id: int) -> bool:
        """
        Commit the draft to the store.

        The session closes only when the update went through; with a blank
        draft it stays open so the user can correct it.
        """
        if not isinstance(self.session, Editing):
            return False

        saved = self.store.update(book_id, self.session.title, self.session.author)
        if saved:
            self.session = IDLE
        self._changed()
        return saved

    def cancel_edit(self) -> None:
        self.session = IDLE
        self._changed()
