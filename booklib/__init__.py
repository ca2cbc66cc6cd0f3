"""
booklib - a single-page book library manager.

Main API:
    from booklib import LibraryController

    controller = LibraryController()
    controller.set_draft_title("Dune")
    controller.set_draft_author("Frank Herbert")
    controller.submit_add()

    controller.set_query("dune")
    view = controller.view()
    print(view.heading, [str(book) for book in view.books])

Books live in memory only and vanish when the process exits.
"""

from .controller import LibraryController
from .models import Book
from .store import LibraryStore

__version__ = "0.1.0"
__all__ = ["Book", "LibraryController", "LibraryStore"]
