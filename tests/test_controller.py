"""
Tests for the library view controller and its edit session.
"""

import pytest

from booklib.controller import LibraryController
from booklib.models import Book
from booklib.session import IDLE, Editing, Idle
from booklib.store import LibraryStore
from booklib.view import EMPTY_LIBRARY_MESSAGE, NO_MATCHES_MESSAGE


@pytest.fixture
def controller():
    return LibraryController()


@pytest.fixture
def two_books():
    """Controller holding A(id=1) and B(id=2), A first."""
    a = Book(id=1, title="Old", author="X")
    b = Book(id=2, title="Second", author="Y")
    return LibraryController(LibraryStore([a, b])), a, b


class TestAddForm:
    def test_submit_add_clears_drafts(self, controller):
        controller.set_draft_title("Dune")
        controller.set_draft_author("Herbert")

        assert controller.submit_add() is True
        assert controller.draft_title == ""
        assert controller.draft_author == ""
        assert [b.title for b in controller.store] == ["Dune"]

    def test_failed_add_keeps_drafts(self, controller):
        controller.set_draft_title("   ")
        controller.set_draft_author("X")

        assert controller.submit_add() is False
        assert controller.draft_title == "   "
        assert controller.draft_author == "X"
        assert len(controller.store) == 0

    def test_query_filters_visible_books(self, controller):
        for title, author in [("Dune", "Herbert"), ("Emma", "Austen")]:
            controller.set_draft_title(title)
            controller.set_draft_author(author)
            controller.submit_add()

        controller.set_query("AUST")
        assert [b.title for b in controller.visible_books()] == ["Emma"]

        controller.set_query("")
        assert [b.title for b in controller.visible_books()] == ["Emma", "Dune"]


class TestEditSession:
    def test_starts_idle(self, controller):
        assert controller.session == IDLE
        assert isinstance(controller.session, Idle)
        assert not controller.is_editing()

    def test_start_edit_seeds_drafts(self, two_books):
        controller, a, _ = two_books
        controller.start_edit(a)
        assert controller.session == Editing(book_id=1, title="Old", author="X")
        assert controller.is_editing(1)
        assert not controller.is_editing(2)

    def test_switching_edit_discards_previous_draft(self, two_books):
        controller, a, b = two_books
        controller.start_edit(a)
        controller.set_edit_title("Unsaved")
        controller.start_edit(b)

        assert controller.session == Editing(book_id=2, title="Second", author="Y")
        controller.cancel_edit()

        assert controller.session == IDLE
        assert list(controller.store.books) == [a, b]

    def test_save_with_blank_draft_stays_open(self, two_books):
        controller, a, _ = two_books
        controller.start_edit(a)
        controller.set_edit_title("")

        assert controller.save_edit(1) is False
        assert controller.session == Editing(book_id=1, title="", author="X")
        assert controller.store.find(1) == a

        controller.set_edit_title("New")
        assert controller.save_edit(1) is True
        assert controller.store.find(1) == Book(id=1, title="New", author="X")
        assert controller.store.books[0].id == 1
        assert controller.session == IDLE

    def test_save_when_idle_is_noop(self, two_books):
        controller, a, b = two_books
        assert controller.save_edit(1) is False
        assert list(controller.store.books) == [a, b]

    def test_draft_setters_ignored_when_idle(self, controller):
        controller.set_edit_title("x")
        controller.set_edit_author("y")
        assert controller.session == IDLE

    def test_cancel_leaves_store_untouched(self, two_books):
        controller, a, _ = two_books
        before = controller.store.books
        controller.start_edit(a)
        controller.set_edit_author("Changed")
        controller.cancel_edit()
        assert controller.store.books is before

    def test_removing_edited_book_closes_session(self, two_books):
        controller, a, _ = two_books
        controller.start_edit(a)
        assert controller.remove(1) is True
        assert controller.session == IDLE

    def test_removing_other_book_keeps_session(self, two_books):
        controller, a, _ = two_books
        controller.start_edit(a)
        controller.remove(2)
        assert controller.is_editing(1)


class TestView:
    def test_empty_library(self, controller):
        view = controller.view()
        assert view.heading == "📚 My Collection"
        assert view.empty_message == EMPTY_LIBRARY_MESSAGE
        assert view.count == 0

    def test_heading_counts_filtered_books(self, two_books):
        controller, _, _ = two_books
        assert controller.view().heading == "📚 My Collection (2)"
        controller.set_query("second")
        assert controller.view().heading == "📚 My Collection (1)"

    def test_no_matches_message(self, two_books):
        controller, _, _ = two_books
        controller.set_query("xyz")
        view = controller.view()
        assert view.heading == "📚 My Collection (0)"
        assert view.empty_message == NO_MATCHES_MESSAGE

    def test_query_on_empty_library_says_no_matches(self, controller):
        controller.set_query("dune")
        assert controller.view().empty_message == NO_MATCHES_MESSAGE

    def test_render_is_idempotent(self, two_books):
        controller, a, _ = two_books
        controller.start_edit(a)
        assert controller.view() == controller.view()

    def test_view_marks_edited_book(self, two_books):
        controller, a, b = two_books
        controller.start_edit(b)
        view = controller.view()
        assert view.is_editing(b.id)
        assert not view.is_editing(a.id)


class TestListeners:
    def test_listener_called_once_per_mutation(self, controller):
        views = []
        controller.subscribe(views.append)

        controller.set_draft_title("Dune")
        controller.set_draft_author("Herbert")
        controller.submit_add()

        assert len(views) == 3
        assert views[-1].total == 1
        assert views[-1].draft_title == ""

    def test_failed_operations_still_rerender(self, controller):
        views = []
        controller.subscribe(views.append)
        controller.submit_add()
        controller.remove(42)
        assert len(views) == 2

    def test_unsubscribe(self, controller):
        views = []
        unsubscribe = controller.subscribe(views.append)
        unsubscribe()
        unsubscribe()
        controller.set_query("x")
        assert views == []
