"""Per-session controller storage and widget callbacks."""

import logging

import streamlit as st

from booklib.controller import LibraryController
from booklib.models import Book

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "controller"
SEARCH_KEY = "search_query"
ADD_TITLE_KEY = "add_title"
ADD_AUTHOR_KEY = "add_author"
EDIT_TITLE_KEY = "edit_title"
EDIT_AUTHOR_KEY = "edit_author"


def get_controller() -> LibraryController:
    """
    Return the controller for this browser session, creating it on first use.

    Streamlit reruns the script on every interaction, so the controller
    lives in ``st.session_state`` to survive reruns.
    """
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = LibraryController()
        logger.debug("Created library controller for new session")
    return st.session_state[CONTROLLER_KEY]


def handle_add() -> None:
    controller = get_controller()
    controller.set_draft_title(st.session_state.get(ADD_TITLE_KEY, ""))
    controller.set_draft_author(st.session_state.get(ADD_AUTHOR_KEY, ""))
    if controller.submit_add():
        st.session_state[ADD_TITLE_KEY] = controller.draft_title
        st.session_state[ADD_AUTHOR_KEY] = controller.draft_author


def handle_remove(book_id: int) -> None:
    get_controller().remove(book_id)


def handle_start_edit(book: Book) -> None:
    controller = get_controller()
    controller.start_edit(book)
    # Seed the edit inputs before they are drawn on the next rerun
    st.session_state[EDIT_TITLE_KEY] = book.title
    st.session_state[EDIT_AUTHOR_KEY] = book.author


def handle_save_edit(book_id: int) -> None:
    controller = get_controller()
    controller.set_edit_title(st.session_state.get(EDIT_TITLE_KEY, ""))
    controller.set_edit_author(st.session_state.get(EDIT_AUTHOR_KEY, ""))
    controller.save_edit(book_id)


def handle_cancel_edit() -> None:
    get_controller().cancel_edit()
