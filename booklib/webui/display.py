import logging
from functools import partial

import streamlit as st

from booklib.buttons import ActionButton, ActionVariant
from booklib.models import Book
from booklib.view import (
    ADD_FORM_HEADING, ADD_LABEL, AUTHOR_LABEL, AUTHOR_PLACEHOLDER,
    CANCEL_LABEL, EDIT_LABEL, EDITING_HEADING, REMOVE_LABEL, SAVE_LABEL,
    TITLE_LABEL, TITLE_PLACEHOLDER, LibraryView,
)
from booklib.webui.state import (
    ADD_AUTHOR_KEY, ADD_TITLE_KEY, EDIT_AUTHOR_KEY, EDIT_TITLE_KEY,
    handle_add, handle_cancel_edit, handle_remove, handle_save_edit,
    handle_start_edit,
)

logger = logging.getLogger(__name__)


def display_add_form():
    """
    Displays the add form. The inputs keep their text until a book is
    actually added.
    """
    with st.container(border=True):
        st.subheader(ADD_FORM_HEADING)
        cols = st.columns(2)
        with cols[0]:
            st.text_input(TITLE_LABEL, key=ADD_TITLE_KEY, placeholder=TITLE_PLACEHOLDER)
        with cols[1]:
            st.text_input(AUTHOR_LABEL, key=ADD_AUTHOR_KEY, placeholder=AUTHOR_PLACEHOLDER)
        ActionButton(ADD_LABEL, ActionVariant.ADD, handle_add).render_streamlit(st, key="add_book")


def display_book_card(book: Book):
    # Book text goes through st.text so it is shown as stored, never as Markdown.
    st.markdown("### 📕")
    st.text(book.title)
    st.text(f"✍️ {book.author}")

    cols = st.columns([1, 1, 4])
    with cols[0]:
        ActionButton(EDIT_LABEL, ActionVariant.EDIT, partial(handle_start_edit, book)) \
            .render_streamlit(st, key=f"edit_{book.id}")
    with cols[1]:
        ActionButton(REMOVE_LABEL, ActionVariant.REMOVE, partial(handle_remove, book.id)) \
            .render_streamlit(st, key=f"remove_{book.id}")


def display_edit_form(book: Book):
    st.markdown(f"**{EDITING_HEADING}**")
    st.text_input(TITLE_LABEL, key=EDIT_TITLE_KEY, placeholder="Book title")
    st.text_input(AUTHOR_LABEL, key=EDIT_AUTHOR_KEY, placeholder="Author name")

    cols = st.columns([1, 1, 4])
    with cols[0]:
        ActionButton(SAVE_LABEL, ActionVariant.ADD, partial(handle_save_edit, book.id)) \
            .render_streamlit(st, key=f"save_{book.id}")
    with cols[1]:
        ActionButton(CANCEL_LABEL, ActionVariant.REMOVE, handle_cancel_edit) \
            .render_streamlit(st, key=f"cancel_{book.id}")


def display_collection(view: LibraryView):
    """
    Displays the collection heading followed by one card per visible book,
    or the empty-state message.
    """
    st.subheader(view.heading)

    if view.empty_message:
        st.info(view.empty_message)
        logger.debug(f"Empty collection view: {view.empty_message}")
        return

    for book in view.books:
        with st.container(border=True):
            if view.is_editing(book.id):
                display_edit_form(book)
            else:
                display_book_card(book)
