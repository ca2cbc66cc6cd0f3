import logging

import streamlit as st

from booklib.controller import LibraryController
from booklib.view import SEARCH_PLACEHOLDER
from booklib.webui.state import SEARCH_KEY

logger = logging.getLogger(__name__)


def create_search_filter(controller: LibraryController) -> str:
    """
    Draws the search bar and applies its text as the controller query.
    Returns the active query.
    """
    query = st.text_input(
        "🔍 Search",
        key=SEARCH_KEY,
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
    )

    if query != controller.query:
        controller.set_query(query)
        logger.debug(f"Applied search filter: '{query}'")

    return controller.query
