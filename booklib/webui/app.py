import logging

import streamlit as st

from booklib.config import load_config
from booklib.view import PAGE_TITLE, TAGLINE
from booklib.webui.display import display_add_form, display_collection
from booklib.webui.filters import create_search_filter
from booklib.webui.state import get_controller

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    config = load_config()
    st.set_page_config(page_title=config.ui.page_title, layout=config.ui.layout)

    controller = get_controller()

    st.title(PAGE_TITLE)
    st.caption(TAGLINE)

    create_search_filter(controller)
    display_add_form()
    display_collection(controller.view())


if __name__ == "__main__":
    main()
