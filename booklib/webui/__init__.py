"""Streamlit single-page front end.

Run with ``booklib ui`` or ``streamlit run booklib/webui/app.py``.
"""
