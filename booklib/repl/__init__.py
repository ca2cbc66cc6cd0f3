"""REPL shell for managing the library from a terminal.

This module provides an interactive shell over the same controller that
drives the Streamlit page.
"""

from booklib.repl.shell import LibraryShell

__all__ = ["LibraryShell"]
