"""Interactive terminal shell for the book library."""

import shlex
from functools import partial
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from booklib.buttons import ActionButton, ActionVariant
from booklib.controller import LibraryController
from booklib.models import Book
from booklib.session import Editing
from booklib.view import (
    CANCEL_LABEL, EDIT_LABEL, PAGE_TITLE, REMOVE_LABEL, SAVE_LABEL, TAGLINE,
    LibraryView,
)


class LibraryShell:
    """Interactive shell over a ``LibraryController``.

    Provides commands:
    - ls: Show the collection
    - search: Filter by title or author
    - title, author: Fill in the add form, or the edit draft while editing
    - add: Add the drafted book
    - edit, save, cancel: Edit a book
    - rm: Remove a book
    - help, ?: Show help
    - exit, quit: Exit the shell

    Books are addressed by their position in the list as last shown.
    """

    def __init__(
        self,
        controller: Optional[LibraryController] = None,
        console: Optional[Console] = None,
        history_path: Optional[Path] = None,
    ):
        self.controller = controller or LibraryController()
        self.console = console or Console()
        self.history_path = history_path
        self.running = True
        self.session: Optional[PromptSession] = None
        self._pending: Optional[LibraryView] = None
        self._unsubscribe = self.controller.subscribe(self._on_change)

        # Command registry
        self.commands = {
            "ls": self.cmd_ls,
            "search": self.cmd_search,
            "title": self.cmd_title,
            "author": self.cmd_author,
            "add": self.cmd_add,
            "edit": self.cmd_edit,
            "save": self.cmd_save,
            "cancel": self.cmd_cancel,
            "rm": self.cmd_rm,
            "help": self.cmd_help,
            "?": self.cmd_help,
            "exit": self.cmd_exit,
            "quit": self.cmd_exit,
        }

    def _on_change(self, view: LibraryView):
        self._pending = view

    def _create_session(self) -> PromptSession:
        if self.history_path is not None:
            self.history_path.parent.mkdir(parents=True, exist_ok=True)
            history = FileHistory(str(self.history_path))
        else:
            history = InMemoryHistory()
        return PromptSession(
            history=history,
            completer=WordCompleter(sorted(self.commands)),
            style=Style.from_dict({"prompt": "ansicyan bold"}),
        )

    def get_prompt(self) -> str:
        if self.controller.is_editing():
            return "booklib (editing) > "
        return "booklib > "

    def run(self):
        """Run the shell main loop."""
        self.session = self._create_session()
        self.console.print(f"[bold cyan]{PAGE_TITLE}[/bold cyan] - {TAGLINE}")
        self.console.print("Type 'help' for available commands, 'exit' to quit.\n")
        self.render(self.controller.view())

        while self.running:
            try:
                line = self.session.prompt(self.get_prompt()).strip()
                if not line:
                    continue
                self.execute(line)
            except KeyboardInterrupt:
                self.console.print("\nUse 'exit' or 'quit' to exit the shell.")
                continue
            except EOFError:
                break

        self.cleanup()

    def execute(self, line: str):
        """Parse and execute a command line, re-rendering if state changed."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Parse error:[/red] {escape(str(e))}")
            return

        if not parts:
            return

        cmd, args = parts[0], parts[1:]
        if cmd not in self.commands:
            self.console.print(
                f"[red]Unknown command:[/red] {escape(cmd)}. Type 'help' for available commands."
            )
            return

        self._pending = None
        self.commands[cmd](args)
        if self._pending is not None:
            view, self._pending = self._pending, None
            self.render(view)

    def cleanup(self):
        self._unsubscribe()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def row_actions(self, book: Book, view: LibraryView) -> List[ActionButton]:
        if view.is_editing(book.id):
            return [
                ActionButton(SAVE_LABEL, ActionVariant.ADD, partial(self.controller.save_edit, book.id)),
                ActionButton(CANCEL_LABEL, ActionVariant.REMOVE, self.controller.cancel_edit),
            ]
        return [
            ActionButton(EDIT_LABEL, ActionVariant.EDIT, partial(self.controller.start_edit, book)),
            ActionButton(REMOVE_LABEL, ActionVariant.REMOVE, partial(self.controller.remove, book.id)),
        ]

    def render(self, view: LibraryView):
        self.console.print(f"\n[bold magenta]{view.heading}[/bold magenta]")
        if view.query:
            self.console.print(f"[dim]Search:[/dim] {escape(view.query)}")

        if view.empty_message:
            self.console.print(f"[dim]{view.empty_message}[/dim]")
        else:
            table = Table(show_header=True, header_style="bold cyan")
            table.add_column("#", justify="right", style="dim")
            table.add_column("Title")
            table.add_column("Author")
            table.add_column("Actions")

            for position, book in enumerate(view.books, 1):
                actions = " ".join(button.markup() for button in self.row_actions(book, view))
                if view.is_editing(book.id):
                    draft = view.session
                    table.add_row(
                        str(position),
                        f"[dark_orange]✏️ {escape(draft.title)}[/dark_orange]",
                        f"[dark_orange]{escape(draft.author)}[/dark_orange]",
                        actions,
                    )
                else:
                    table.add_row(str(position), escape(book.title), escape(book.author), actions)

            self.console.print(table)

        if view.draft_title or view.draft_author:
            self.console.print(
                f"[dim]Add form:[/dim] title={escape(repr(view.draft_title))} author={escape(repr(view.draft_author))}"
            )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _resolve(self, args: List[str]) -> Optional[Book]:
        """Resolve a 1-based list position to a book on screen."""
        if len(args) != 1:
            self.console.print("[red]Expected a book number[/red]")
            return None
        try:
            position = int(args[0])
        except ValueError:
            self.console.print(f"[red]Not a book number:[/red] {escape(args[0])}")
            return None

        books = self.controller.visible_books()
        if not 1 <= position <= len(books):
            self.console.print(f"[red]No book at position {position}[/red]")
            return None
        return books[position - 1]

    def _press(self, book: Book, label: str) -> None:
        """Activate the action button labelled ``label`` on ``book``'s row."""
        for button in self.row_actions(book, self.controller.view()):
            if button.label == label:
                button.activate()
                return
        self.console.print(f"[red]No {escape(label)} action for[/red] {escape(book.title)}")

    def cmd_ls(self, args: List[str]):
        """Show the collection.

        Usage: ls
        """
        self.render(self.controller.view())

    def cmd_search(self, args: List[str]):
        """Filter books by title or author. Without text, clears the search.

        Usage: search [text]
        """
        self.controller.set_query(" ".join(args))

    def cmd_title(self, args: List[str]):
        """Set the title in the add form, or the edit draft while editing.

        Usage: title <text>
        """
        text = " ".join(args)
        if self.controller.is_editing():
            self.controller.set_edit_title(text)
        else:
            self.controller.set_draft_title(text)

    def cmd_author(self, args: List[str]):
        """Set the author in the add form, or the edit draft while editing.

        Usage: author <text>
        """
        text = " ".join(args)
        if self.controller.is_editing():
            self.controller.set_edit_author(text)
        else:
            self.controller.set_draft_author(text)

    def cmd_add(self, args: List[str]):
        """Add a book from the add form, or from the given title and author.

        Usage: add ["<title>" "<author>"]
        """
        if args:
            if len(args) != 2:
                self.console.print('[red]Usage:[/red] add ["<title>" "<author>"]')
                return
            self.controller.set_draft_title(args[0])
            self.controller.set_draft_author(args[1])
        self.controller.submit_add()

    def cmd_edit(self, args: List[str]):
        """Start editing a book.

        Usage: edit <n>
        """
        book = self._resolve(args)
        if book:
            self._press(book, EDIT_LABEL)

    def _edited_book(self) -> Optional[Book]:
        session = self.controller.session
        book = self.controller.store.find(session.book_id) if isinstance(session, Editing) else None
        if book is None:
            self.console.print("[yellow]Not editing any book[/yellow]")
        return book

    def cmd_save(self, args: List[str]):
        """Save the book being edited.

        Usage: save
        """
        book = self._edited_book()
        if book:
            self._press(book, SAVE_LABEL)

    def cmd_cancel(self, args: List[str]):
        """Discard the edit draft.

        Usage: cancel
        """
        book = self._edited_book()
        if book:
            self._press(book, CANCEL_LABEL)

    def cmd_rm(self, args: List[str]):
        """Remove a book.

        Usage: rm <n>
        """
        book = self._resolve(args)
        if book:
            self._press(book, REMOVE_LABEL)

    def cmd_help(self, args: List[str]):
        """Show help.

        Usage: help [command]
        """
        if args:
            cmd = args[0]
            if cmd in self.commands:
                self.console.print(f"[bold]{cmd}[/bold]")
                self.console.print(escape(self.commands[cmd].__doc__ or "No documentation available."))
            else:
                self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Command", style="cyan")
        table.add_column("Description", style="white")

        table.add_row("ls", "Show the collection")
        table.add_row(escape("search [text]"), "Filter by title or author")
        table.add_row("title <text>", "Set title (add form or edit draft)")
        table.add_row("author <text>", "Set author (add form or edit draft)")
        table.add_row('add ["<title>" "<author>"]', "Add a book")
        table.add_row("edit <n>", "Start editing book n")
        table.add_row("save", "Save the edited book")
        table.add_row("cancel", "Discard the edit")
        table.add_row("rm <n>", "Remove book n")
        table.add_row(escape("help [cmd]"), "Show help")
        table.add_row("exit, quit", "Exit the shell")

        self.console.print("[bold cyan]Available Commands:[/bold cyan]\n")
        self.console.print(table)

    def cmd_exit(self, args: List[str]):
        """Exit the shell."""
        self.running = False
        self.console.print("Goodbye!")
