import importlib.util
import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from . import __version__
from .config import (
    ensure_config_exists, get_config_path, load_config, update_config,
)
from .decorators import handle_cli_errors

# Initialize Rich Traceback for better error messages
install(show_locals=False)

# Initialize Rich Console
console = Console()

# Configure logging to use Rich's RichHandler
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("booklib")

APP_SCRIPT = Path(__file__).parent / "webui" / "app.py"

app = typer.Typer(help="booklib - a single-page book library manager")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose mode"),
):
    """
    booklib - add, search, edit and remove books in a single page.

    Books are kept in memory for the lifetime of the page or shell session.
    """
    config = load_config()
    console.no_color = not config.cli.color

    if verbose or config.cli.verbose:
        logger.setLevel(logging.DEBUG)
        console.print("[bold green]Verbose mode enabled.[/bold green]")


@app.command()
def about():
    """Display information about booklib."""
    console.print(f"[bold cyan]booklib {__version__} - Book Library Manager[/bold cyan]")
    console.print("")
    console.print("Keep a list of books in a single page:")
    console.print("  • Add books by title and author")
    console.print("  • Search by title or author as you type")
    console.print("  • Edit or remove any book in place")
    console.print("")
    console.print("[bold]Commands:[/bold]")
    console.print("  booklib ui                   Open the web page (Streamlit)")
    console.print("  booklib shell                Interactive terminal shell")
    console.print("  booklib config --show        Show configuration")
    console.print("")
    console.print("[dim]Books are not saved: they vanish when the session ends.[/dim]")


@app.command()
@handle_cli_errors
def ui(
    host: Optional[str] = typer.Option(None, "--host", help="Address to bind to (defaults from config)"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to bind to (defaults from config)"),
    no_open: bool = typer.Option(False, "--no-open", help="Don't auto-open browser"),
):
    """
    Start the library web page.

    Runs the Streamlit app; each browser tab gets its own in-memory library.

    Examples:
        # Start with configured defaults
        booklib ui

        # Override config for one-time use
        booklib ui --port 8600 --no-open
    """
    config = load_config()

    if importlib.util.find_spec("streamlit") is None:
        console.print("[red]Error: streamlit is not installed[/red]")
        console.print("[yellow]Install with: pip install streamlit[/yellow]")
        raise typer.Exit(code=1)

    if not APP_SCRIPT.exists():
        raise FileNotFoundError(APP_SCRIPT)

    server_host = host if host is not None else config.server.host
    server_port = port if port is not None else config.server.port
    headless = config.server.headless or no_open or not config.server.auto_open_browser

    command = [
        sys.executable, "-m", "streamlit", "run", str(APP_SCRIPT),
        "--server.address", server_host,
        "--server.port", str(server_port),
        "--server.headless", "true" if headless else "false",
    ]
    logger.debug(f"Running: {' '.join(command)}")

    console.print("[blue]Starting booklib...[/blue]")
    console.print(f"[green]Library page at http://{server_host}:{server_port}[/green]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    try:
        subprocess.run(command, check=True)
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped[/yellow]")


@app.command()
def shell(
    history: bool = typer.Option(False, "--history", help="Keep command history next to the config file"),
):
    """
    Launch the interactive library shell.

    Commands:
        ls, search       - Show and filter books
        title, author    - Fill in the add form or the edit draft
        add              - Add a book
        edit, save,
        cancel           - Edit a book
        rm               - Remove a book
        help             - Show help
    """
    from .repl import LibraryShell

    history_path = get_config_path().parent / "history" if history else None
    LibraryShell(console=console, history_path=history_path).run()


@app.command()
@handle_cli_errors
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    init: bool = typer.Option(False, "--init", help="Initialize config file with defaults"),
    # UI settings
    set_page_title: Optional[str] = typer.Option(None, "--page-title", help="Set browser tab title"),
    set_layout: Optional[str] = typer.Option(None, "--layout", help="Set page layout (centered, wide)"),
    # Server settings
    set_server_host: Optional[str] = typer.Option(None, "--server-host", help="Set web server address"),
    set_server_port: Optional[int] = typer.Option(None, "--server-port", help="Set web server port"),
    set_auto_open: Optional[bool] = typer.Option(None, "--server-auto-open/--no-server-auto-open", help="Auto-open browser on start"),
    set_headless: Optional[bool] = typer.Option(None, "--server-headless/--no-server-headless", help="Run server headless"),
    # CLI settings
    set_verbose: Optional[bool] = typer.Option(None, "--cli-verbose/--no-cli-verbose", help="Enable verbose output by default"),
    set_color: Optional[bool] = typer.Option(None, "--cli-color/--no-cli-color", help="Enable colored output by default"),
):
    """
    View or edit booklib configuration.

    Configuration is stored at ~/.config/booklib/config.json (or ~/.booklib/config.json).

    Examples:
        # Show current configuration
        booklib config --show

        # Serve on all interfaces without opening a browser
        booklib config --server-host 0.0.0.0 --no-server-auto-open
    """
    if init:
        config_path = ensure_config_exists()
        console.print(f"[green]Configuration initialized at {config_path}[/green]")
        return

    changes = []
    if set_page_title is not None:
        changes.append(f"Page title: {set_page_title}")
    if set_layout is not None:
        changes.append(f"Layout: {set_layout}")
    if set_server_host is not None:
        changes.append(f"Server host: {set_server_host}")
    if set_server_port is not None:
        changes.append(f"Server port: {set_server_port}")
    if set_auto_open is not None:
        changes.append(f"Server auto-open: {set_auto_open}")
    if set_headless is not None:
        changes.append(f"Server headless: {set_headless}")
    if set_verbose is not None:
        changes.append(f"CLI verbose: {set_verbose}")
    if set_color is not None:
        changes.append(f"CLI color: {set_color}")

    # Handle --show or no args (default to show)
    if show or not changes:
        cfg = load_config()
        console.print("\n[bold]booklib Configuration[/bold]")
        console.print(f"[dim]Location: {get_config_path()}[/dim]\n")

        console.print("[bold cyan]UI Settings:[/bold cyan]")
        console.print(f"  Page Title:  {cfg.ui.page_title}")
        console.print(f"  Layout:      {cfg.ui.layout}")

        console.print("\n[bold cyan]Server Settings:[/bold cyan]")
        console.print(f"  Host:        {cfg.server.host}")
        console.print(f"  Port:        {cfg.server.port}")
        console.print(f"  Auto-open:   {cfg.server.auto_open_browser}")
        console.print(f"  Headless:    {cfg.server.headless}")

        console.print("\n[bold cyan]CLI Settings:[/bold cyan]")
        console.print(f"  Verbose:     {cfg.cli.verbose}")
        console.print(f"  Color:       {cfg.cli.color}")
        return

    console.print("[blue]Updating configuration:[/blue]")
    for change in changes:
        console.print(f"  • {change}")

    update_config(
        ui_page_title=set_page_title,
        ui_layout=set_layout,
        server_host=set_server_host,
        server_port=set_server_port,
        server_auto_open=set_auto_open,
        server_headless=set_headless,
        cli_verbose=set_verbose,
        cli_color=set_color,
    )
    console.print("[green]✓ Configuration updated![/green]")


if __name__ == "__main__":
    app()
