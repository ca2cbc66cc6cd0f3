"""Decorators for booklib CLI commands."""

import functools
import logging
import subprocess
from typing import Callable, Any

import typer
from rich.console import Console

logger = logging.getLogger(__name__)
console = Console()


def handle_cli_errors(func: Callable) -> Callable:
    """
    Decorator to handle common CLI command errors.

    Centralizes error handling for:
    - FileNotFoundError: Missing app script or executable
    - PermissionError: No access to config files
    - ValueError: Invalid arguments
    - CalledProcessError: Streamlit exited with an error
    - General exceptions: Unexpected errors
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except FileNotFoundError as e:
            console.print(f"[bold red]Error:[/bold red] File not found: {e}")
            raise typer.Exit(code=1)
        except PermissionError as e:
            console.print(f"[bold red]Error:[/bold red] Permission denied: {e}")
            console.print("[yellow]Tip: Check permissions on the config directory[/yellow]")
            raise typer.Exit(code=1)
        except ValueError as e:
            console.print(f"[bold red]Error:[/bold red] Invalid input: {e}")
            raise typer.Exit(code=1)
        except subprocess.CalledProcessError as e:
            console.print(f"[bold red]Error:[/bold red] Command exited with code {e.returncode}")
            raise typer.Exit(code=e.returncode or 1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            raise typer.Exit(code=130)
        except typer.Exit:
            raise
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            console.print(f"[bold red]Unexpected error:[/bold red] {e}")
            raise typer.Exit(code=1)

    return wrapper
