"""Output formatting utilities.

Provides TTY-aware console output for vcardctl:
- stdout console: for parsed records and check summaries
- JSON error output for CI integration (--json-errors)

TTY detection (git-style):
- When stdout is a TTY: Rich formatting, colors
- When stdout redirected: Plain text, no colors
"""

import json
import sys
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

from ..core.exceptions import ExitCode, format_json_error

# TTY detection for git-style behavior
_stdout_is_tty = sys.stdout.isatty()

console = Console(
    force_terminal=_stdout_is_tty,
    no_color=not _stdout_is_tty,
)


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {escape(message)}[/green]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ {escape(message)}[/yellow]")


def handle_error(
    exc: Exception,
    json_errors: bool = False,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """Handle an exception with appropriate output format.

    Args:
        exc: The exception to handle
        json_errors: If True, output JSON format; otherwise Rich format
        context: Optional additional context (file, line number)

    Returns:
        Exit code to use for sys.exit()
    """
    if json_errors:
        print(format_json_error(exc, context))
    else:
        print_error(str(exc))

    # Return appropriate exit code
    if hasattr(exc, "exit_code"):
        return exc.exit_code
    return ExitCode.GENERAL_ERROR


def print_json(data: Any, file: Optional[Any] = None) -> None:
    """Print data as formatted JSON to stdout or specified file.

    Args:
        data: Data to serialize and print
        file: Optional file object (defaults to stdout via console)
    """
    json_str = json.dumps(data, indent=2, default=str)
    if file:
        print(json_str, file=file)
    else:
        console.print_json(json_str)
