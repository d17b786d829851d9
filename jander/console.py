"""Rich console output for the command-line entrypoint.

No other module prints to the terminal directly; pipeline modules log, and
the CLI reports the final status and error details through these helpers.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from jander.exceptions import AppError, FormatterFailedError

console = Console()
error_console = Console(stderr=True)


def rprint(*objects: Any, **kwargs: Any) -> None:
    """Print to standard output through the shared Rich console."""
    console.print(*objects, **kwargs)


def error_details(error: BaseException) -> str:
    """Return the full diagnostic text for ``error``.

    Formatter failures include the partial output the formatter produced,
    which usually points at the broken part of the generated source.
    """
    if isinstance(error, AppError):
        details = error.message.strip("\n")
        if isinstance(error, FormatterFailedError) and error.output:
            details += f"\n\nFormatter output so far:\n{error.output}"
        return details
    return str(error)


def print_error(error: BaseException) -> None:
    """Print ``error`` as a red panel on standard error."""
    title = error.code if isinstance(error, AppError) else type(error).__name__
    error_console.print(
        Panel(Text(error_details(error)), title=title, border_style="red")
    )
