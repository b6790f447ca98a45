"""Rich consoles and message helpers.

Command results go to stdout untouched so they can be piped; everything
else (notices, errors, spinners, logs) goes to stderr.
"""

from __future__ import annotations

import logging

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from vvp2cli.ui.theme import get_theme

# Undecorated output for stdout
console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)

err_console = Console(stderr=True, theme=get_theme().to_rich_theme(), highlight=False)


def print_output(text: str) -> None:
    """Write rendered command output to stdout."""
    console.out(text, highlight=False)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message to stderr."""
    content = Text()
    content.append(message, style="#FF5252")

    err_console.print(Panel(
        content,
        title=f"[#FF5252 bold]✖ {title}[/#FF5252 bold]",
        border_style="#FF5252",
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_warning(message: str, title: str = "Warning") -> None:
    """Print a warning message to stderr."""
    content = Text()
    content.append(message, style="#FFB347")

    err_console.print(Panel(
        content,
        title=f"[#FFB347 bold]⚠ {title}[/#FFB347 bold]",
        border_style="#FFB347",
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_success(message: str) -> None:
    """One-line success notice on stderr."""
    err_console.print(Text.assemble(("  ✔ ", "success"), message))


def print_notice(message: str) -> None:
    """One-line muted notice on stderr."""
    err_console.print(Text(message, style="muted"))


def setup_logging(debug: bool = False) -> None:
    """Route stdlib logging through rich on stderr."""
    handler = RichHandler(console=err_console, show_path=debug, rich_tracebacks=True)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    if not debug:
        # httpx logs every request at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)
