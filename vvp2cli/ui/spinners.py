"""Spinner shown on stderr while a request is in flight."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from vvp2cli.ui.console import err_console

SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "processing": "arc",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Context manager for showing a spinner during an operation.

    Nothing is drawn when stderr is not a terminal, so piped and
    captured output stays clean.
    """
    if not err_console.is_terminal:
        yield
        return

    with err_console.status(
        f"[primary]{message}[/primary]",
        spinner=SPINNER_STYLES.get(style, "dots"),
        spinner_style="primary",
    ):
        yield
