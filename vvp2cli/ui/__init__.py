"""UI components for the vvp2 CLI."""

from vvp2cli.ui.console import (
    console,
    err_console,
    print_error,
    print_notice,
    print_output,
    print_success,
    print_warning,
    setup_logging,
)
from vvp2cli.ui.formatter import OutputFormat, render, render_json, render_table, render_yaml
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_output",
    "print_error",
    "print_success",
    "print_warning",
    "print_notice",
    "setup_logging",
    # Formatting
    "OutputFormat",
    "render",
    "render_json",
    "render_yaml",
    "render_table",
    # Spinners
    "create_spinner",
]
