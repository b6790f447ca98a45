"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for diagnostics written to stderr."""

    primary: str = "#C77DFF"      # Light Purple - spinner and headings
    secondary: str = "#FF8C42"    # Orange - paths

    # Status colors
    success: str = "#00E676"
    error: str = "#FF5252"
    warning: str = "#FFB347"
    info: str = "#B388FF"

    muted: str = "#888888"
    accent: str = "#00CED1"

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            "primary": Style(color=self.primary),
            "secondary": Style(color=self.secondary),

            # Status styles
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),
            "info": Style(color=self.info),

            "muted": Style(color=self.muted),
            "accent": Style(color=self.accent),
            "path": Style(color=self.secondary),
            "url": Style(color=self.accent, underline=True),

            # Logging
            "logging.level.debug": Style(color=self.muted),
            "logging.level.warning": Style(color=self.warning),
            "logging.level.error": Style(color=self.error, bold=True),
        })


_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
