"""Render command results as a table, pretty JSON or YAML."""

from __future__ import annotations

import io
import json
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Sequence

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from vvp2cli.models.base import to_plain

if TYPE_CHECKING:
    from vvp2cli.ui.views import ResourceView

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
EMPTY = "-"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: Any) -> "OutputFormat":
        """Unknown or empty values fall back to table."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.TABLE


class _IndentedDumper(yaml.SafeDumper):
    """Indent sequences under their parent key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def render_json(data: Any) -> str:
    return json.dumps(to_plain(data), indent=2, ensure_ascii=False)


def render_yaml(data: Any) -> str:
    text = yaml.dump(
        to_plain(data),
        Dumper=_IndentedDumper,
        indent=2,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return text.rstrip("\n")


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Left-aligned columns with a three-space gutter and no borders."""
    table = Table(box=None, pad_edge=False, padding=(0, 3, 0, 0), header_style=None)
    for header in headers:
        table.add_column(Text(header), no_wrap=True)
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))

    buffer = io.StringIO()
    Console(
        file=buffer,
        width=4096,
        color_system=None,
        highlight=False,
        markup=False,
        emoji=False,
        force_terminal=False,
    ).print(table)
    return "\n".join(line.rstrip() for line in buffer.getvalue().splitlines())


def render(value: Any, fmt: Any = OutputFormat.TABLE, view: Optional["ResourceView"] = None) -> str:
    """Render a single resource or a list of resources.

    JSON and YAML marshal the wire form of ``value``. Table output needs a
    ``view`` that knows the resource's columns and detail layout.
    """
    fmt = OutputFormat.parse(fmt)
    if fmt is OutputFormat.JSON:
        return render_json(value)
    if fmt is OutputFormat.YAML:
        return render_yaml(value)

    if view is None:
        raise ValueError("table output needs a resource view")
    if isinstance(value, (list, tuple)):
        if not value:
            return f"No {view.plural} found"
        return render_table(view.headers, [view.row(item) for item in value])
    return view.detail(value)


def format_time(value: Optional[datetime]) -> str:
    if value is None:
        return EMPTY
    return value.strftime(TIME_FORMAT)


def or_empty(value: Any) -> str:
    if value is None or value == "":
        return EMPTY
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
