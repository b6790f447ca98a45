"""Usage command - resource usage reports."""

from __future__ import annotations

import argparse
from datetime import datetime, timedelta, timezone

from vvp2cli.commands.base import BaseCommand, context
from vvp2cli.ui.console import print_output
from vvp2cli.ui.formatter import OutputFormat, render
from vvp2cli.ui.spinners import create_spinner

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_RANGE_DAYS = 7


def default_range(now: datetime | None = None) -> tuple[str, str]:
    """The last seven days up to today, in UTC."""
    now = now or datetime.now(timezone.utc)
    return (now - timedelta(days=DEFAULT_RANGE_DAYS)).strftime(DATE_FORMAT), now.strftime(DATE_FORMAT)


class UsageCommand(BaseCommand):
    """Fetch the platform's CSV resource usage report."""

    name = "usage"
    description = "Resource usage reports"

    @classmethod
    def register(cls, subparsers, common):
        parser = super().register(subparsers, common)
        actions = cls.add_actions(parser)
        report = cls.add_action(actions, "report", common, "Fetch a resource usage report")
        report.add_argument("--from", dest="from_date", default="", help="Start date (YYYY-MM-DD)")
        report.add_argument("--to", dest="to_date", default="", help="End date (YYYY-MM-DD)")
        return parser

    @context("get resource usage report")
    def report(self, args: argparse.Namespace) -> None:
        default_from, default_to = default_range()
        from_date = args.from_date or default_from
        to_date = args.to_date or default_to

        with create_spinner(f"Fetching usage report {from_date} to {to_date}..."):
            usage = self.api.get_resource_usage_report(from_date, to_date)

        fmt = OutputFormat.parse(self.output_format)
        if fmt is OutputFormat.TABLE:
            # Table format prints the server's CSV unchanged
            print_output(usage.csv_data.rstrip("\n"))
        else:
            print_output(render(usage.parse_csv(), fmt))
