"""Tests for usage report CSV parsing and the default date range."""

from datetime import datetime, timezone

import pytest

from vvp2cli.commands.usage import default_range
from vvp2cli.errors import InvalidResponseError
from vvp2cli.models import UsageReport


class TestParseCSV:
    """Test UsageReport.parse_csv."""

    def test_comments_and_blank_lines_skipped(self):
        """Comment and blank lines should not become rows."""
        report = UsageReport(
            csv_data=(
                "# Resource usage report\n"
                "\n"
                "namespace,deployment,cpu_hours\n"
                "default,wordcount,12.5\n"
                "  # trailing comment\n"
                "analytics,sessions,3\n"
            )
        )
        assert report.parse_csv() == [
            {"namespace": "default", "deployment": "wordcount", "cpu_hours": "12.5"},
            {"namespace": "analytics", "deployment": "sessions", "cpu_hours": "3"},
        ]

    def test_header_only(self):
        """A header with no data rows yields no rows."""
        assert UsageReport(csv_data="a,b,c\n").parse_csv() == []

    def test_empty(self):
        """An empty body yields no rows."""
        assert UsageReport(csv_data="").parse_csv() == []
        assert UsageReport(csv_data="# nothing\n\n").parse_csv() == []

    def test_quoted_fields(self):
        """Quoted values may contain the delimiter."""
        report = UsageReport(csv_data='name,comment\njob,"a, b"\n')
        assert report.parse_csv() == [{"name": "job", "comment": "a, b"}]

    def test_short_record(self):
        """A record with fewer fields than the header is rejected."""
        report = UsageReport(csv_data="a,b,c\n1,2,3\n1,2\n")
        with pytest.raises(InvalidResponseError, match="record 3 has 2 fields, expected 3"):
            report.parse_csv()

    def test_long_record(self):
        """A record with more fields than the header is rejected."""
        report = UsageReport(csv_data="a,b\n1,2,3\n")
        with pytest.raises(InvalidResponseError, match="failed to parse CSV"):
            report.parse_csv()


class TestDefaultRange:
    """Test the default report window."""

    def test_last_seven_days(self):
        """The window should end today and start seven days earlier."""
        now = datetime(2024, 3, 5, 23, 30, tzinfo=timezone.utc)
        assert default_range(now) == ("2024-02-27", "2024-03-05")
