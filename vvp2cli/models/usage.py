"""Resource usage report."""

from __future__ import annotations

import csv
from dataclasses import dataclass

from vvp2cli.errors import InvalidResponseError


@dataclass
class UsageReport:
    """Raw CSV body of the resource usage endpoint and the requested range."""

    csv_data: str
    from_date: str = ""
    to_date: str = ""

    def parse_csv(self) -> list[dict[str, str]]:
        """Parse the report into rows keyed by the header.

        Comment lines (``#``) and blank lines are skipped. The first remaining
        record is the header; a report without data rows yields ``[]``. Every
        record must have as many fields as the header.
        """
        lines = [
            line
            for line in self.csv_data.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]
        try:
            records = list(csv.reader(lines, strict=True))
        except csv.Error as e:
            raise InvalidResponseError(f"failed to parse CSV: {e}") from e
        if len(records) < 2:
            return []

        header, *rows = records
        for number, record in enumerate(rows, start=2):
            if len(record) != len(header):
                raise InvalidResponseError(
                    f"failed to parse CSV: record {number} has {len(record)} fields, "
                    f"expected {len(header)}"
                )
        return [dict(zip(header, record)) for record in rows]
