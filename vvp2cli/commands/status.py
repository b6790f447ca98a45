"""Status command - platform health, versions and resource counts."""

from __future__ import annotations

import argparse

from vvp2cli.commands.base import BaseCommand
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.views import STATUS


class StatusCommand(BaseCommand):
    """Display platform status."""

    name = "status"
    description = "Show platform health, version and resource usage"
    aliases = ["info"]

    def run(self, args: argparse.Namespace) -> None:
        # get_status already prefixes its errors
        with create_spinner("Fetching platform status...", style="loading"):
            status = self.api.get_status()
        self.emit(status, STATUS)
