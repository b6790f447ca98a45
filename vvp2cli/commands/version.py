"""Version command."""

from __future__ import annotations

import argparse

from vvp2cli import __app_name__, __build_time__, __commit__, __version__
from vvp2cli.commands.base import BaseCommand
from vvp2cli.ui.console import print_output


class VersionCommand(BaseCommand):
    """Print version, commit and build time."""

    name = "version"
    description = "Print the vvp2 version"
    requires_config = False

    def run(self, args: argparse.Namespace) -> None:
        print_output(f"{__app_name__} version {__version__}")
        print_output(f"  commit: {__commit__}")
        print_output(f"  built:  {__build_time__}")
