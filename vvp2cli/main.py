"""Main CLI entry point for vvp2."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import httpx

from vvp2cli import __version__
from vvp2cli.commands import (
    ConfigCommand,
    DeploymentCommand,
    DeploymentDefaultsCommand,
    DeploymentTargetCommand,
    JobCommand,
    NamespaceCommand,
    SavepointCommand,
    SecretValueCommand,
    SessionClusterCommand,
    StatusCommand,
    UsageCommand,
    VersionCommand,
)
from vvp2cli.core.api_client import APIClient
from vvp2cli.core.config import ConfigFlags, load, resolve
from vvp2cli.errors import ConfigError
from vvp2cli.ui.console import print_error, print_notice, setup_logging

# Command registry, in help order
COMMANDS = [
    DeploymentCommand,
    DeploymentDefaultsCommand,
    DeploymentTargetCommand,
    NamespaceCommand,
    SessionClusterCommand,
    JobCommand,
    SavepointCommand,
    SecretValueCommand,
    StatusCommand,
    UsageCommand,
    ConfigCommand,
    VersionCommand,
]


def _add_global_options(parser: argparse.ArgumentParser, suppress: bool) -> None:
    """Options accepted both before and after the subcommand.

    The subcommand copies use SUPPRESS defaults so that an option given
    before the subcommand is not reset by the subcommand's parser.
    """
    default = argparse.SUPPRESS if suppress else None
    parser.add_argument("--config", default=default, help="Config file (default: ~/.vvp2/config.yaml)")
    parser.add_argument("--api-url", default=default, help="Ververica Platform API URL")
    parser.add_argument("--api-token", default=default, help="API token")
    parser.add_argument(
        "--insecure",
        action="store_true",
        default=default,
        help="Skip TLS certificate verification",
    )
    parser.add_argument("-n", "--namespace", default=default, help="Namespace to operate in")
    parser.add_argument(
        "-o", "--output", default=default, help="Output format: table, json or yaml (default: table)"
    )
    parser.add_argument(
        "--debug", action="store_true", default=argparse.SUPPRESS if suppress else False,
        help="Log HTTP requests to stderr",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vvp2",
        description="vvp2 - command-line client for the Ververica Platform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"vvp2 {__version__}")
    _add_global_options(parser, suppress=False)

    common = argparse.ArgumentParser(add_help=False)
    _add_global_options(common, suppress=True)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for command_cls in COMMANDS:
        command_cls.register(subparsers, common)
    return parser


def run(argv: Optional[Sequence[str]] = None, transport: Optional[httpx.BaseTransport] = None) -> int:
    """Parse ``argv``, run one command and return the process exit code.

    ``transport`` replaces the network layer of the API client.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    command_cls = args.command_cls
    flags = ConfigFlags.from_args(args)
    try:
        config = resolve(flags) if command_cls.requires_config else load(flags)
    except ConfigError as e:
        print_error(str(e))
        return 1

    if config.config_file is not None:
        print_notice(f"Using config file: {config.config_file}")

    api = None
    if transport is not None and command_cls.requires_config:
        api = APIClient(config, transport=transport)

    command = command_cls(config, api=api)
    try:
        success = command.execute(args)
    except KeyboardInterrupt:
        print_error("Interrupted")
        return 130
    return 0 if success else 1


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
