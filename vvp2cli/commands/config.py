"""Config command - create and inspect the local config file."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.prompt import Confirm, Prompt

from vvp2cli.commands.base import BaseCommand
from vvp2cli.core.config import (
    DEFAULT_API_URL,
    DEFAULT_NAMESPACE,
    OUTPUT_FORMATS,
    APISection,
    Config,
    ConfigFlags,
    DefaultSection,
    OutputSection,
    default_config_path,
    load,
    write_config_file,
)
from vvp2cli.errors import ConfigError
from vvp2cli.ui.console import err_console, print_output, print_warning
from vvp2cli.ui.formatter import render


class ConfigCommand(BaseCommand):
    """Manage ``~/.vvp2/config.yaml``."""

    name = "config"
    description = "Manage the vvp2 config file"
    requires_config = False

    @classmethod
    def register(cls, subparsers, common):
        parser = super().register(subparsers, common)
        actions = cls.add_actions(parser)

        init = cls.add_action(actions, "init", common, "Interactively create the config file")
        init.add_argument("--force", action="store_true", help="Overwrite an existing config file")

        cls.add_action(actions, "show", common, "Print the effective configuration")
        cls.add_action(actions, "path", common, "Print the config file location")
        return parser

    def _target_path(self, args: argparse.Namespace) -> Path:
        explicit = getattr(args, "config", None)
        return Path(explicit).expanduser() if explicit else default_config_path()

    def init(self, args: argparse.Namespace) -> None:
        path = self._target_path(args)
        if path.exists() and not args.force:
            raise ConfigError(f"config file already exists at {path} (use --force to overwrite)")

        err_console.print("[primary]Ververica Platform CLI configuration[/primary]")
        err_console.print(f"[muted]Writing to[/muted] [path]{path}[/path]\n")

        url = Prompt.ask("API URL", default=DEFAULT_API_URL, console=err_console)
        token = Prompt.ask(
            "API token (leave empty for none)", default="", password=True,
            show_default=False, console=err_console,
        )
        insecure = Confirm.ask("Skip TLS verification?", default=False, console=err_console)
        namespace = Prompt.ask("Default namespace", default=DEFAULT_NAMESPACE, console=err_console)
        output = Prompt.ask(
            "Output format", choices=list(OUTPUT_FORMATS), default="table", console=err_console,
        )

        if insecure:
            print_warning("TLS certificate verification will be disabled for every request.")

        config = Config(
            api=APISection(url=url.strip(), token=token.strip(), insecure=insecure),
            default=DefaultSection(namespace=namespace.strip()),
            output=OutputSection(format=output),
        )
        written = write_config_file(config, path)
        self.notify(f"Configuration saved to {written}")

    def show(self, args: argparse.Namespace) -> None:
        """Print the merged configuration with the token masked."""
        config = self.config or load(ConfigFlags.from_args(args))
        data = config.model_dump()
        if data["api"]["token"]:
            data["api"]["token"] = "****"

        fmt = self.output_format if self.output_format != "table" else "yaml"
        print_output(render(data, fmt))

    def path(self, args: argparse.Namespace) -> None:
        print_output(str(self._target_path(args)))
