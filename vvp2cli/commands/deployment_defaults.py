"""Deployment defaults command - the namespace-wide template for new deployments."""

from __future__ import annotations

import argparse

from vvp2cli.commands.base import BaseCommand, context
from vvp2cli.models import DeploymentDefaults, SecretValue
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.views import DEPLOYMENT_DEFAULTS


class DeploymentDefaultsCommand(BaseCommand):
    """Show, replace and patch a namespace's deployment defaults."""

    name = "deployment-defaults"
    description = "Manage namespace deployment defaults"
    aliases = ["defaults", "dd"]

    @classmethod
    def register(cls, subparsers, common):
        parser = super().register(subparsers, common)
        actions = cls.add_actions(parser)

        cls.add_action(actions, "get", common, "Show the deployment defaults")

        replace = cls.add_action(
            actions, "replace", common, "Replace the deployment defaults from a file"
        )
        replace.add_argument("-f", "--file", required=True, help="JSON or YAML DeploymentDefaults file")

        update = cls.add_action(
            actions, "update", common, "Patch the deployment defaults from a file"
        )
        update.add_argument(
            "-f", "--file", required=True, help="JSON or YAML patch body (SecretValue-shaped)"
        )
        return parser

    @context("get deployment defaults")
    def get(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner("Fetching deployment defaults..."):
            defaults = self.api.get_deployment_defaults(namespace)
        self.emit(defaults, DEPLOYMENT_DEFAULTS)

    @context("replace deployment defaults")
    def replace(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        defaults = self.load(args.file, DeploymentDefaults, namespace)
        with create_spinner("Replacing deployment defaults..."):
            result = self.api.replace_deployment_defaults(namespace, defaults)
        self.notify(f"Deployment defaults for namespace '{namespace}' replaced successfully")
        self.emit(result, DEPLOYMENT_DEFAULTS)

    @context("update deployment defaults")
    def update(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        # The PATCH endpoint takes a SecretValue body
        body = self.load(args.file, SecretValue, namespace)
        with create_spinner("Updating deployment defaults..."):
            result = self.api.update_deployment_defaults(namespace, body)
        self.notify(f"Deployment defaults for namespace '{namespace}' updated successfully")
        self.emit(result, DEPLOYMENT_DEFAULTS)
