"""Deployment command - manage Flink deployments."""

from __future__ import annotations

import argparse

from vvp2cli.commands.base import BaseCommand, context
from vvp2cli.models import Deployment, DeploymentState
from vvp2cli.ui.console import print_warning
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.views import DEPLOYMENTS


class DeploymentCommand(BaseCommand):
    """List, inspect, create, update, delete and change the state of deployments."""

    name = "deployment"
    description = "Manage deployments"
    aliases = ["deployments", "deploy"]

    @classmethod
    def register(cls, subparsers, common):
        parser = super().register(subparsers, common)
        actions = cls.add_actions(parser)

        cls.add_action(actions, "list", common, "List deployments", aliases=["ls"])

        get = cls.add_action(actions, "get", common, "Show a deployment")
        get.add_argument("name", help="Deployment name")

        create = cls.add_action(actions, "create", common, "Create a deployment from a file")
        create.add_argument("-f", "--file", required=True, help="JSON or YAML deployment file")

        update = cls.add_action(actions, "update", common, "Replace a deployment from a file")
        update.add_argument("name", help="Deployment name")
        update.add_argument("-f", "--file", required=True, help="JSON or YAML deployment file")

        delete = cls.add_action(actions, "delete", common, "Delete a deployment", aliases=["rm"])
        delete.add_argument("name", help="Deployment name")
        delete.add_argument(
            "--force",
            action="store_true",
            help="Cancel the deployment first if it is not already cancelled",
        )

        for verb, state in (
            ("start", DeploymentState.RUNNING),
            ("stop", DeploymentState.CANCELLED),
            ("suspend", DeploymentState.SUSPENDED),
        ):
            action = cls.add_action(
                actions, verb, common, f"Set a deployment's desired state to {state.value}"
            )
            action.add_argument("name", help="Deployment name")
        return parser

    @context("list deployments")
    def list(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner("Fetching deployments..."):
            result = self.api.deployments.list(namespace)
        self.emit(result.deployments(), DEPLOYMENTS)

    @context("get deployment")
    def get(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner(f"Fetching deployment {args.name}..."):
            deployment = self.api.deployments.get(namespace, args.name)
        self.emit(deployment, DEPLOYMENTS)

    @context("create deployment")
    def create(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        deployment = self.load(args.file, Deployment, namespace)
        with create_spinner("Creating deployment..."):
            created = self.api.deployments.create(namespace, deployment)
        self.notify(f"Deployment '{created.metadata.name}' created successfully")
        self.emit(created, DEPLOYMENTS)

    @context("update deployment")
    def update(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        deployment = self.load(args.file, Deployment, namespace)
        with create_spinner(f"Updating deployment {args.name}..."):
            updated = self.api.deployments.replace(namespace, args.name, deployment)
        self.notify(f"Deployment '{updated.metadata.name}' updated successfully")
        self.emit(updated, DEPLOYMENTS)

    @context("delete deployment")
    def delete(self, args: argparse.Namespace) -> None:
        """Delete a deployment, cancelling it first when ``--force`` is given.

        Cancellation is asynchronous; the delete is issued right after the
        state change and may be rejected until the platform catches up.
        """
        namespace = self.namespace(args)
        name = args.name

        if args.force:
            deployment = self.api.deployments.get(namespace, name)
            if deployment.spec.state != DeploymentState.CANCELLED:
                self.notify(f"Cancelling deployment {name} before deletion...")
                self.api.deployments.update_state(namespace, name, DeploymentState.CANCELLED)
                self.notify(f"Deployment {name} transitioned to CANCELLED state")
                print_warning(
                    "The deployment may take some time to fully cancel. "
                    "If deletion fails, wait a moment and try again.",
                    title="Note",
                )

        with create_spinner(f"Deleting deployment {name}..."):
            self.api.deployments.delete(namespace, name)
        self.notify(f"Deployment '{name}' deleted successfully")

    def _change_state(self, args: argparse.Namespace, state: DeploymentState) -> None:
        namespace = self.namespace(args)
        with create_spinner(f"Setting deployment {args.name} to {state.value}..."):
            deployment = self.api.deployments.update_state(namespace, args.name, state)
        self.notify(f"Deployment '{args.name}' desired state set to {state.value}")
        self.emit(deployment, DEPLOYMENTS)

    @context("start deployment")
    def start(self, args: argparse.Namespace) -> None:
        self._change_state(args, DeploymentState.RUNNING)

    @context("stop deployment")
    def stop(self, args: argparse.Namespace) -> None:
        self._change_state(args, DeploymentState.CANCELLED)

    @context("suspend deployment")
    def suspend(self, args: argparse.Namespace) -> None:
        self._change_state(args, DeploymentState.SUSPENDED)
