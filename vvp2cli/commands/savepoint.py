"""Savepoint command."""

from __future__ import annotations

import argparse

from vvp2cli.commands.base import BaseCommand, context
from vvp2cli.models import SavepointCreationRequest
from vvp2cli.models.savepoint import check_target
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.views import SAVEPOINTS


class SavepointCommand(BaseCommand):
    """List, inspect, trigger and delete savepoints."""

    name = "savepoint"
    description = "Manage savepoints"
    aliases = ["savepoints", "sp"]

    @classmethod
    def register(cls, subparsers, common):
        parser = super().register(subparsers, common)
        actions = cls.add_actions(parser)

        cls.add_action(actions, "list", common, "List savepoints", aliases=["ls"])

        get = cls.add_action(actions, "get", common, "Show a savepoint")
        get.add_argument("id", help="Savepoint ID")

        create = cls.add_action(
            actions, "create", common, "Trigger a savepoint for a deployment or a job"
        )
        create.add_argument("--deployment-id", default="", help="Deployment to snapshot")
        create.add_argument("--job-id", default="", help="Job to snapshot")
        create.add_argument("--name", default="", help="Optional savepoint name")

        delete = cls.add_action(actions, "delete", common, "Delete a savepoint", aliases=["rm"])
        delete.add_argument("id", help="Savepoint ID")
        return parser

    @context("list savepoints")
    def list(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner("Fetching savepoints..."):
            result = self.api.savepoints.list(namespace)
        self.emit(result.items, SAVEPOINTS)

    @context("get savepoint")
    def get(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner(f"Fetching savepoint {args.id}..."):
            savepoint = self.api.savepoints.get(namespace, args.id)
        self.emit(savepoint, SAVEPOINTS)

    @context("create savepoint")
    def create(self, args: argparse.Namespace) -> None:
        deployment_id, job_id = args.deployment_id, args.job_id
        # Before the namespace lookup and any request
        check_target(deployment_id, job_id)

        namespace = self.namespace(args)
        request = SavepointCreationRequest.for_target(
            namespace, deployment_id=deployment_id, job_id=job_id, name=args.name
        )
        with create_spinner("Triggering savepoint..."):
            savepoint = self.api.savepoints.create(namespace, request)
        self.notify(f"Savepoint creation initiated: {savepoint.metadata.id}")
        self.emit(savepoint, SAVEPOINTS)

    @context("delete savepoint")
    def delete(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner(f"Deleting savepoint {args.id}..."):
            self.api.savepoints.delete(namespace, args.id)
        self.notify(f"Savepoint '{args.id}' deleted successfully")
