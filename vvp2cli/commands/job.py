"""Job command - inspect the jobs produced by deployments."""

from __future__ import annotations

import argparse

from vvp2cli.commands.base import BaseCommand, context
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.views import JOBS


class JobCommand(BaseCommand):
    """Jobs are read-only: list and get."""

    name = "job"
    description = "Inspect jobs"
    aliases = ["jobs"]

    @classmethod
    def register(cls, subparsers, common):
        parser = super().register(subparsers, common)
        actions = cls.add_actions(parser)
        cls.add_action(actions, "list", common, "List jobs", aliases=["ls"])
        get = cls.add_action(actions, "get", common, "Show a job")
        get.add_argument("id", help="Job ID")
        return parser

    @context("list jobs")
    def list(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner("Fetching jobs..."):
            result = self.api.jobs.list(namespace)
        self.emit(result.items, JOBS)

    @context("get job")
    def get(self, args: argparse.Namespace) -> None:
        namespace = self.namespace(args)
        with create_spinner(f"Fetching job {args.id}..."):
            job = self.api.jobs.get(namespace, args.id)
        self.emit(job, JOBS)
