"""Session cluster command."""

from __future__ import annotations

import argparse
from typing import Optional

from vvp2cli.commands.base import ResourceCommand, error_context
from vvp2cli.models import SessionCluster
from vvp2cli.ui.spinners import create_spinner
from vvp2cli.ui.views import SESSION_CLUSTERS


class SessionClusterCommand(ResourceCommand):
    """Manage session clusters.

    ``update`` sends a partial update (PATCH); ``replace`` sends the whole
    resource (PUT) and creates it if it does not exist.
    """

    name = "sessioncluster"
    description = "Manage session clusters"
    aliases = ["session-cluster", "sessionclusters", "sc"]

    collection = "session_clusters"
    model = SessionCluster
    view = SESSION_CLUSTERS
    label = "session cluster"

    @classmethod
    def add_extra_actions(cls, actions, common):
        replace = cls.add_action(
            actions, "replace", common, "Create or replace a session cluster from a file"
        )
        replace.add_argument("name", help="Session cluster name")
        replace.add_argument("-f", "--file", required=True, help="JSON or YAML resource file")

    def send_update(self, scope: Optional[str], name: str, body: SessionCluster) -> SessionCluster:
        return self.resources.patch(scope, name, body)

    def replace(self, args: argparse.Namespace) -> None:
        scope = self.scope(args)
        body = self.load(args.file, SessionCluster, scope)
        with error_context("replace session cluster"):
            with create_spinner(f"Replacing session cluster {args.name}..."):
                result = self.resources.replace(scope, args.name, body)
        self.notify(f"Session cluster '{args.name}' replaced successfully")
        self.emit(result, self.view)
