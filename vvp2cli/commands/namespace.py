"""Namespace command."""

from __future__ import annotations

from vvp2cli.commands.base import ResourceCommand
from vvp2cli.models import Namespace
from vvp2cli.ui.views import NAMESPACES


class NamespaceCommand(ResourceCommand):
    """Manage platform namespaces. These are global, so ``--namespace`` is ignored."""

    name = "namespace"
    description = "Manage namespaces"
    aliases = ["namespaces", "ns"]

    collection = "namespaces"
    model = Namespace
    view = NAMESPACES
    label = "namespace"
    namespaced = False
