"""Deployment target command."""

from __future__ import annotations

from vvp2cli.commands.base import ResourceCommand
from vvp2cli.models import DeploymentTarget
from vvp2cli.ui.views import DEPLOYMENT_TARGETS


class DeploymentTargetCommand(ResourceCommand):
    """Manage deployment targets."""

    name = "deployment-target"
    description = "Manage deployment targets"
    aliases = ["deployment-targets", "dt"]

    collection = "deployment_targets"
    model = DeploymentTarget
    view = DEPLOYMENT_TARGETS
    label = "deployment target"
