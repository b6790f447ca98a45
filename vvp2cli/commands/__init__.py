"""CLI commands for vvp2."""

from vvp2cli.commands.config import ConfigCommand
from vvp2cli.commands.deployment import DeploymentCommand
from vvp2cli.commands.deployment_defaults import DeploymentDefaultsCommand
from vvp2cli.commands.deployment_target import DeploymentTargetCommand
from vvp2cli.commands.job import JobCommand
from vvp2cli.commands.namespace import NamespaceCommand
from vvp2cli.commands.savepoint import SavepointCommand
from vvp2cli.commands.secret_value import SecretValueCommand
from vvp2cli.commands.session_cluster import SessionClusterCommand
from vvp2cli.commands.status import StatusCommand
from vvp2cli.commands.usage import UsageCommand
from vvp2cli.commands.version import VersionCommand

__all__ = [
    "DeploymentCommand",
    "DeploymentDefaultsCommand",
    "DeploymentTargetCommand",
    "NamespaceCommand",
    "SessionClusterCommand",
    "JobCommand",
    "SavepointCommand",
    "SecretValueCommand",
    "StatusCommand",
    "UsageCommand",
    "ConfigCommand",
    "VersionCommand",
]
