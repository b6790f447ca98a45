"""Typed models for Ververica Platform resources."""

from vvp2cli.models.base import ResourceList, ResourceMetadata, VVPModel, to_plain
from vvp2cli.models.deployment import (
    Deployment,
    DeploymentList,
    DeploymentSpec,
    DeploymentState,
)
from vvp2cli.models.deployment_defaults import DeploymentDefaults
from vvp2cli.models.deployment_target import DeploymentTarget, DeploymentTargetList
from vvp2cli.models.job import Job, JobList, JobStatus
from vvp2cli.models.namespace import Namespace, NamespaceList
from vvp2cli.models.savepoint import Savepoint, SavepointCreationRequest, SavepointList
from vvp2cli.models.secret_value import SecretValue, SecretValueList
from vvp2cli.models.session import Session, SessionList
from vvp2cli.models.session_cluster import (
    SessionCluster,
    SessionClusterList,
    SessionClusterState,
)
from vvp2cli.models.status import Status
from vvp2cli.models.usage import UsageReport

__all__ = [
    "VVPModel",
    "ResourceMetadata",
    "ResourceList",
    "to_plain",
    "Deployment",
    "DeploymentList",
    "DeploymentSpec",
    "DeploymentState",
    "DeploymentDefaults",
    "DeploymentTarget",
    "DeploymentTargetList",
    "Job",
    "JobList",
    "JobStatus",
    "Namespace",
    "NamespaceList",
    "Savepoint",
    "SavepointList",
    "SavepointCreationRequest",
    "SecretValue",
    "SecretValueList",
    "Session",
    "SessionList",
    "SessionCluster",
    "SessionClusterList",
    "SessionClusterState",
    "Status",
    "UsageReport",
]
