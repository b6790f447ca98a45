"""Deployment resources."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from vvp2cli.models.base import (
    ResourceList,
    ResourceMetadata,
    ResourceSpec,
    Timestamp,
    VVPModel,
)
from vvp2cli.models.kubernetes import KubernetesOptions


class DeploymentState(str, Enum):
    """Desired state of a deployment."""

    RUNNING = "RUNNING"
    CANCELLED = "CANCELLED"
    SUSPENDED = "SUSPENDED"


class UpgradeStrategy(VVPModel):
    kind: str | None = None


class RestoreStrategy(VVPModel):
    kind: str | None = None
    allow_non_restored_state: bool | None = None


class Artifact(VVPModel):
    kind: str | None = None
    jar_uri: str | None = None
    main_class: str | None = None
    entry_class: str | None = None
    main_args: str | None = None
    additional_dependencies: list[str] | None = None
    flink_version: str | None = None
    flink_image_registry: str | None = None
    flink_image_repository: str | None = None
    flink_image_tag: str | None = None


class TemplateResources(VVPModel):
    jobmanager: ResourceSpec | None = None
    taskmanager: ResourceSpec | None = None


class LoggingOptions(VVPModel):
    log4j_loggers: dict[str, str] | None = Field(default=None, alias="log4jLoggers")
    logging_profile: str | None = None


class TemplateSpec(VVPModel):
    artifact: Artifact | None = None
    parallelism: int | None = None
    number_of_task_managers: int | None = None
    resources: TemplateResources | None = None
    flink_version: str | None = None
    flink_image_tag: str | None = None
    flink_configuration: dict[str, Any] | None = None
    logging: LoggingOptions | None = None
    kubernetes: KubernetesOptions | None = None


class TemplateMetadata(VVPModel):
    annotations: dict[str, str] | None = None


class DeploymentTemplate(VVPModel):
    metadata: TemplateMetadata | None = None
    spec: TemplateSpec | None = None


class DeploymentSpec(VVPModel):
    state: DeploymentState | None = None
    upgrade_strategy: UpgradeStrategy | None = None
    restore_strategy: RestoreStrategy | None = None
    deployment_target_id: str | None = None
    deployment_target_name: str | None = None
    session_cluster_name: str | None = None
    max_savepoint_creation_attempts: int | None = None
    max_job_creation_attempts: int | None = None
    template: DeploymentTemplate | None = None


class DeploymentRunning(VVPModel):
    job_id: str | None = None
    transition_time: Timestamp = None


class DeploymentStatus(VVPModel):
    state: str | None = None
    running: DeploymentRunning | None = None


class Deployment(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: DeploymentSpec = Field(default_factory=DeploymentSpec)
    status: DeploymentStatus | None = None

    @property
    def display_state(self) -> str:
        """Observed state if the server reported one, else the desired state."""
        if self.status is not None and self.status.state:
            return self.status.state
        if self.spec.state is not None:
            return self.spec.state.value
        return "N/A"


class DeploymentWithInfo(VVPModel):
    """Item shape returned by the ``with-cr`` endpoints."""

    deployment: Deployment


class DeploymentList(ResourceList[DeploymentWithInfo]):
    def deployments(self) -> list[Deployment]:
        return [item.deployment for item in self.items]
