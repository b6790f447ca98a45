"""Session cluster resources."""

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


class SessionClusterState(str, Enum):
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"


class SessionClusterSpec(VVPModel):
    deployment_target_name: str | None = None
    flink_version: str | None = None
    flink_image_registry: str | None = None
    flink_image_repository: str | None = None
    flink_image_tag: str | None = None
    number_of_task_managers: int | None = None
    resources: dict[str, ResourceSpec] | None = None
    flink_configuration: dict[str, Any] | None = None
    kubernetes: dict[str, Any] | None = None
    logging: dict[str, Any] | None = None
    state: SessionClusterState | None = None


class SessionClusterRunning(VVPModel):
    transition_time: Timestamp = None


class SessionClusterFailure(VVPModel):
    message: str | None = None
    reason: str | None = None
    time: Timestamp = None


class SessionClusterStatus(VVPModel):
    state: str | None = None
    running: SessionClusterRunning | None = None
    failure: SessionClusterFailure | None = None


class SessionCluster(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: SessionClusterSpec = Field(default_factory=SessionClusterSpec)
    status: SessionClusterStatus | None = None


class SessionClusterList(ResourceList[SessionCluster]):
    pass
