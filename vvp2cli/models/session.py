"""Standalone session resources.

The platform exposes these endpoints but does not act on them; the client
keeps a binding so the payloads can still be inspected.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from vvp2cli.models.base import (
    ResourceList,
    ResourceMetadata,
    ResourceSpec,
    StateStatus,
    VVPModel,
)


class SessionSpec(VVPModel):
    deployment_target_id: str | None = None
    flink_version: str | None = None
    flink_configuration: dict[str, Any] | None = None
    session_cluster_resource_profile: ResourceSpec | None = None


class Session(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: SessionSpec = Field(default_factory=SessionSpec)
    status: StateStatus | None = None


class SessionList(ResourceList[Session]):
    pass
