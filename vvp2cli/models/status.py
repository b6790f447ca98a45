"""Platform status."""

from __future__ import annotations

from pydantic import Field

from vvp2cli.models.base import VVPModel


class HealthStatus(VVPModel):
    status: str | None = None
    message: str | None = None


class VersionInfo(VVPModel):
    platform: str | None = None
    flink: str | None = None
    build_time: str | None = None
    commit_hash: str | None = None
    edition: str | None = None


class ComponentStatus(VVPModel):
    name: str | None = None
    status: str | None = None
    message: str | None = None
    version: str | None = None


class ResourceUsage(VVPModel):
    deployments: int | None = None
    jobs: int | None = None
    session_clusters: int | None = None
    namespaces: int | None = None


class Status(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    health: HealthStatus | None = None
    version: VersionInfo | None = None
    components: list[ComponentStatus] = Field(default_factory=list)
    resource_usage: ResourceUsage | None = None
