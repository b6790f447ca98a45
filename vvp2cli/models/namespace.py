"""Namespace resources (global, not namespace-scoped)."""

from __future__ import annotations

from pydantic import Field

from vvp2cli.models.base import ResourceList, ResourceMetadata, StateStatus, VVPModel


class RoleBinding(VVPModel):
    role: str
    members: list[str] = Field(default_factory=list)


class NamespaceSpec(VVPModel):
    role_bindings: list[RoleBinding] | None = None


class Namespace(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: NamespaceSpec = Field(default_factory=NamespaceSpec)
    status: StateStatus | None = None


class NamespaceList(ResourceList[Namespace]):
    pass
