"""Deployment target resources."""

from __future__ import annotations

from pydantic import Field

from vvp2cli.models.base import ResourceList, ResourceMetadata, StateStatus, VVPModel


class KubernetesTarget(VVPModel):
    namespace: str | None = None


class DeploymentTargetSpec(VVPModel):
    kubernetes: KubernetesTarget | None = None


class DeploymentTarget(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: DeploymentTargetSpec = Field(default_factory=DeploymentTargetSpec)
    status: StateStatus | None = None


class DeploymentTargetList(ResourceList[DeploymentTarget]):
    pass
