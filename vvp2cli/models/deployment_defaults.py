"""Namespace-level deployment defaults."""

from __future__ import annotations

from pydantic import Field

from vvp2cli.models.base import ResourceMetadata, VVPModel
from vvp2cli.models.deployment import DeploymentSpec


class DeploymentDefaults(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: DeploymentSpec = Field(default_factory=DeploymentSpec)
