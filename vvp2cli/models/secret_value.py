"""Secret value resources."""

from __future__ import annotations

from pydantic import Field

from vvp2cli.models.base import ResourceList, ResourceMetadata, VVPModel


class SecretValueSpec(VVPModel):
    kind: str | None = None
    # Sensitive: only ever rendered in JSON/YAML output
    value: str | None = None


class SecretValue(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: SecretValueSpec = Field(default_factory=SecretValueSpec)


class SecretValueList(ResourceList[SecretValue]):
    pass
