"""Savepoint resources and the savepoint creation request."""

from __future__ import annotations

from pydantic import Field, model_validator

from vvp2cli.errors import InputError
from vvp2cli.models.base import ResourceList, ResourceMetadata, Timestamp, VVPModel


class SavepointDetails(VVPModel):
    location: str | None = None
    time: Timestamp = None
    message: str | None = None
    reason: str | None = None


class SavepointStatus(VVPModel):
    state: str | None = None
    completed: SavepointDetails | None = None
    failed: SavepointDetails | None = None

    @model_validator(mode="after")
    def _single_detail(self) -> "SavepointStatus":
        if self.completed is not None and self.failed is not None:
            raise ValueError("savepoint status cannot be both completed and failed")
        return self

    @property
    def kind(self) -> str | None:
        if self.completed is not None:
            return "completed"
        if self.failed is not None:
            return "failed"
        return None


class SavepointSpec(VVPModel):
    deployment_id: str | None = None
    job_id: str | None = None


class Savepoint(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: SavepointSpec = Field(default_factory=SavepointSpec)
    status: SavepointStatus | None = None


class SavepointList(ResourceList[Savepoint]):
    pass


class SavepointCreationMetadata(VVPModel):
    namespace: str
    name: str | None = None


class SavepointCreationRequest(VVPModel):
    """Body of ``POST /savepoints``: targets a deployment or a job, never both."""

    metadata: SavepointCreationMetadata
    spec: SavepointSpec

    @classmethod
    def for_target(
        cls,
        namespace: str,
        deployment_id: str | None = None,
        job_id: str | None = None,
        name: str | None = None,
    ) -> "SavepointCreationRequest":
        check_target(deployment_id, job_id)
        return cls(
            metadata=SavepointCreationMetadata(namespace=namespace, name=name or None),
            spec=SavepointSpec(deployment_id=deployment_id or None, job_id=job_id or None),
        )


def check_target(deployment_id: str | None, job_id: str | None) -> None:
    """A savepoint targets exactly one of a deployment or a job."""
    if not deployment_id and not job_id:
        raise InputError("either --deployment-id or --job-id must be specified")
    if deployment_id and job_id:
        raise InputError("cannot specify both --deployment-id and --job-id")
