"""Job resources.

A job's status names its state and carries exactly one detail block for
that state. Decoding rejects payloads where more than one block is set.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from vvp2cli.models.base import ResourceList, ResourceMetadata, Timestamp, VVPModel

JOB_STATUS_KINDS = ("running", "failed", "cancelled", "finished", "suspended", "terminating")


class JobRunning(VVPModel):
    start_time: Timestamp = None
    transition_time: Timestamp = None
    job_id: str | None = None


class JobFailed(VVPModel):
    failure_time: Timestamp = None
    reason: str | None = None
    message: str | None = None


class JobCancelled(VVPModel):
    cancellation_time: Timestamp = None


class JobFinished(VVPModel):
    completion_time: Timestamp = None


class JobSuspended(VVPModel):
    suspension_time: Timestamp = None


class JobTerminating(VVPModel):
    transition_time: Timestamp = None


class JobStatus(VVPModel):
    state: str | None = None
    running: JobRunning | None = None
    failed: JobFailed | None = None
    cancelled: JobCancelled | None = None
    finished: JobFinished | None = None
    suspended: JobSuspended | None = None
    terminating: JobTerminating | None = None

    @model_validator(mode="after")
    def _single_detail(self) -> "JobStatus":
        populated = [kind for kind in JOB_STATUS_KINDS if getattr(self, kind) is not None]
        if len(populated) > 1:
            raise ValueError(f"job status has more than one detail block: {', '.join(populated)}")
        return self

    @property
    def kind(self) -> str | None:
        """Name of the populated detail block, if any."""
        for kind in JOB_STATUS_KINDS:
            if getattr(self, kind) is not None:
                return kind
        return None


class JobSpec(VVPModel):
    deployment_id: str | None = None
    state: str | None = None


class Job(VVPModel):
    api_version: str | None = None
    kind: str | None = None
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: JobSpec = Field(default_factory=JobSpec)
    status: JobStatus | None = None


class JobList(ResourceList[Job]):
    pass
