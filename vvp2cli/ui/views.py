"""Table columns and detail layouts for each resource kind."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from vvp2cli.models import (
    Deployment,
    DeploymentDefaults,
    DeploymentTarget,
    Job,
    Namespace,
    Savepoint,
    SecretValue,
    SessionCluster,
    Status,
)
from vvp2cli.models.base import ResourceMetadata
from vvp2cli.ui.formatter import format_time, or_empty, render_table, render_yaml


class DetailWriter:
    """Accumulates ``Key: value`` lines and indented sections."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def field(self, label: str, value: Any, always: bool = False) -> None:
        if value is None or value == "":
            if not always:
                return
            value = ""
        if isinstance(value, Enum):
            value = value.value
        self.lines.append(f"{label}: {value}")

    def time(self, label: str, value: Optional[datetime]) -> None:
        if value is not None:
            self.lines.append(f"{label}: {format_time(value)}")

    def section(self, title: str, entries: list[tuple[str, Any]]) -> None:
        entries = [(key, value) for key, value in entries if value is not None and value != ""]
        if not entries:
            return
        self.lines.append("")
        self.lines.append(f"{title}:")
        for key, value in entries:
            self.lines.append(f"  {key}: {value}")

    def mapping(self, title: str, values: Optional[dict[str, Any]]) -> None:
        if values:
            self.section(title, sorted(values.items()))

    def metadata_footer(self, metadata: ResourceMetadata) -> None:
        """Labels, annotations and timestamps, in that order."""
        self.mapping("Labels", metadata.labels)
        self.mapping("Annotations", metadata.annotations)
        if metadata.created_at is not None or metadata.modified_at is not None:
            self.lines.append("")
            self.time("Created At", metadata.created_at)
            self.time("Modified At", metadata.modified_at)

    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass
class ResourceView:
    """How one resource kind is shown in table format."""

    plural: str
    columns: list[tuple[str, Callable[[Any], Any]]]
    describe: Callable[[Any], str]

    @property
    def headers(self) -> list[str]:
        return [header for header, _ in self.columns]

    def row(self, item: Any) -> list[str]:
        return [or_empty(getter(item)) for _, getter in self.columns]

    def detail(self, item: Any) -> str:
        return self.describe(item)


def _state(status: Any) -> Optional[str]:
    return status.state if status is not None else None


# Deployments

def describe_deployment(deployment: Deployment) -> str:
    out = DetailWriter()
    metadata, spec = deployment.metadata, deployment.spec
    out.field("Name", metadata.name, always=True)
    out.field("ID", metadata.id)
    out.field("Namespace", metadata.namespace, always=True)
    out.field("State", deployment.display_state, always=True)
    if spec.state is not None:
        out.field("Desired State", spec.state.value)
    out.field("Deployment Target", spec.deployment_target_name or spec.deployment_target_id)
    out.field("Session Cluster", spec.session_cluster_name)
    if spec.upgrade_strategy is not None:
        out.field("Upgrade Strategy", spec.upgrade_strategy.kind)
    if spec.restore_strategy is not None:
        out.field("Restore Strategy", spec.restore_strategy.kind)

    template = spec.template.spec if spec.template is not None else None
    if template is not None:
        out.field("Parallelism", template.parallelism)
        out.field("Task Managers", template.number_of_task_managers)
        out.field("Flink Version", template.flink_version)
        if template.artifact is not None:
            artifact = template.artifact
            out.section("Artifact", [
                ("Kind", artifact.kind),
                ("Jar URI", artifact.jar_uri),
                ("Entry Class", artifact.entry_class or artifact.main_class),
                ("Main Args", artifact.main_args),
                ("Flink Version", artifact.flink_version),
                ("Flink Image Tag", artifact.flink_image_tag),
            ])
        out.mapping("Flink Configuration", template.flink_configuration)

    out.metadata_footer(metadata)
    return out.text()


DEPLOYMENTS = ResourceView(
    plural="deployments",
    columns=[
        ("NAME", lambda d: d.metadata.name),
        ("NAMESPACE", lambda d: d.metadata.namespace),
        ("STATE", lambda d: d.display_state),
        ("CREATED", lambda d: format_time(d.metadata.created_at)),
    ],
    describe=describe_deployment,
)


def describe_deployment_defaults(defaults: DeploymentDefaults) -> str:
    # Nested spec, shown as YAML
    header = f"Deployment defaults for namespace: {or_empty(defaults.metadata.namespace)}"
    return f"{header}\n\n{render_yaml(defaults.spec)}"


DEPLOYMENT_DEFAULTS = ResourceView(
    plural="deployment defaults",
    columns=[
        ("NAMESPACE", lambda d: d.metadata.namespace),
        ("STATE", lambda d: d.spec.state),
    ],
    describe=describe_deployment_defaults,
)


# Deployment targets

def describe_deployment_target(target: DeploymentTarget) -> str:
    out = DetailWriter()
    out.field("Name", target.metadata.name, always=True)
    out.field("ID", target.metadata.id)
    out.field("Namespace", target.metadata.namespace, always=True)
    out.field("State", _state(target.status))
    if target.spec.kubernetes is not None:
        out.field("Kubernetes Namespace", target.spec.kubernetes.namespace)
    out.metadata_footer(target.metadata)
    return out.text()


DEPLOYMENT_TARGETS = ResourceView(
    plural="deployment targets",
    columns=[
        ("NAME", lambda t: t.metadata.name),
        ("NAMESPACE", lambda t: t.metadata.namespace),
        ("STATE", lambda t: _state(t.status)),
        ("CREATED", lambda t: format_time(t.metadata.created_at)),
    ],
    describe=describe_deployment_target,
)


# Namespaces

def describe_namespace(namespace: Namespace) -> str:
    out = DetailWriter()
    out.field("Name", namespace.metadata.name, always=True)
    out.field("State", _state(namespace.status))
    if namespace.spec.role_bindings:
        out.section("Role Bindings", [
            (binding.role, ", ".join(binding.members) or "-")
            for binding in namespace.spec.role_bindings
        ])
    out.metadata_footer(namespace.metadata)
    return out.text()


NAMESPACES = ResourceView(
    plural="namespaces",
    columns=[
        ("NAME", lambda n: n.metadata.name),
        ("STATE", lambda n: _state(n.status)),
        ("CREATED", lambda n: format_time(n.metadata.created_at)),
    ],
    describe=describe_namespace,
)


# Jobs

def _job_start_time(job: Job) -> str:
    if job.status is not None and job.status.running is not None:
        return format_time(job.status.running.start_time)
    return format_time(None)


def describe_job(job: Job) -> str:
    out = DetailWriter()
    out.field("Job ID", job.metadata.id, always=True)
    out.field("Name", job.metadata.name)
    out.field("Namespace", job.metadata.namespace, always=True)
    out.field("State", _state(job.status), always=True)
    out.field("Deployment ID", job.spec.deployment_id, always=True)

    status = job.status
    if status is not None:
        if status.running is not None:
            out.section("Running Status", [
                ("Start Time", _optional_time(status.running.start_time)),
                ("Transition Time", _optional_time(status.running.transition_time)),
                ("Flink Job ID", status.running.job_id),
            ])
        if status.failed is not None:
            out.section("Failure Details", [
                ("Failure Time", _optional_time(status.failed.failure_time)),
                ("Reason", status.failed.reason),
                ("Message", status.failed.message),
            ])
        if status.finished is not None and status.finished.completion_time is not None:
            out.lines.append("")
            out.time("Completion Time", status.finished.completion_time)
        if status.cancelled is not None and status.cancelled.cancellation_time is not None:
            out.lines.append("")
            out.time("Cancellation Time", status.cancelled.cancellation_time)
        if status.suspended is not None and status.suspended.suspension_time is not None:
            out.lines.append("")
            out.time("Suspension Time", status.suspended.suspension_time)
        if status.terminating is not None and status.terminating.transition_time is not None:
            out.lines.append("")
            out.time("Terminating Since", status.terminating.transition_time)

    out.metadata_footer(job.metadata)
    return out.text()


def _optional_time(value: Optional[datetime]) -> Optional[str]:
    return format_time(value) if value is not None else None


JOBS = ResourceView(
    plural="jobs",
    columns=[
        ("JOB ID", lambda j: j.metadata.id),
        ("NAME", lambda j: j.metadata.name),
        ("NAMESPACE", lambda j: j.metadata.namespace),
        ("STATE", lambda j: _state(j.status)),
        ("DEPLOYMENT ID", lambda j: j.spec.deployment_id),
        ("START TIME", _job_start_time),
    ],
    describe=describe_job,
)


# Savepoints

def describe_savepoint(savepoint: Savepoint) -> str:
    out = DetailWriter()
    out.field("Savepoint ID", savepoint.metadata.id, always=True)
    out.field("Name", savepoint.metadata.name)
    out.field("Namespace", savepoint.metadata.namespace, always=True)
    out.field("State", _state(savepoint.status), always=True)
    out.field("Deployment ID", savepoint.spec.deployment_id)
    out.field("Job ID", savepoint.spec.job_id)

    status = savepoint.status
    if status is not None and status.completed is not None:
        out.section("Completed Status", [
            ("Location", status.completed.location),
            ("Completion Time", _optional_time(status.completed.time)),
        ])
    if status is not None and status.failed is not None:
        out.section("Failure Details", [
            ("Failure Time", _optional_time(status.failed.time)),
            ("Reason", status.failed.reason),
            ("Message", status.failed.message),
        ])

    out.metadata_footer(savepoint.metadata)
    return out.text()


SAVEPOINTS = ResourceView(
    plural="savepoints",
    columns=[
        ("SAVEPOINT ID", lambda s: s.metadata.id),
        ("NAME", lambda s: s.metadata.name),
        ("NAMESPACE", lambda s: s.metadata.namespace),
        ("STATE", lambda s: _state(s.status)),
        ("DEPLOYMENT ID", lambda s: s.spec.deployment_id),
        ("JOB ID", lambda s: s.spec.job_id),
        ("CREATED", lambda s: format_time(s.metadata.created_at)),
    ],
    describe=describe_savepoint,
)


# Secret values

HIDDEN_VALUE = "<hidden> (use -o json or -o yaml to view)"


def describe_secret_value(secret: SecretValue) -> str:
    out = DetailWriter()
    out.field("Name", secret.metadata.name, always=True)
    out.field("Namespace", secret.metadata.namespace, always=True)
    out.field("Kind", secret.spec.kind, always=True)
    out.field("Value", HIDDEN_VALUE, always=True)
    out.metadata_footer(secret.metadata)
    return out.text()


SECRET_VALUES = ResourceView(
    plural="secret values",
    columns=[
        ("NAME", lambda s: s.metadata.name),
        ("NAMESPACE", lambda s: s.metadata.namespace),
        ("KIND", lambda s: s.spec.kind),
        ("CREATED", lambda s: format_time(s.metadata.created_at)),
    ],
    describe=describe_secret_value,
)


# Session clusters

def describe_session_cluster(cluster: SessionCluster) -> str:
    out = DetailWriter()
    spec, status = cluster.spec, cluster.status
    out.field("Name", cluster.metadata.name, always=True)
    out.field("Namespace", cluster.metadata.namespace, always=True)
    out.field("State", _state(status), always=True)
    out.field("Desired State", spec.state, always=True)
    out.field("Flink Version", spec.flink_version, always=True)
    out.field("Deployment Target", spec.deployment_target_name, always=True)
    out.field("Task Managers", spec.number_of_task_managers or 0, always=True)

    if spec.resources:
        out.lines.append("")
        out.lines.append("Resources:")
        for role, resources in sorted(spec.resources.items()):
            out.lines.append(f"  {role}:")
            out.lines.append(f"    CPU: {resources.cpu}")
            out.lines.append(f"    Memory: {resources.memory}")

    if status is not None and status.failure is not None:
        out.section("Failure", [
            ("Reason", status.failure.reason),
            ("Message", status.failure.message),
            ("Time", _optional_time(status.failure.time)),
        ])

    out.metadata_footer(cluster.metadata)
    return out.text()


SESSION_CLUSTERS = ResourceView(
    plural="session clusters",
    columns=[
        ("NAME", lambda c: c.metadata.name),
        ("NAMESPACE", lambda c: c.metadata.namespace),
        ("STATE", lambda c: _state(c.status)),
        ("TASKMANAGERS", lambda c: c.spec.number_of_task_managers),
        ("FLINK VERSION", lambda c: c.spec.flink_version),
    ],
    describe=describe_session_cluster,
)


# Platform status

def describe_status(status: Status) -> str:
    out = DetailWriter()
    out.lines.append("=== Platform Status ===")

    out.lines.append("")
    out.lines.append("Health:")
    if status.health is not None:
        if status.health.status:
            out.lines.append(f"  Status: {status.health.status}")
        if status.health.message:
            out.lines.append(f"  Message: {status.health.message}")

    version = status.version
    if version is not None and (version.platform or version.flink):
        out.section("Version", [
            ("Platform", version.platform),
            ("Edition", version.edition),
            ("Flink", version.flink),
            ("Build Time", version.build_time),
            ("Commit", version.commit_hash),
        ])

    if status.components:
        out.lines.append("")
        out.lines.append("Components:")
        table = render_table(
            ["NAME", "STATUS", "VERSION", "MESSAGE"],
            [
                [or_empty(c.name), or_empty(c.status), or_empty(c.version), or_empty(c.message)]
                for c in status.components
            ],
        )
        out.lines.extend(f"  {line}" for line in table.splitlines())

    usage = status.resource_usage
    if usage is not None:
        out.lines.append("")
        out.lines.append("Resource Usage:")
        for label, count in (
            ("Namespaces", usage.namespaces),
            ("Deployments", usage.deployments),
            ("Jobs", usage.jobs),
            ("Session Clusters", usage.session_clusters),
        ):
            if count:
                out.lines.append(f"  {label}: {count}")

    return out.text()


STATUS = ResourceView(plural="status", columns=[], describe=describe_status)
