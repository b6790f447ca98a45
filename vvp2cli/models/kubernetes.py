"""Kubernetes pod overrides embedded in deployment templates.

These mirror the subset of the Kubernetes object model that the platform
accepts under ``spec.template.spec.kubernetes``. The CLI never interprets
them; they are typed so that user files are checked and round-trip intact.
Anything not modeled here is carried through as an extra field.
"""

from __future__ import annotations

from typing import Any

from vvp2cli.models.base import VVPModel


class KeySelector(VVPModel):
    name: str | None = None
    key: str | None = None
    optional: bool | None = None


class EnvVarSource(VVPModel):
    secret_key_ref: KeySelector | None = None
    config_map_key_ref: KeySelector | None = None
    field_ref: dict[str, Any] | None = None


class EnvVar(VVPModel):
    name: str
    value: str | None = None
    value_from: EnvVarSource | None = None


class Toleration(VVPModel):
    key: str | None = None
    operator: str | None = None
    value: str | None = None
    effect: str | None = None
    toleration_seconds: int | None = None


class VolumeMount(VVPModel):
    name: str
    mount_path: str
    read_only: bool | None = None
    sub_path: str | None = None


class KeyToPath(VVPModel):
    key: str
    path: str
    mode: int | None = None


class SecretVolumeSource(VVPModel):
    secret_name: str | None = None
    items: list[KeyToPath] | None = None
    default_mode: int | None = None
    optional: bool | None = None


class ConfigMapVolumeSource(VVPModel):
    name: str | None = None
    items: list[KeyToPath] | None = None
    default_mode: int | None = None
    optional: bool | None = None


class PersistentVolumeClaimSource(VVPModel):
    claim_name: str
    read_only: bool | None = None


class Volume(VVPModel):
    name: str
    secret: SecretVolumeSource | None = None
    config_map: ConfigMapVolumeSource | None = None
    empty_dir: dict[str, Any] | None = None
    persistent_volume_claim: PersistentVolumeClaimSource | None = None


class Container(VVPModel):
    name: str
    image: str | None = None
    command: list[str] | None = None
    args: list[str] | None = None
    env: list[EnvVar] | None = None
    volume_mounts: list[VolumeMount] | None = None
    resources: dict[str, Any] | None = None


class PodSpec(VVPModel):
    containers: list[Container] | None = None
    init_containers: list[Container] | None = None
    volumes: list[Volume] | None = None
    affinity: dict[str, Any] | None = None
    tolerations: list[Toleration] | None = None
    node_selector: dict[str, str] | None = None
    service_account_name: str | None = None
    security_context: dict[str, Any] | None = None
    image_pull_secrets: list[dict[str, Any]] | None = None


class PodTemplateMetadata(VVPModel):
    name: str | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


class PodTemplate(VVPModel):
    """A full pod template applied to the job manager or task managers."""

    api_version: str | None = None
    kind: str | None = None
    metadata: PodTemplateMetadata | None = None
    spec: PodSpec | None = None


class PodsOptions(VVPModel):
    """Shorthand options applied to every Flink pod."""

    annotations: dict[str, str] | None = None
    labels: dict[str, str] | None = None
    node_selector: dict[str, str] | None = None
    tolerations: list[Toleration] | None = None
    affinity: dict[str, Any] | None = None
    env_vars: list[EnvVar] | None = None
    volume_mounts: list[dict[str, Any]] | None = None
    security_context: dict[str, Any] | None = None
    image_pull_secrets: list[dict[str, Any]] | None = None


class KubernetesOptions(VVPModel):
    labels: dict[str, str] | None = None
    pods: PodsOptions | None = None
    job_manager_pod_template: PodTemplate | None = None
    task_manager_pod_template: PodTemplate | None = None
