"""Shared pydantic base types for Ververica Platform resources."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Go's zero time, sent by the server for unset timestamps
ZERO_TIME_PREFIX = "0001-01-01"


def _zero_time_to_none(value: Any) -> Any:
    if value is None or value == "":
        return None
    if isinstance(value, str) and value.startswith(ZERO_TIME_PREFIX):
        return None
    if isinstance(value, datetime) and value.year == 1:
        return None
    return value


Timestamp = Annotated[datetime | None, BeforeValidator(_zero_time_to_none)]


class VVPModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python.

    Unknown fields are kept so that server-side additions survive a
    read-modify-write round trip.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump as the JSON-compatible camelCase document the API expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResourceMetadata(VVPModel):
    """Identity and bookkeeping block shared by every resource."""

    id: str | None = None
    name: str | None = None
    namespace: str | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
    created_at: Timestamp = None
    modified_at: Timestamp = None
    resource_version: int | None = None


class StateStatus(VVPModel):
    """A status block that only reports a state."""

    state: str | None = None


class ResourceSpec(VVPModel):
    """CPU and memory request for one process role."""

    cpu: Any = None
    memory: Any = None


ItemT = TypeVar("ItemT", bound=BaseModel)


class ResourceList(VVPModel, Generic[ItemT]):
    """Container the API wraps around every collection response."""

    api_version: str | None = None
    kind: str | None = None
    items: list[ItemT] = Field(default_factory=list)


def to_plain(value: Any) -> Any:
    """Convert models (or lists of them) into plain JSON-compatible data."""
    if isinstance(value, VVPModel):
        return value.to_wire()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    return value
