"""API client for the Ververica Platform REST API."""

from __future__ import annotations

import logging
from typing import Any, Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from vvp2cli.core.config import Config
from vvp2cli.errors import (
    APIError,
    ConfigError,
    InvalidResponseError,
    RequestFailedError,
    VVPError,
)
from vvp2cli.models import (
    Deployment,
    DeploymentDefaults,
    DeploymentList,
    DeploymentState,
    DeploymentTarget,
    DeploymentTargetList,
    Job,
    JobList,
    Namespace,
    NamespaceList,
    Savepoint,
    SavepointList,
    SecretValue,
    SecretValueList,
    Session,
    SessionCluster,
    SessionClusterList,
    SessionList,
    Status,
    UsageReport,
)
from vvp2cli.models.base import to_plain

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
ListT = TypeVar("ListT", bound=BaseModel)

USAGE_REPORT_DISABLED = "Resource usage report endpoint is not enabled on this platform (404)"


class APIClient:
    """HTTP client for the Ververica Platform."""

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        config: Config | None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if config is None:
            raise ConfigError("config cannot be nil")
        config.require_api_url()

        self.config = config
        self.base_url = config.api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

        self.deployments = DeploymentCollection(self)
        self.deployment_targets = ResourceCollection(
            self, "deployment-targets", DeploymentTarget, DeploymentTargetList
        )
        self.jobs = ResourceCollection(self, "jobs", Job, JobList)
        self.savepoints = ResourceCollection(self, "savepoints", Savepoint, SavepointList)
        self.secret_values = ResourceCollection(self, "secret-values", SecretValue, SecretValueList)
        self.session_clusters = ResourceCollection(
            self, "sessionclusters", SessionCluster, SessionClusterList
        )
        # The platform accepts these calls but does not act on them
        self.sessions = ResourceCollection(self, "sessions", Session, SessionList)
        self.namespaces = ResourceCollection(
            self, "namespaces", Namespace, NamespaceList, base_path="/namespaces/v1/namespaces"
        )

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.config.token:
                headers["Authorization"] = f"Bearer {self.config.token}"
            self._client = httpx.Client(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout,
                verify=not self.config.insecure,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """Make an HTTP request and return the response if it is a 2xx.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API path relative to the base URL
            json: Model or plain data to send as the JSON body
            params: Query parameters
        """
        body = to_plain(json) if json is not None else None
        logger.debug("%s %s%s params=%s", method, self.base_url, endpoint, params)

        try:
            response = self.client.request(method, endpoint, json=body, params=params)
        except httpx.TransportError as e:
            raise RequestFailedError(e) from e

        logger.debug("%s %s -> %d", method, endpoint, response.status_code)
        if not response.is_success:
            raise APIError(response.status_code, response.text)
        return response

    def request_model(
        self,
        model: type[ModelT],
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, str]] = None,
    ) -> ModelT:
        """Make a request and decode the response body into ``model``."""
        response = self.request(method, endpoint, json=json, params=params)
        return decode(model, response)

    # Deployment defaults

    def get_deployment_defaults(self, namespace: str) -> DeploymentDefaults:
        return self.request_model(
            DeploymentDefaults, "GET", f"/api/v1/namespaces/{namespace}/deployment-defaults"
        )

    def replace_deployment_defaults(
        self, namespace: str, defaults: DeploymentDefaults
    ) -> DeploymentDefaults:
        return self.request_model(
            DeploymentDefaults,
            "PUT",
            f"/api/v1/namespaces/{namespace}/deployment-defaults",
            json=defaults,
        )

    def update_deployment_defaults(self, namespace: str, body: SecretValue) -> DeploymentDefaults:
        """PATCH the namespace defaults.

        The endpoint takes a SecretValue-shaped body and answers with the
        updated defaults.
        """
        return self.request_model(
            DeploymentDefaults,
            "PATCH",
            f"/api/v1/namespaces/{namespace}/deployment-defaults",
            json=body,
        )

    # Health & Status

    def get_status(self) -> Status:
        try:
            return self.request_model(Status, "GET", "/api/v1/status")
        except VVPError as e:
            raise e.with_prefix("failed to get status")

    def get_resource_usage_report(self, from_date: str = "", to_date: str = "") -> UsageReport:
        """Fetch the CSV usage report; empty bounds are left to the server."""
        params = {}
        if from_date:
            params["from"] = from_date
        if to_date:
            params["to"] = to_date

        try:
            response = self.request(
                "GET", "/api/v1/status/resourceusage", params=params or None
            )
        except APIError as e:
            if e.status_code == 404:
                raise APIError(404, USAGE_REPORT_DISABLED) from e
            raise
        return UsageReport(csv_data=response.text, from_date=from_date, to_date=to_date)


def decode(model: type[ModelT], response: httpx.Response) -> ModelT:
    """Decode a JSON response body into ``model``."""
    try:
        return model.model_validate(response.json())
    except ValueError as e:
        # Covers both malformed JSON and pydantic's ValidationError
        raise InvalidResponseError(f"failed to decode {model.__name__} response: {e}") from e


class ResourceCollection(Generic[ModelT, ListT]):
    """CRUD calls for one resource kind.

    Namespaced kinds live under ``/api/v1/namespaces/{namespace}/{resource}``;
    global kinds pass an explicit ``base_path`` and take no namespace.
    """

    def __init__(
        self,
        api: APIClient,
        resource: str,
        model: type[ModelT],
        list_model: type[ListT],
        base_path: Optional[str] = None,
    ):
        self.api = api
        self.resource = resource
        self.model = model
        self.list_model = list_model
        self.base_path = base_path

    def collection_path(self, namespace: Optional[str] = None) -> str:
        if self.base_path is not None:
            return self.base_path
        if not namespace:
            raise ConfigError(f"a namespace is required for {self.resource}")
        return f"/api/v1/namespaces/{namespace}/{self.resource}"

    def item_path(self, namespace: Optional[str], name: str) -> str:
        return f"{self.collection_path(namespace)}/{name}"

    def list(self, namespace: Optional[str] = None) -> ListT:
        return self.api.request_model(self.list_model, "GET", self.collection_path(namespace))

    def get(self, namespace: Optional[str], name: str) -> ModelT:
        return self.api.request_model(self.model, "GET", self.item_path(namespace, name))

    def create(self, namespace: Optional[str], body: Any) -> ModelT:
        return self.api.request_model(
            self.model, "POST", self.collection_path(namespace), json=body
        )

    def replace(self, namespace: Optional[str], name: str, body: Any) -> ModelT:
        return self.api.request_model(
            self.model, "PUT", self.item_path(namespace, name), json=body
        )

    def patch(self, namespace: Optional[str], name: str, body: Any) -> ModelT:
        return self.api.request_model(
            self.model, "PATCH", self.item_path(namespace, name), json=body
        )

    def delete(self, namespace: Optional[str], name: str) -> None:
        self.api.request("DELETE", self.item_path(namespace, name))


class DeploymentCollection(ResourceCollection[Deployment, DeploymentList]):
    """Deployments are read through the ``with-cr`` endpoints, which wrap each item."""

    def __init__(self, api: APIClient):
        super().__init__(api, "deployments", Deployment, DeploymentList)

    def list(self, namespace: Optional[str] = None) -> DeploymentList:
        path = f"{self.collection_path(namespace)}/with-cr"
        return self.api.request_model(DeploymentList, "GET", path)

    def get(self, namespace: Optional[str], name: str) -> Deployment:
        path = f"{self.collection_path(namespace)}/with-cr/{name}"
        response = self.api.request("GET", path)
        try:
            payload = response.json()
            return Deployment.model_validate(payload["deployment"])
        except (ValueError, KeyError, TypeError) as e:
            raise InvalidResponseError(f"failed to decode Deployment response: {e}") from e

    def update_state(self, namespace: str, name: str, state: DeploymentState) -> Deployment:
        """PATCH only ``spec.state``."""
        body = {"spec": {"state": DeploymentState(state).value}}
        return self.patch(namespace, name, body)
