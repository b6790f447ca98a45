"""Tests for the REST API client."""

import httpx
import pytest

from vvp2cli.core.api_client import USAGE_REPORT_DISABLED, APIClient
from vvp2cli.core.config import APISection, Config
from vvp2cli.errors import (
    APIError,
    ConfigError,
    InvalidResponseError,
    RequestFailedError,
)
from vvp2cli.models import Deployment, DeploymentState, SecretValue

NS = "/api/v1/namespaces/default"


class TestClientSetup:
    """Construction and headers."""

    def test_none_config(self):
        with pytest.raises(ConfigError, match="config cannot be nil"):
            APIClient(None)

    def test_missing_url(self):
        with pytest.raises(ConfigError, match="API URL is required"):
            APIClient(Config(api=APISection(url="")))

    def test_bearer_token_sent(self, api, platform):
        """Requests carry the configured token."""
        platform.add("GET", f"{NS}/jobs", json_body={"items": []})
        api.jobs.list("default")

        request = platform.requests[0]
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert request.headers["Accept"] == "application/json"

    def test_no_token_no_header(self, platform):
        """Without a token no Authorization header is sent."""
        platform.add("GET", f"{NS}/jobs", json_body={"items": []})
        with APIClient(Config(api=APISection(url="http://vvp.test/")), transport=platform.transport) as api:
            api.jobs.list("default")

        assert "Authorization" not in platform.requests[0].headers
        assert str(platform.requests[0].url) == "http://vvp.test/api/v1/namespaces/default/jobs"


class TestErrors:
    """Error mapping."""

    def test_api_error(self, api, platform):
        """Non-2xx responses carry status and body text."""
        platform.add("GET", f"{NS}/jobs/missing", status=404, text="job not found")

        with pytest.raises(APIError) as excinfo:
            api.jobs.get("default", "missing")

        assert excinfo.value.status_code == 404
        assert str(excinfo.value) == "API error (status 404): job not found"

    def test_transport_error(self, config):
        """Connection failures are wrapped and keep their cause."""

        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with APIClient(config, transport=httpx.MockTransport(refuse)) as api:
            with pytest.raises(RequestFailedError) as excinfo:
                api.namespaces.list()

        assert str(excinfo.value).startswith("request failed: ")
        assert isinstance(excinfo.value.cause, httpx.ConnectError)

    def test_invalid_json(self, api, platform):
        platform.add("GET", f"{NS}/savepoints", text="<html>oops</html>")
        with pytest.raises(InvalidResponseError):
            api.savepoints.list("default")

    def test_namespace_required(self, api):
        with pytest.raises(ConfigError):
            api.jobs.list("")


class TestDeployments:
    """Deployment endpoints."""

    def test_list_uses_with_cr(self, api, platform, deployment_payload):
        platform.add("GET", f"{NS}/deployments/with-cr", json_body={"items": [{"deployment": deployment_payload}]})

        result = api.deployments.list("default")

        assert platform.calls() == [("GET", f"{NS}/deployments/with-cr")]
        assert result.deployments()[0].metadata.name == "wordcount"

    def test_get_unwraps(self, api, platform, deployment_payload):
        platform.add("GET", f"{NS}/deployments/with-cr/wordcount", json_body={"deployment": deployment_payload})

        deployment = api.deployments.get("default", "wordcount")

        assert deployment.metadata.id == "d-123"
        assert deployment.spec.state is DeploymentState.RUNNING

    def test_get_without_wrapper(self, api, platform, deployment_payload):
        platform.add("GET", f"{NS}/deployments/with-cr/wordcount", json_body=deployment_payload)
        with pytest.raises(InvalidResponseError):
            api.deployments.get("default", "wordcount")

    def test_create_sends_wire_form(self, api, platform, deployment_payload):
        platform.add("POST", f"{NS}/deployments", json_body=deployment_payload)
        body = Deployment.model_validate(deployment_payload)
        body.status = None

        api.deployments.create("default", body)

        sent = platform.body()
        assert sent["metadata"]["name"] == "wordcount"
        assert sent["spec"]["template"]["spec"]["artifact"]["jarUri"] == "s3://artifacts/wordcount.jar"
        assert "status" not in sent

    def test_update_state(self, api, platform, deployment_payload):
        """Only the desired state is patched."""
        platform.add("PATCH", f"{NS}/deployments/wordcount", json_body=deployment_payload)

        api.deployments.update_state("default", "wordcount", DeploymentState.CANCELLED)

        assert platform.calls() == [("PATCH", f"{NS}/deployments/wordcount")]
        assert platform.body() == {"spec": {"state": "CANCELLED"}}

    def test_delete(self, api, platform):
        platform.add("DELETE", f"{NS}/deployments/wordcount")
        api.deployments.delete("default", "wordcount")
        assert platform.calls() == [("DELETE", f"{NS}/deployments/wordcount")]


class TestOtherResources:
    """Paths and methods for the remaining kinds."""

    def test_namespaces_are_global(self, api, platform):
        platform.add("GET", "/namespaces/v1/namespaces", json_body={"namespaces": [], "items": []})
        api.namespaces.list()
        assert platform.calls() == [("GET", "/namespaces/v1/namespaces")]

    def test_session_cluster_patch(self, api, platform):
        platform.add("PATCH", f"{NS}/sessionclusters/sql", json_body={"metadata": {"name": "sql"}})

        cluster = api.session_clusters.patch("default", "sql", {"spec": {"state": "STOPPED"}})

        assert cluster.metadata.name == "sql"
        assert platform.body() == {"spec": {"state": "STOPPED"}}

    def test_session_cluster_replace(self, api, platform):
        platform.add("PUT", f"{NS}/sessionclusters/sql", json_body={"metadata": {"name": "sql"}})
        api.session_clusters.replace("default", "sql", {"metadata": {"name": "sql"}})
        assert platform.calls() == [("PUT", f"{NS}/sessionclusters/sql")]

    def test_deployment_targets_path(self, api, platform):
        platform.add("GET", f"{NS}/deployment-targets", json_body={"items": [{"metadata": {"name": "k8s"}}]})
        result = api.deployment_targets.list("default")
        assert result.items[0].metadata.name == "k8s"

    def test_secret_value_get(self, api, platform):
        platform.add(
            "GET",
            f"{NS}/secret-values/db",
            json_body={"metadata": {"name": "db"}, "spec": {"kind": "S3", "value": "hunter2"}},
        )
        assert api.secret_values.get("default", "db").spec.value == "hunter2"

    def test_sessions_binding(self, api, platform):
        platform.add("GET", f"{NS}/sessions", json_body={"items": []})
        assert api.sessions.list("default").items == []

    def test_defaults_patch_takes_secret_value(self, api, platform):
        platform.add(
            "PATCH",
            f"{NS}/deployment-defaults",
            json_body={"metadata": {"namespace": "default"}, "spec": {"state": "RUNNING"}},
        )
        body = SecretValue.model_validate({"metadata": {"name": "x"}, "spec": {"kind": "S3", "value": "v"}})

        defaults = api.update_deployment_defaults("default", body)

        assert defaults.metadata.namespace == "default"
        assert platform.body()["spec"] == {"kind": "S3", "value": "v"}

    def test_defaults_replace(self, api, platform):
        platform.add("PUT", f"{NS}/deployment-defaults", json_body={"metadata": {"namespace": "default"}})
        api.replace_deployment_defaults("default", {"spec": {"state": "RUNNING"}})
        assert platform.calls() == [("PUT", f"{NS}/deployment-defaults")]


class TestStatus:
    """Status and usage endpoints."""

    def test_status(self, api, platform):
        platform.add("GET", "/api/v1/status", json_body={"health": {"status": "OK"}})
        assert api.get_status().health.status == "OK"

    def test_status_error_prefix(self, api, platform):
        platform.add("GET", "/api/v1/status", status=503, text="unavailable")

        with pytest.raises(APIError) as excinfo:
            api.get_status()

        assert str(excinfo.value) == "failed to get status: API error (status 503): unavailable"
        assert excinfo.value.status_code == 503

    def test_usage_report_params(self, api, platform):
        platform.add("GET", "/api/v1/status/resourceusage", text="a,b\n1,2\n")

        report = api.get_resource_usage_report("2024-01-01", "2024-01-31")

        assert report.csv_data == "a,b\n1,2\n"
        params = platform.requests[0].url.params
        assert params["from"] == "2024-01-01"
        assert params["to"] == "2024-01-31"

    def test_usage_report_empty_bounds(self, api, platform):
        """Empty dates are not sent."""
        platform.add("GET", "/api/v1/status/resourceusage", text="")
        api.get_resource_usage_report()
        assert platform.requests[0].url.query == b""

    def test_usage_report_disabled(self, api, platform):
        platform.add("GET", "/api/v1/status/resourceusage", status=404, text="not found")

        with pytest.raises(APIError) as excinfo:
            api.get_resource_usage_report()

        assert excinfo.value.message == USAGE_REPORT_DISABLED

    def test_usage_report_other_errors_unchanged(self, api, platform):
        platform.add("GET", "/api/v1/status/resourceusage", status=500, text="boom")
        with pytest.raises(APIError, match="boom"):
            api.get_resource_usage_report()
