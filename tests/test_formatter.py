"""Tests for output rendering."""

import json

import pytest
import yaml

from vvp2cli.models import Deployment, Job, SecretValue, Status
from vvp2cli.ui.formatter import OutputFormat, render, render_table
from vvp2cli.ui.views import (
    DEPLOYMENT_TARGETS,
    DEPLOYMENTS,
    JOBS,
    NAMESPACES,
    SAVEPOINTS,
    SECRET_VALUES,
    SESSION_CLUSTERS,
    STATUS,
)


@pytest.fixture
def secret():
    return SecretValue.model_validate({
        "metadata": {"name": "db-password", "namespace": "default"},
        "spec": {"kind": "S3", "value": "hunter2"},
    })


class TestEmptyLists:
    """Empty collections in every format."""

    @pytest.mark.parametrize(
        "view, message",
        [
            (DEPLOYMENTS, "No deployments found"),
            (NAMESPACES, "No namespaces found"),
            (DEPLOYMENT_TARGETS, "No deployment targets found"),
            (JOBS, "No jobs found"),
            (SAVEPOINTS, "No savepoints found"),
            (SECRET_VALUES, "No secret values found"),
            (SESSION_CLUSTERS, "No session clusters found"),
        ],
    )
    def test_table_message(self, view, message):
        """Table format should print a friendly message."""
        assert render([], "table", view) == message

    def test_json(self):
        """JSON format should print an empty array."""
        assert render([], "json", DEPLOYMENTS) == "[]"

    def test_yaml(self):
        """YAML format should print an empty sequence."""
        assert yaml.safe_load(render([], "yaml", DEPLOYMENTS)) == []


class TestTables:
    """Column layout."""

    def test_columns_are_aligned(self):
        """Each column should start at the same offset on every line."""
        text = render_table(["NAME", "STATE"], [["a", "RUNNING"], ["much-longer", "-"]])
        lines = text.splitlines()

        assert len(lines) == 3
        assert lines[0].startswith("NAME")
        offset = lines[0].index("STATE")
        assert lines[1].index("RUNNING") == offset
        assert lines[2].rindex("-") == offset
        assert offset >= len("much-longer") + 3

    def test_no_trailing_whitespace(self):
        text = render_table(["A", "B"], [["x", "y"]])
        assert all(line == line.rstrip() for line in text.splitlines())

    def test_deployment_row(self, deployment_payload):
        """Deployment rows show name, namespace, state and creation time."""
        deployment = Deployment.model_validate(deployment_payload)
        text = render([deployment], "table", DEPLOYMENTS)
        header, row = text.splitlines()

        assert header.split() == ["NAME", "NAMESPACE", "STATE", "CREATED"]
        assert row.split() == ["wordcount", "default", "RUNNING", "2024-03-01", "10:15:30"]

    def test_missing_values_render_as_dash(self):
        """Empty cells should show a dash."""
        job = Job.model_validate({"metadata": {"id": "j-1", "namespace": "default"}})
        row = render([job], "table", JOBS).splitlines()[1]
        assert row.split() == ["j-1", "-", "default", "-", "-", "-"]

    def test_markup_is_not_interpreted(self):
        """Values that look like rich markup are printed verbatim."""
        text = render_table(["NAME"], [["[bold]x[/bold]"]])
        assert "[bold]x[/bold]" in text


class TestSecretRedaction:
    """Secret values never appear in table output."""

    def test_detail_hides_value(self, secret):
        text = render(secret, "table", SECRET_VALUES)
        assert "hunter2" not in text
        assert "Value: <hidden> (use -o json or -o yaml to view)" in text

    def test_list_hides_value(self, secret):
        assert "hunter2" not in render([secret], "table", SECRET_VALUES)

    def test_json_shows_value(self, secret):
        assert json.loads(render(secret, "json", SECRET_VALUES))["spec"]["value"] == "hunter2"

    def test_yaml_shows_value(self, secret):
        assert yaml.safe_load(render(secret, "yaml", SECRET_VALUES))["spec"]["value"] == "hunter2"


class TestDetailViews:
    """Single-resource table output."""

    def test_deployment_detail(self, deployment_payload):
        text = render(Deployment.model_validate(deployment_payload), "table", DEPLOYMENTS)
        assert "Name: wordcount" in text
        assert "State: RUNNING" in text
        assert "Labels:\n  team: data" in text
        assert "Created At: 2024-03-01 10:15:30" in text
        # Zero modification time is not shown
        assert "Modified At" not in text

    def test_job_failure_details(self):
        job = Job.model_validate({
            "metadata": {"id": "j-1", "namespace": "default"},
            "spec": {"deploymentId": "d-1"},
            "status": {"state": "FAILED", "failed": {"reason": "Exception", "message": "boom"}},
        })
        text = render(job, "table", JOBS)
        assert "Failure Details:" in text
        assert "  Reason: Exception" in text
        assert "Running Status" not in text

    def test_status_view(self):
        status = Status.model_validate({
            "health": {"status": "OK"},
            "version": {"platform": "2.12.0", "flink": "1.20"},
            "components": [{"name": "gateway", "status": "UP"}],
            "resourceUsage": {"deployments": 3},
        })
        text = render(status, "table", STATUS)
        assert text.startswith("=== Platform Status ===")
        assert "  Status: OK" in text
        assert "  Platform: 2.12.0" in text
        assert "gateway" in text
        assert "  Deployments: 3" in text


class TestOutputFormat:
    """Format selection."""

    @pytest.mark.parametrize("value", ["xml", "", None, "TABLE"])
    def test_unknown_falls_back_to_table(self, value):
        assert OutputFormat.parse(value) is OutputFormat.TABLE

    def test_case_insensitive(self):
        assert OutputFormat.parse("JSON") is OutputFormat.JSON

    def test_yaml_preserves_key_order(self, deployment_payload):
        """YAML keys follow model field order, not alphabetical order."""
        text = render(Deployment.model_validate(deployment_payload), "yaml", DEPLOYMENTS)
        top_level = [line.split(":")[0] for line in text.splitlines() if not line.startswith(" ")]
        assert top_level == ["apiVersion", "kind", "metadata", "spec", "status"]

    def test_json_is_indented(self, deployment_payload):
        text = render(Deployment.model_validate(deployment_payload), "json", DEPLOYMENTS)
        assert text.startswith('{\n  "apiVersion": "v1"')
