"""Pytest configuration and shared fixtures."""

import json
import os
import shutil
import tempfile
from pathlib import Path

import httpx
import pytest

from vvp2cli.core.api_client import APIClient
from vvp2cli.core.config import APISection, Config, DefaultSection

API_URL = "http://vvp.test"


class FakePlatform:
    """In-memory stand-in for the platform REST API.

    Routes are keyed by (method, path). Every request is recorded so tests
    can assert on what was (or was not) sent.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status=200, json_body=None, text=None):
        self.routes[(method, path)] = (status, json_body, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        status, json_body, text = route
        if json_body is not None:
            return httpx.Response(status, json=json_body)
        return httpx.Response(status, text=text or "")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self):
        return [(r.method, r.url.path) for r in self.requests]

    def body(self, index=-1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for tests that need filesystem access.
    Automatically cleaned up after test completes.
    """
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, temp_directory):
    """Run from a scratch HOME and working directory without any VVP_* variables."""
    for key in list(os.environ):
        if key.upper().startswith("VVP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(temp_directory))
    monkeypatch.chdir(temp_directory)
    return temp_directory


@pytest.fixture
def platform():
    return FakePlatform()


@pytest.fixture
def config():
    return Config(
        api=APISection(url=API_URL, token="secret-token"),
        default=DefaultSection(namespace="default"),
    )


@pytest.fixture
def api(config, platform):
    client = APIClient(config, transport=platform.transport)
    yield client
    client.close()


@pytest.fixture
def deployment_payload():
    """A deployment as the server returns it."""
    return {
        "apiVersion": "v1",
        "kind": "Deployment",
        "metadata": {
            "id": "d-123",
            "name": "wordcount",
            "namespace": "default",
            "labels": {"team": "data"},
            "createdAt": "2024-03-01T10:15:30Z",
            "modifiedAt": "0001-01-01T00:00:00Z",
            "resourceVersion": 4,
        },
        "spec": {
            "state": "RUNNING",
            "upgradeStrategy": {"kind": "STATEFUL"},
            "restoreStrategy": {"kind": "LATEST_STATE", "allowNonRestoredState": False},
            "deploymentTargetName": "vvp-jobs",
            "template": {
                "spec": {
                    "artifact": {
                        "kind": "JAR",
                        "jarUri": "s3://artifacts/wordcount.jar",
                        "entryClass": "org.example.WordCount",
                    },
                    "parallelism": 2,
                    "flinkConfiguration": {"execution.checkpointing.interval": "10s"},
                }
            },
        },
        "status": {"state": "RUNNING"},
    }


@pytest.fixture
def deployment_file(temp_directory):
    """A user-written deployment file without a namespace."""
    path = temp_directory / "deployment.yaml"
    path.write_text(
        """
kind: Deployment
apiVersion: v1
metadata:
  name: wordcount
spec:
  state: RUNNING
  template:
    spec:
      artifact:
        kind: JAR
        jarUri: s3://artifacts/wordcount.jar
      parallelism: 1
"""
    )
    return path
