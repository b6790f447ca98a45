"""Core CLI components - configuration, API client, file loading and errors."""

from vvp2cli.core.api_client import APIClient
from vvp2cli.core.config import Config, ConfigFlags, resolve
from vvp2cli.errors import (
    APIError,
    ConfigError,
    InputError,
    InvalidResponseError,
    RequestFailedError,
    VVPError,
)

__all__ = [
    "APIClient",
    "Config",
    "ConfigFlags",
    "resolve",
    "VVPError",
    "ConfigError",
    "InputError",
    "RequestFailedError",
    "APIError",
    "InvalidResponseError",
]
