"""Exceptions raised by the vvp2 client and commands."""

from __future__ import annotations


class VVPError(Exception):
    """Base class for every error the CLI reports to the user."""

    def with_prefix(self, prefix: str) -> "VVPError":
        """Prepend context to the message, keeping the error type and fields."""
        self.args = (f"{prefix}: {self}",)
        return self


class ConfigError(VVPError):
    """A required setting is missing or the config file is unusable."""


class InputError(VVPError):
    """Invalid local input: a bad resource file or conflicting flags."""


class RequestFailedError(VVPError):
    """The request never produced an HTTP response."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"request failed: {cause}")


class APIError(VVPError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error (status {status_code}): {message}")


class InvalidResponseError(VVPError):
    """A 2xx response body could not be decoded into the expected model."""
