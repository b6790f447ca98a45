"""CLI configuration: flags, ``VVP_*`` environment variables and the YAML config file.

Precedence, highest first: command-line flag, environment variable, config
file, built-in default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from vvp2cli.errors import ConfigError

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json", "yaml")

DEFAULT_API_URL = "http://vvp.localhost"
DEFAULT_NAMESPACE = "default"
CONFIG_FILE_NAME = "config.yaml"

MISSING_URL_MESSAGE = "API URL is required (set via --api-url flag, VVP_API_URL env var, or config file)"
MISSING_NAMESPACE_MESSAGE = (
    "namespace not specified. Provide --namespace or set default.namespace "
    "in ~/.vvp2/config.yaml (or VVP_DEFAULT_NAMESPACE)"
)


def default_config_path() -> Path:
    """Location of the user config file (``~/.vvp2/config.yaml``)."""
    return Path.home() / ".vvp2" / CONFIG_FILE_NAME


def config_search_paths() -> list[Path]:
    """Where the config file is looked for without ``--config``, in order."""
    return [default_config_path(), Path.cwd() / CONFIG_FILE_NAME]


class APISection(BaseModel):
    url: str = ""
    token: str = ""
    insecure: bool = False


class DefaultSection(BaseModel):
    namespace: str = ""


class OutputSection(BaseModel):
    format: str = "table"

    @field_validator("format", mode="before")
    @classmethod
    def _known_format(cls, value: Any) -> str:
        # Unknown formats fall back to table silently
        value = str(value or "").strip().lower()
        return value if value in OUTPUT_FORMATS else "table"


class EnvSettings(BaseSettings):
    """Environment layered over the config file.

    Config-file values are passed as init kwargs; the environment source is
    placed first so ``VVP_API_URL`` and friends win over the file.
    """

    model_config = SettingsConfigDict(
        env_prefix="VVP_",
        env_nested_delimiter="_",
        extra="ignore",
    )

    api: APISection = Field(default_factory=APISection)
    default: DefaultSection = Field(default_factory=DefaultSection)
    output: OutputSection = Field(default_factory=OutputSection)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return env_settings, init_settings


class Config(BaseModel):
    """Resolved configuration handed to every command and the API client."""

    api: APISection = Field(default_factory=APISection)
    default: DefaultSection = Field(default_factory=DefaultSection)
    output: OutputSection = Field(default_factory=OutputSection)
    config_file: Optional[Path] = Field(default=None, exclude=True)

    @property
    def api_url(self) -> str:
        return self.api.url

    @property
    def token(self) -> str:
        return self.api.token

    @property
    def insecure(self) -> bool:
        return self.api.insecure

    @property
    def namespace(self) -> str:
        return self.default.namespace

    @property
    def output_format(self) -> str:
        return self.output.format

    def effective_namespace(self, flag: str | None = None) -> str:
        """Namespace from the flag, else the configured default."""
        namespace = flag or self.default.namespace
        if not namespace:
            raise ConfigError(MISSING_NAMESPACE_MESSAGE)
        return namespace

    def require_api_url(self) -> None:
        if not self.api.url:
            raise ConfigError(MISSING_URL_MESSAGE)


@dataclass
class ConfigFlags:
    """Values given explicitly on the command line (``None`` means unset)."""

    config_file: Optional[str] = None
    api_url: Optional[str] = None
    api_token: Optional[str] = None
    insecure: Optional[bool] = None
    namespace: Optional[str] = None
    output: Optional[str] = None

    @classmethod
    def from_args(cls, args: Any) -> "ConfigFlags":
        """Pick the global options out of an argparse namespace."""
        return cls(
            config_file=getattr(args, "config", None),
            api_url=getattr(args, "api_url", None),
            api_token=getattr(args, "api_token", None),
            insecure=getattr(args, "insecure", None),
            namespace=getattr(args, "namespace", None),
            output=getattr(args, "output", None),
        )

    def overrides(self) -> dict[str, dict[str, Any]]:
        layer: dict[str, dict[str, Any]] = {}
        if self.api_url:
            layer.setdefault("api", {})["url"] = self.api_url
        if self.api_token:
            layer.setdefault("api", {})["token"] = self.api_token
        if self.insecure:
            layer.setdefault("api", {})["insecure"] = True
        if self.namespace:
            layer.setdefault("default", {})["namespace"] = self.namespace
        if self.output:
            layer.setdefault("output", {})["format"] = self.output
        return layer


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def read_config_file(path: Path, explicit: bool = False) -> dict[str, Any] | None:
    """Read a YAML config file.

    Returns ``None`` when the file is absent. Problems with an explicitly
    requested file raise ``ConfigError``; problems with the default file are
    logged and the file is ignored.
    """
    if not path.is_file():
        if explicit:
            raise ConfigError(f"config file not found: {path}")
        return None

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        if explicit:
            raise ConfigError(f"failed to read config file {path}: {e}") from e
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        if explicit:
            raise ConfigError(f"failed to read config file {path}: expected a mapping")
        logger.warning("Ignoring config file %s: expected a mapping", path)
        return None
    return data


def find_config_file() -> Path:
    """The first existing file among the search paths, else the home location."""
    for path in config_search_paths():
        if path.is_file():
            return path
    return default_config_path()


def _layer_environment(file_data: dict[str, Any] | None, path: Path, explicit: bool):
    """Build ``EnvSettings`` over the file values.

    Returns the settings and the file data actually used. Invalid environment
    values, or an invalid explicit file, raise ``ConfigError``. An invalid
    default file is logged and dropped.
    """
    try:
        return EnvSettings(**(file_data or {})), file_data
    except (ValidationError, SettingsError) as e:
        file_error = e

    try:
        env_only = EnvSettings()
    except (ValidationError, SettingsError) as e:
        raise ConfigError(f"invalid configuration: {e}") from e

    if explicit:
        raise ConfigError(f"invalid configuration in {path}: {file_error}") from file_error
    logger.warning("Ignoring invalid config file %s: %s", path, file_error)
    return env_only, None


def load(flags: ConfigFlags | None = None) -> Config:
    """Merge every source into a ``Config`` without checking required keys."""
    flags = flags or ConfigFlags()

    explicit = bool(flags.config_file)
    if explicit:
        path = Path(flags.config_file).expanduser()
    else:
        path = find_config_file()
    file_data = read_config_file(path, explicit=explicit)

    layered, file_data = _layer_environment(file_data, path, explicit)
    merged = _deep_merge(layered.model_dump(), flags.overrides())

    try:
        config = Config.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
    config.config_file = path if file_data is not None else None
    return config


def resolve(flags: ConfigFlags | None = None) -> Config:
    """Load the configuration and check that the API URL is set."""
    config = load(flags)
    config.require_api_url()
    return config


def write_config_file(config: Config, path: Path | None = None) -> Path:
    """Persist ``config`` as YAML, readable by the owner only."""
    path = path or default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    document = {
        "api": {
            "url": config.api.url,
            "token": config.api.token,
            "insecure": config.api.insecure,
        },
        "default": {"namespace": config.default.namespace},
        "output": {"format": config.output.format},
    }

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        yaml.safe_dump(document, f, sort_keys=False, default_flow_style=False)
    os.chmod(path, 0o600)
    return path
