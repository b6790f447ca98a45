"""Load resource definitions from local JSON or YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from vvp2cli.errors import InputError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_document(text: str) -> object:
    """Parse ``text`` as JSON, falling back to YAML."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InputError(f"failed to parse file as JSON or YAML: {e}") from e


def load_resource(path: str | Path, model: type[ModelT]) -> ModelT:
    """Read ``path`` and validate it into ``model``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"failed to read file: {e}") from e

    document = parse_document(text)
    if not isinstance(document, dict):
        raise InputError(f"failed to parse file as JSON or YAML: {path} does not contain a mapping")

    try:
        return model.model_validate(document)
    except ValidationError as e:
        raise InputError(f"invalid {model.__name__} in {path}: {e}") from e
