"""Utilities for validating bodyfit override payloads."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

import json

import yaml
from jsonschema import Draft202012Validator, ValidationError

SIZE_CHART_SCHEMA_NAME = "size_chart.yaml"
ARCHETYPE_SCHEMA_NAME = "archetypes.yaml"
RIG_SCHEMA_NAME = "rig.yaml"

__all__ = [
    "SIZE_CHART_SCHEMA_NAME",
    "ARCHETYPE_SCHEMA_NAME",
    "RIG_SCHEMA_NAME",
    "SchemaValidationError",
    "load_schema",
    "load_payload",
    "validate_payload",
    "validate_size_chart_payload",
    "validate_archetype_payload",
    "validate_rig_payload",
]


class SchemaValidationError(RuntimeError):
    """Raised when an instance fails schema validation."""

    def __init__(self, errors: Iterable[ValidationError]):
        self.errors = tuple(errors)
        message = "Schema validation failed:\n" + "\n".join(_format_error(e) for e in self.errors)
        super().__init__(message)


def _schema_dir() -> Path:
    return Path(__file__).resolve().parent


@lru_cache(maxsize=4)
def load_schema(name: str) -> Mapping[str, Any]:
    """Load and cache a schema definition by name."""

    schema_path = _schema_dir() / name
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema '{name}' not found at {schema_path}")

    with schema_path.open("r", encoding="utf-8") as handle:
        schema = yaml.safe_load(handle)

    if not isinstance(schema, Mapping):
        raise TypeError(f"Schema '{name}' must decode to a mapping, received {type(schema)!r}")

    return schema


def load_payload(path: Path) -> Any:
    """Load a JSON or YAML payload from disk."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Payload not found at {path}")

    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as handle:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(handle)
        if suffix == ".json":
            return json.load(handle)
    raise ValueError(f"Unsupported payload extension '{suffix}' for {path}")


def validate_payload(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the bundled schema called *schema_name*."""

    schema = load_schema(schema_name)
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda exc: [str(part) for part in exc.path])
    if errors:
        raise SchemaValidationError(errors)


def validate_size_chart_payload(instance: Any) -> None:
    """Validate a size chart override (category plus ordered size entries)."""

    validate_payload(instance, SIZE_CHART_SCHEMA_NAME)


def validate_archetype_payload(instance: Any) -> None:
    """Validate an archetype table override."""

    validate_payload(instance, ARCHETYPE_SCHEMA_NAME)


def validate_rig_payload(instance: Any) -> None:
    """Validate a rig description listing the bones of a garment mesh."""

    validate_payload(instance, RIG_SCHEMA_NAME)


def _format_error(error: ValidationError) -> str:
    location = " / ".join(str(component) for component in error.absolute_path)
    prefix = f"[{location}] " if location else ""
    return f"{prefix}{error.message}"
