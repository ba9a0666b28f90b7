"""JSON Schema definitions and validators for bodyfit override files."""

from __future__ import annotations

from .validators import (
    SchemaValidationError,
    load_payload,
    load_schema,
    validate_archetype_payload,
    validate_rig_payload,
    validate_size_chart_payload,
)

__all__ = [
    "SchemaValidationError",
    "load_payload",
    "load_schema",
    "validate_archetype_payload",
    "validate_rig_payload",
    "validate_size_chart_payload",
]
