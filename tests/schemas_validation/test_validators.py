from __future__ import annotations

from pathlib import Path

import pytest

from schemas.validators import (
    ARCHETYPE_SCHEMA_NAME,
    RIG_SCHEMA_NAME,
    SIZE_CHART_SCHEMA_NAME,
    SchemaValidationError,
    load_payload,
    load_schema,
    validate_archetype_payload,
    validate_size_chart_payload,
)
from sizing.size_charts import MEN_SHIRT_SIZES, WOMEN_SHIRT_SIZES


@pytest.mark.parametrize("name", [SIZE_CHART_SCHEMA_NAME, ARCHETYPE_SCHEMA_NAME, RIG_SCHEMA_NAME])
def test_bundled_schemas_load(name: str) -> None:
    schema = load_schema(name)
    assert schema["type"] == "object"
    assert load_schema(name) is schema


def test_missing_schema_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_schema("does_not_exist.yaml")


@pytest.mark.parametrize("chart", [MEN_SHIRT_SIZES, WOMEN_SHIRT_SIZES])
def test_builtin_charts_satisfy_schema(chart) -> None:
    validate_size_chart_payload(chart.as_dict())


def test_error_message_lists_every_violation() -> None:
    payload = {
        "category": "",
        "sizes": [{"label": "M", "shoulder": 46, "chest": -1, "waist": 86, "length": 70}],
    }
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_size_chart_payload(payload)

    message = str(excinfo.value)
    assert len(excinfo.value.errors) == 3
    assert "[category]" in message
    assert "[sizes / 0 / chest]" in message
    assert "arm_length" in message


def test_archetype_payload_requires_full_scale_vector() -> None:
    payload = {"archetypes": {"round": {"name": "Round", "scale": {"waist": 1.3}}}}
    with pytest.raises(SchemaValidationError, match="shoulder"):
        validate_archetype_payload(payload)


def test_load_payload_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_payload(tmp_path / "missing.json")
