from __future__ import annotations

import json
from pathlib import Path

import pytest

from schemas.validators import SchemaValidationError
from sizing.measurements import GarmentMeasurement
from sizing.size_charts import (
    MEN_SHIRT_SIZES,
    WOMEN_SHIRT_SIZES,
    GarmentCategory,
    SizeChart,
    UnknownGarmentCategoryError,
    get_size_chart,
    load_size_chart,
)


def test_builtin_charts_keep_size_order() -> None:
    assert MEN_SHIRT_SIZES.labels() == ("XS", "S", "M", "L", "XL", "XXL")
    assert WOMEN_SHIRT_SIZES.labels() == ("XS", "S", "M", "L", "XL")
    assert MEN_SHIRT_SIZES["M"] == GarmentMeasurement(46, 96, 86, 70, 62)
    assert WOMEN_SHIRT_SIZES["XL"].chest == 98


def test_get_size_chart_by_category() -> None:
    assert get_size_chart() is MEN_SHIRT_SIZES
    assert get_size_chart("women-shirt") is WOMEN_SHIRT_SIZES
    assert get_size_chart(GarmentCategory.MEN_SHIRT) is MEN_SHIRT_SIZES

    with pytest.raises(UnknownGarmentCategoryError, match="men-shirt"):
        get_size_chart("trousers")


def test_chart_lookup_and_membership() -> None:
    assert "XXL" in MEN_SHIRT_SIZES
    assert "XXL" not in WOMEN_SHIRT_SIZES
    assert list(MEN_SHIRT_SIZES) == list(MEN_SHIRT_SIZES.labels())
    with pytest.raises(KeyError):
        WOMEN_SHIRT_SIZES["XXL"]


def test_chart_rejects_duplicate_labels() -> None:
    entry = GarmentMeasurement(44, 92, 82, 68, 60)
    with pytest.raises(ValueError, match="repeats labels: S"):
        SizeChart("custom", (("S", entry), ("S", entry)))


def test_load_size_chart_preserves_file_order(tmp_path: Path) -> None:
    chart_path = tmp_path / "chart.json"
    chart_path.write_text(json.dumps(MEN_SHIRT_SIZES.as_dict()), encoding="utf-8")

    chart = load_size_chart(chart_path)

    assert chart == MEN_SHIRT_SIZES


def test_load_size_chart_from_yaml(tmp_path: Path) -> None:
    chart_path = tmp_path / "slim_fit.yaml"
    chart_path.write_text(
        "category: slim-fit-shirt\n"
        "sizes:\n"
        "  - {label: '48', shoulder: 44, chest: 94, waist: 80, length: 70, arm_length: 62}\n"
        "  - {label: '50', shoulder: 46, chest: 98, waist: 84, length: 72, arm_length: 64}\n",
        encoding="utf-8",
    )

    chart = load_size_chart(chart_path)

    assert chart.category == "slim-fit-shirt"
    assert chart.labels() == ("48", "50")
    assert chart["50"].waist == 84.0


def test_load_size_chart_rejects_non_positive_values(tmp_path: Path) -> None:
    chart_path = tmp_path / "bad.json"
    chart_path.write_text(
        json.dumps(
            {
                "category": "broken",
                "sizes": [{"label": "M", "shoulder": 0, "chest": 96, "waist": 86, "length": 70, "arm_length": 62}],
            }
        ),
        encoding="utf-8",
    )

    with pytest.raises(SchemaValidationError) as excinfo:
        load_size_chart(chart_path)
    assert "sizes / 0 / shoulder" in str(excinfo.value)


def test_load_size_chart_unsupported_extension(tmp_path: Path) -> None:
    chart_path = tmp_path / "chart.csv"
    chart_path.write_text("label,chest\nM,96\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported payload extension"):
        load_size_chart(chart_path)
