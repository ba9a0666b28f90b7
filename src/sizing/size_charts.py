"""Reference size charts for supported garment categories."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from .measurements import GarmentMeasurement

__all__ = [
    "GarmentCategory",
    "SizeChart",
    "MEN_SHIRT_SIZES",
    "WOMEN_SHIRT_SIZES",
    "SIZE_CHARTS",
    "UnknownGarmentCategoryError",
    "available_categories",
    "get_size_chart",
    "load_size_chart",
]


class UnknownGarmentCategoryError(LookupError):
    """Raised when no size chart is registered for a garment category."""


class GarmentCategory(str, Enum):
    MEN_SHIRT = "men-shirt"
    WOMEN_SHIRT = "women-shirt"

    @classmethod
    def parse(cls, key: "str | GarmentCategory") -> "GarmentCategory":
        if isinstance(key, cls):
            return key
        try:
            return cls(str(key).strip().lower())
        except ValueError as exc:
            known = ", ".join(member.value for member in cls)
            raise UnknownGarmentCategoryError(
                f"Unknown garment category {key!r}; expected one of: {known}"
            ) from exc


@dataclass(frozen=True)
class SizeChart:
    """Ordered size label to reference measurement table.

    Order matters: the matcher breaks distance ties in favour of the size
    listed first.
    """

    category: str
    entries: tuple[tuple[str, GarmentMeasurement], ...]

    def __post_init__(self) -> None:
        labels = [label for label, _ in self.entries]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(f"Size chart '{self.category}' repeats labels: {', '.join(duplicates)}")

    @classmethod
    def from_mapping(cls, category: str, sizes: Mapping[str, GarmentMeasurement]) -> "SizeChart":
        return cls(category, tuple(sizes.items()))

    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.entries)

    def items(self) -> tuple[tuple[str, GarmentMeasurement], ...]:
        return self.entries

    def __getitem__(self, label: str) -> GarmentMeasurement:
        for entry_label, measurement in self.entries:
            if entry_label == label:
                return measurement
        raise KeyError(label)

    def __contains__(self, label: object) -> bool:
        return label in self.labels()

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels())

    def __len__(self) -> int:
        return len(self.entries)

    def as_dict(self) -> dict[str, object]:
        return {
            "category": self.category,
            "sizes": [{"label": label, **measurement.as_dict()} for label, measurement in self.entries],
        }


def _chart(category: GarmentCategory, rows: tuple[tuple[str, float, float, float, float, float], ...]) -> SizeChart:
    return SizeChart(
        category.value,
        tuple(
            (label, GarmentMeasurement(shoulder, chest, waist, length, arm_length))
            for label, shoulder, chest, waist, length, arm_length in rows
        ),
    )


# label, shoulder, chest, waist, length, arm_length
MEN_SHIRT_SIZES = _chart(
    GarmentCategory.MEN_SHIRT,
    (
        ("XS", 42.0, 88.0, 78.0, 66.0, 58.0),
        ("S", 44.0, 92.0, 82.0, 68.0, 60.0),
        ("M", 46.0, 96.0, 86.0, 70.0, 62.0),
        ("L", 48.0, 100.0, 90.0, 72.0, 64.0),
        ("XL", 50.0, 104.0, 94.0, 74.0, 66.0),
        ("XXL", 52.0, 108.0, 98.0, 76.0, 68.0),
    ),
)

WOMEN_SHIRT_SIZES = _chart(
    GarmentCategory.WOMEN_SHIRT,
    (
        ("XS", 38.0, 82.0, 68.0, 62.0, 56.0),
        ("S", 40.0, 86.0, 72.0, 64.0, 58.0),
        ("M", 42.0, 90.0, 76.0, 66.0, 60.0),
        ("L", 44.0, 94.0, 80.0, 68.0, 62.0),
        ("XL", 46.0, 98.0, 84.0, 70.0, 64.0),
    ),
)

SIZE_CHARTS: Mapping[GarmentCategory, SizeChart] = MappingProxyType(
    {
        GarmentCategory.MEN_SHIRT: MEN_SHIRT_SIZES,
        GarmentCategory.WOMEN_SHIRT: WOMEN_SHIRT_SIZES,
    }
)


def available_categories() -> tuple[str, ...]:
    return tuple(category.value for category in SIZE_CHARTS)


def get_size_chart(category: "str | GarmentCategory" = GarmentCategory.MEN_SHIRT) -> SizeChart:
    """Return the built-in chart registered for *category*."""

    return SIZE_CHARTS[GarmentCategory.parse(category)]


def load_size_chart(path: Path) -> SizeChart:
    """Load and validate a size chart override from a JSON or YAML file."""

    from schemas.validators import load_payload, validate_size_chart_payload

    payload = load_payload(Path(path))
    validate_size_chart_payload(payload)
    return SizeChart(
        str(payload["category"]),
        tuple(
            (str(entry["label"]), GarmentMeasurement.from_mapping(entry))
            for entry in payload["sizes"]
        ),
    )
