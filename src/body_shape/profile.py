"""User profile validation and the overall height/weight scale factor."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from .archetypes import Archetype, ArchetypeSpec, ScaleVector, lookup_archetype

__all__ = [
    "HEIGHT_RANGE_CM",
    "WEIGHT_RANGE_KG",
    "REFERENCE_HEIGHT_CM",
    "REFERENCE_WEIGHT_KG",
    "HEIGHT_SHARE",
    "WEIGHT_SHARE",
    "InvalidProfileError",
    "UserProfile",
    "compute_overall_scale",
]

HEIGHT_RANGE_CM: tuple[float, float] = (100.0, 250.0)
WEIGHT_RANGE_KG: tuple[float, float] = (30.0, 200.0)

REFERENCE_HEIGHT_CM = 170.0
REFERENCE_WEIGHT_KG = 65.0
HEIGHT_SHARE = 0.7
WEIGHT_SHARE = 0.3


class InvalidProfileError(ValueError):
    """Raised when height or weight fall outside the accepted input ranges."""


def compute_overall_scale(height: float, weight: float) -> float:
    """Blend height and weight ratios against the 170 cm / 65 kg reference body.

    The reference body maps to exactly ``1.0``. Values outside the validated
    profile ranges are not rejected here; :class:`UserProfile` guards them.
    """

    height_ratio = height / REFERENCE_HEIGHT_CM
    weight_ratio = weight / REFERENCE_WEIGHT_KG
    return height_ratio * HEIGHT_SHARE + weight_ratio * WEIGHT_SHARE


def _check_range(name: str, value: Any, bounds: tuple[float, float], unit: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidProfileError(f"{name} must be a number, received {value!r}.") from exc
    lower, upper = bounds
    # NaN fails both comparisons and is rejected here.
    if not (lower <= number <= upper) or not math.isfinite(number):
        raise InvalidProfileError(
            f"{name} must lie within [{lower:g}, {upper:g}] {unit}, received {number:g}."
        )
    return number


@dataclass(frozen=True)
class UserProfile:
    """Validated inputs for a single fitting session."""

    height_cm: float
    weight_kg: float
    archetype: Archetype

    def __post_init__(self) -> None:
        object.__setattr__(self, "height_cm", _check_range("Height", self.height_cm, HEIGHT_RANGE_CM, "cm"))
        object.__setattr__(self, "weight_kg", _check_range("Weight", self.weight_kg, WEIGHT_RANGE_KG, "kg"))
        object.__setattr__(self, "archetype", Archetype.parse(self.archetype))

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "UserProfile":
        try:
            return cls(
                height_cm=payload["height"],
                weight_kg=payload["weight"],
                archetype=payload["archetype"],
            )
        except KeyError as exc:
            raise InvalidProfileError(f"Profile is missing required field {exc.args[0]!r}.") from exc

    @property
    def overall_scale(self) -> float:
        return compute_overall_scale(self.height_cm, self.weight_kg)

    def archetype_spec(self, table: Mapping[Archetype, ArchetypeSpec] | None = None) -> ArchetypeSpec:
        return lookup_archetype(self.archetype, table)

    def scale_vector(self, table: Mapping[Archetype, ArchetypeSpec] | None = None) -> ScaleVector:
        return self.archetype_spec(table).scale

    def as_dict(self) -> dict[str, object]:
        return {
            "height": self.height_cm,
            "weight": self.weight_kg,
            "archetype": self.archetype.value,
        }
