"""Estimate garment measurements from height, weight and a scale vector."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from body_shape.archetypes import ScaleVector
from body_shape.profile import REFERENCE_HEIGHT_CM, REFERENCE_WEIGHT_KG, UserProfile

__all__ = [
    "MEASUREMENT_FIELDS",
    "GIRTH_FIELDS",
    "GarmentMeasurement",
    "apply_overall_scale",
    "estimate_measurements",
    "estimate_profile_measurements",
]

MEASUREMENT_FIELDS: tuple[str, ...] = ("shoulder", "chest", "waist", "length", "arm_length")
# Fields perturbed by body shape; lengths depend on height alone.
GIRTH_FIELDS: tuple[str, ...] = ("shoulder", "chest", "waist")

# Baselines (cm) for the 170 cm / 65 kg reference body and their linear slopes.
_CHEST_BASE, _CHEST_PER_KG = 88.0, 0.8
_WAIST_BASE, _WAIST_PER_KG = 78.0, 0.9
_SHOULDER_BASE, _SHOULDER_PER_CM = 42.0, 0.15
_ARM_BASE, _ARM_PER_CM = 58.0, 0.2
_LENGTH_BASE, _LENGTH_PER_CM = 66.0, 0.15


@dataclass(frozen=True)
class GarmentMeasurement:
    """Garment-relevant measurements in centimetres.

    Used both for a user's estimated body and for a size chart's reference
    garment.
    """

    shoulder: float
    chest: float
    waist: float
    length: float
    arm_length: float

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "GarmentMeasurement":
        missing = [name for name in MEASUREMENT_FIELDS if name not in payload]
        if missing:
            raise KeyError(f"Measurement is missing fields: {', '.join(missing)}")
        return cls(**{name: float(payload[name]) for name in MEASUREMENT_FIELDS})

    def as_dict(self) -> dict[str, float]:
        return {name: float(getattr(self, name)) for name in MEASUREMENT_FIELDS}


def estimate_measurements(height: float, weight: float, scale: ScaleVector) -> GarmentMeasurement:
    """Apply the linear estimates and the archetype's girth multipliers."""

    height_delta = height - REFERENCE_HEIGHT_CM
    weight_delta = weight - REFERENCE_WEIGHT_KG

    chest = (_CHEST_BASE + weight_delta * _CHEST_PER_KG) * scale.chest
    waist = (_WAIST_BASE + weight_delta * _WAIST_PER_KG) * scale.waist
    shoulder = (_SHOULDER_BASE + height_delta * _SHOULDER_PER_CM) * scale.shoulder
    arm_length = _ARM_BASE + height_delta * _ARM_PER_CM
    length = _LENGTH_BASE + height_delta * _LENGTH_PER_CM

    return GarmentMeasurement(
        shoulder=shoulder,
        chest=chest,
        waist=waist,
        length=length,
        arm_length=arm_length,
    )


def apply_overall_scale(measurement: GarmentMeasurement, overall_scale: float) -> GarmentMeasurement:
    """Multiply the girth fields by *overall_scale*, leaving lengths untouched."""

    factor = float(overall_scale)
    return replace(
        measurement,
        **{name: getattr(measurement, name) * factor for name in GIRTH_FIELDS},
    )


def estimate_profile_measurements(
    profile: UserProfile,
    scale: ScaleVector | None = None,
) -> GarmentMeasurement:
    """Estimate a profile's measurements with both scaling stages applied."""

    scale = scale or profile.scale_vector()
    estimate = estimate_measurements(profile.height_cm, profile.weight_kg, scale)
    return apply_overall_scale(estimate, profile.overall_scale)
