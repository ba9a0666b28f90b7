"""Select the closest chart size and classify per-region fit."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

import numpy as np

from .measurements import GarmentMeasurement
from .size_charts import SizeChart

__all__ = [
    "DISTANCE_WEIGHTS",
    "FIT_TOLERANCES",
    "FitReport",
    "FitVerdict",
    "SizeRecommendation",
    "ToleranceBand",
    "classify_fit",
    "find_best_size",
    "size_distance",
]


class FitVerdict(str, Enum):
    TOO_SMALL = "too-small"
    FITS = "fits"
    TOO_LARGE = "too-large"


@dataclass(frozen=True)
class ToleranceBand:
    """Acceptable garment ease relative to the body, in centimetres.

    Both offsets are inclusive: a garment value of ``body + lower`` or
    ``body + upper`` still fits.
    """

    lower: float
    upper: float

    def classify(self, garment_value: float, body_value: float) -> FitVerdict:
        if garment_value < body_value + self.lower:
            return FitVerdict.TOO_SMALL
        if garment_value > body_value + self.upper:
            return FitVerdict.TOO_LARGE
        return FitVerdict.FITS


# Chest dominates the choice of size, then waist, then shoulder.
DISTANCE_WEIGHTS: Mapping[str, float] = MappingProxyType({"chest": 2.0, "waist": 1.5, "shoulder": 1.2})

FIT_TOLERANCES: Mapping[str, ToleranceBand] = MappingProxyType(
    {
        "shoulder": ToleranceBand(-1.0, 3.0),
        "chest": ToleranceBand(4.0, 12.0),
        "waist": ToleranceBand(2.0, 10.0),
    }
)


@dataclass(frozen=True)
class FitReport:
    """Recommended size label with a verdict for each body region."""

    size: str
    regions: Mapping[str, FitVerdict]

    @property
    def all_fit(self) -> bool:
        return all(verdict is FitVerdict.FITS for verdict in self.regions.values())

    def as_dict(self) -> dict[str, object]:
        return {
            "size": self.size,
            "regions": {region: verdict.value for region, verdict in self.regions.items()},
        }


@dataclass(frozen=True)
class SizeRecommendation:
    size: str
    fit_report: FitReport
    distances: tuple[tuple[str, float], ...]

    def as_dict(self) -> dict[str, object]:
        return {
            "size": self.size,
            "fit": self.fit_report.as_dict()["regions"],
            "distances": {label: float(distance) for label, distance in self.distances},
        }


def _weighted_vector(measurement: GarmentMeasurement) -> np.ndarray:
    return np.array([getattr(measurement, region) for region in DISTANCE_WEIGHTS], dtype=float)


def size_distance(user: GarmentMeasurement, garment: GarmentMeasurement) -> float:
    """Weighted absolute difference over chest, waist and shoulder."""

    weights = np.array(tuple(DISTANCE_WEIGHTS.values()), dtype=float)
    delta = np.abs(_weighted_vector(garment) - _weighted_vector(user))
    return float(delta @ weights)


def classify_fit(user: GarmentMeasurement, garment: GarmentMeasurement) -> dict[str, FitVerdict]:
    return {
        region: band.classify(getattr(garment, region), getattr(user, region))
        for region, band in FIT_TOLERANCES.items()
    }


def find_best_size(user: GarmentMeasurement, chart: SizeChart) -> SizeRecommendation:
    """Return the chart size closest to *user* together with its fit report."""

    if not len(chart):
        raise ValueError(f"Size chart '{chart.category}' must contain at least one size.")

    labels = chart.labels()
    garments = np.vstack([_weighted_vector(measurement) for _, measurement in chart.items()])
    weights = np.array(tuple(DISTANCE_WEIGHTS.values()), dtype=float)
    distances = np.abs(garments - _weighted_vector(user)) @ weights

    # argmin returns the first minimum, so ties favour the earlier chart entry.
    best = int(np.argmin(distances))
    size = labels[best]
    report = FitReport(size, MappingProxyType(classify_fit(user, chart[size])))
    return SizeRecommendation(
        size=size,
        fit_report=report,
        distances=tuple((label, float(distance)) for label, distance in zip(labels, distances)),
    )
