"""Garment measurement estimation, size charts and size matching."""

from __future__ import annotations

from .matcher import (
    FitReport,
    FitVerdict,
    SizeRecommendation,
    classify_fit,
    find_best_size,
    size_distance,
)
from .measurements import (
    GarmentMeasurement,
    apply_overall_scale,
    estimate_measurements,
    estimate_profile_measurements,
)
from .size_charts import (
    MEN_SHIRT_SIZES,
    WOMEN_SHIRT_SIZES,
    GarmentCategory,
    SizeChart,
    UnknownGarmentCategoryError,
    get_size_chart,
    load_size_chart,
)

__all__ = [
    "FitReport",
    "FitVerdict",
    "GarmentCategory",
    "GarmentMeasurement",
    "MEN_SHIRT_SIZES",
    "SizeChart",
    "SizeRecommendation",
    "UnknownGarmentCategoryError",
    "WOMEN_SHIRT_SIZES",
    "apply_overall_scale",
    "classify_fit",
    "estimate_measurements",
    "estimate_profile_measurements",
    "find_best_size",
    "get_size_chart",
    "load_size_chart",
    "size_distance",
]
