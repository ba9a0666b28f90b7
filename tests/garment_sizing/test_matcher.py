from __future__ import annotations

import pytest

from sizing.matcher import (
    FIT_TOLERANCES,
    FitVerdict,
    ToleranceBand,
    classify_fit,
    find_best_size,
    size_distance,
)
from sizing.measurements import GarmentMeasurement
from sizing.size_charts import MEN_SHIRT_SIZES, SizeChart


@pytest.fixture
def user() -> GarmentMeasurement:
    return GarmentMeasurement(shoulder=46.0, chest=90.0, waist=80.0, length=70.0, arm_length=62.0)


def _garment(shoulder: float, chest: float, waist: float) -> GarmentMeasurement:
    return GarmentMeasurement(shoulder=shoulder, chest=chest, waist=waist, length=70.0, arm_length=62.0)


def test_size_distance_uses_region_weights(user: GarmentMeasurement) -> None:
    garment = _garment(shoulder=48.0, chest=96.0, waist=77.0)
    assert size_distance(user, garment) == pytest.approx(6 * 2.0 + 3 * 1.5 + 2 * 1.2)


def test_exact_chart_match_is_selected() -> None:
    user = MEN_SHIRT_SIZES["L"]
    recommendation = find_best_size(user, MEN_SHIRT_SIZES)
    assert recommendation.size == "L"
    assert dict(recommendation.distances)["L"] == 0.0


def test_find_best_size_is_idempotent(user: GarmentMeasurement) -> None:
    first = find_best_size(user, MEN_SHIRT_SIZES)
    second = find_best_size(user, MEN_SHIRT_SIZES)
    assert first.size == second.size
    assert first.fit_report == second.fit_report
    assert first.fit_report.as_dict() == second.fit_report.as_dict()


def test_ties_resolve_to_first_chart_entry(user: GarmentMeasurement) -> None:
    below = _garment(shoulder=46.0, chest=88.0, waist=80.0)
    above = _garment(shoulder=46.0, chest=92.0, waist=80.0)
    assert size_distance(user, below) == size_distance(user, above)

    for _ in range(5):
        assert find_best_size(user, SizeChart("tie", (("A", below), ("B", above)))).size == "A"
        assert find_best_size(user, SizeChart("tie", (("B", above), ("A", below)))).size == "B"


@pytest.mark.parametrize(
    "offset, verdict",
    [
        (3.99, FitVerdict.TOO_SMALL),
        (4.0, FitVerdict.FITS),
        (8.0, FitVerdict.FITS),
        (12.0, FitVerdict.FITS),
        (12.01, FitVerdict.TOO_LARGE),
    ],
)
def test_chest_band_is_inclusive(user: GarmentMeasurement, offset: float, verdict: FitVerdict) -> None:
    garment = _garment(shoulder=user.shoulder, chest=user.chest + offset, waist=user.waist + 5)
    recommendation = find_best_size(user, SizeChart("single", (("M", garment),)))
    assert recommendation.fit_report.regions["chest"] is verdict


@pytest.mark.parametrize(
    "region, offset, verdict",
    [
        ("shoulder", -1.0, FitVerdict.FITS),
        ("shoulder", 3.0, FitVerdict.FITS),
        ("shoulder", -1.5, FitVerdict.TOO_SMALL),
        ("shoulder", 3.5, FitVerdict.TOO_LARGE),
        ("waist", 2.0, FitVerdict.FITS),
        ("waist", 10.0, FitVerdict.FITS),
        ("waist", 1.0, FitVerdict.TOO_SMALL),
        ("waist", 11.0, FitVerdict.TOO_LARGE),
    ],
)
def test_region_bands(user: GarmentMeasurement, region: str, offset: float, verdict: FitVerdict) -> None:
    values = {"shoulder": user.shoulder, "chest": user.chest + 8, "waist": user.waist + 5}
    values[region] = getattr(user, region) + offset
    assert classify_fit(user, _garment(**values))[region] is verdict


def test_fit_report_covers_regions_in_order(user: GarmentMeasurement) -> None:
    report = find_best_size(user, MEN_SHIRT_SIZES).fit_report
    assert tuple(report.regions) == ("shoulder", "chest", "waist")
    assert tuple(FIT_TOLERANCES) == ("shoulder", "chest", "waist")


def test_all_fit_flag() -> None:
    user = GarmentMeasurement(shoulder=45.0, chest=90.0, waist=80.0, length=70.0, arm_length=62.0)
    garment = _garment(shoulder=46.0, chest=96.0, waist=86.0)
    report = find_best_size(user, SizeChart("single", (("M", garment),))).fit_report
    assert report.all_fit
    assert report.as_dict() == {"size": "M", "regions": {"shoulder": "fits", "chest": "fits", "waist": "fits"}}


def test_tolerance_band_classify() -> None:
    band = ToleranceBand(2.0, 10.0)
    assert band.classify(81.999, 80.0) is FitVerdict.TOO_SMALL
    assert band.classify(82.0, 80.0) is FitVerdict.FITS
    assert band.classify(90.001, 80.0) is FitVerdict.TOO_LARGE


def test_empty_chart_is_rejected(user: GarmentMeasurement) -> None:
    with pytest.raises(ValueError, match="at least one size"):
        find_best_size(user, SizeChart("empty", ()))
