"""Run a full fitting session from height, weight and body archetype."""

from __future__ import annotations

import argparse
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from body_shape.archetypes import (
    Archetype,
    ArchetypeSpec,
    ScaleVector,
    UnknownArchetypeError,
    available_archetypes,
    load_archetype_table,
)
from body_shape.joint_scales import JointScaleMap, resolve_joint_scales
from body_shape.profile import InvalidProfileError, UserProfile
from body_shape.rig import Rig, RigDeformationReport, apply_body_scales, load_rig
from sizing.matcher import SizeRecommendation, find_best_size
from sizing.measurements import GarmentMeasurement, estimate_profile_measurements
from sizing.size_charts import (
    GarmentCategory,
    SizeChart,
    available_categories,
    get_size_chart,
    load_size_chart,
)

DEFAULT_CATEGORY = GarmentCategory.MEN_SHIRT

__all__ = [
    "DEFAULT_CATEGORY",
    "FittingResult",
    "add_fit_arguments",
    "fit_profile",
    "format_summary",
    "main",
    "run_fit",
    "save_fit",
]


@dataclass(frozen=True)
class FittingResult:
    """Everything a fitting session hands to the renderer and the size panel."""

    profile: UserProfile
    archetype: ArchetypeSpec
    overall_scale: float
    joint_scales: JointScaleMap
    measurements: GarmentMeasurement
    chart: SizeChart
    recommendation: SizeRecommendation
    rig_report: RigDeformationReport | None = None

    @property
    def scale_vector(self) -> ScaleVector:
        return self.archetype.scale

    def to_dict(self) -> dict:
        payload = {
            "profile": self.profile.as_dict(),
            "archetype": self.archetype.as_dict(),
            "overall_scale": float(self.overall_scale),
            "joint_scales": self.joint_scales.as_dict(),
            "measurements": self.measurements.as_dict(),
            "size_chart": self.chart.category,
            "recommendation": self.recommendation.as_dict(),
        }
        if self.rig_report is not None:
            payload["rig"] = self.rig_report.as_dict()
        return payload


def fit_profile(
    profile: UserProfile,
    *,
    category: "str | GarmentCategory" = DEFAULT_CATEGORY,
    size_chart: SizeChart | None = None,
    archetypes: Mapping[Archetype, ArchetypeSpec] | None = None,
    rig: Rig | None = None,
) -> FittingResult:
    """Estimate measurements, joint scales and the recommended size for *profile*.

    Parameters
    ----------
    profile:
        Validated session inputs.
    category:
        Built-in chart to match against when *size_chart* is not given.
    size_chart:
        Optional chart override, e.g. loaded with :func:`load_size_chart`.
    archetypes:
        Optional archetype table override.
    rig:
        When provided, joint scales and the overall scale are written into the
        rig and the per-joint outcome is attached to the result.
    """

    spec = profile.archetype_spec(archetypes)
    overall_scale = profile.overall_scale
    joint_scales = resolve_joint_scales(spec.scale)
    measurements = estimate_profile_measurements(profile, spec.scale)
    chart = size_chart if size_chart is not None else get_size_chart(category)
    recommendation = find_best_size(measurements, chart)

    rig_report = None
    if rig is not None:
        rig_report = apply_body_scales(rig, joint_scales, overall_scale=overall_scale)

    return FittingResult(
        profile=profile,
        archetype=spec,
        overall_scale=overall_scale,
        joint_scales=joint_scales,
        measurements=measurements,
        chart=chart,
        recommendation=recommendation,
        rig_report=rig_report,
    )


def save_fit(result: FittingResult, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as stream:
        json.dump(result.to_dict(), stream, indent=2)


def format_summary(result: FittingResult) -> str:
    measurements = result.measurements
    lines = [
        f"Recommended size: {result.recommendation.size} ({result.chart.category})",
        f"Archetype: {result.archetype.name} | overall scale {result.overall_scale:.3f}",
        (
            "Estimated: "
            f"shoulder {measurements.shoulder:.1f} cm, "
            f"chest {measurements.chest:.1f} cm, "
            f"waist {measurements.waist:.1f} cm"
        ),
    ]
    for region, verdict in result.recommendation.fit_report.regions.items():
        lines.append(f"  {region}: {verdict.value}")
    if result.rig_report is not None:
        lines.append(
            f"Rig '{result.rig_report.rig_name}': {len(result.rig_report.applied())} joints scaled, "
            f"{result.rig_report.skip_count} skipped"
        )
    return "\n".join(lines)


def add_fit_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--height", type=float, required=True, help="Height in centimetres (100-250).")
    parser.add_argument("--weight", type=float, required=True, help="Weight in kilograms (30-200).")
    parser.add_argument(
        "--archetype",
        required=True,
        choices=available_archetypes(),
        help="Body-shape archetype.",
    )
    parser.add_argument(
        "--category",
        default=DEFAULT_CATEGORY.value,
        choices=available_categories(),
        help="Built-in size chart to match against.",
    )
    parser.add_argument(
        "--size-chart",
        type=Path,
        help="JSON/YAML size chart overriding the built-in category chart.",
    )
    parser.add_argument(
        "--archetypes",
        type=Path,
        help="JSON/YAML archetype table overriding the built-in scale vectors.",
    )
    parser.add_argument(
        "--rig",
        type=Path,
        help="JSON/YAML rig description to apply the joint scales to.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Where to store the fitting result as JSON.",
    )


def run_fit(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    archetypes = load_archetype_table(args.archetypes) if args.archetypes else None
    size_chart = load_size_chart(args.size_chart) if args.size_chart else None
    rig = load_rig(args.rig) if args.rig else None

    try:
        profile = UserProfile(args.height, args.weight, args.archetype)
    except (InvalidProfileError, UnknownArchetypeError) as exc:
        parser.error(str(exc))

    result = fit_profile(
        profile,
        category=args.category,
        size_chart=size_chart,
        archetypes=archetypes,
        rig=rig,
    )
    print(format_summary(result))
    if args.output is not None:
        save_fit(result, args.output)
        print(f"Saved fitting result to {args.output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Recommend a shirt size from height, weight and body archetype."
    )
    add_fit_arguments(parser)
    args = parser.parse_args(argv)
    return run_fit(args, parser)


if __name__ == "__main__":
    raise SystemExit(main())
