"""Command line demo comparing size recommendations across body archetypes.

Runs a single height/weight pair through every archetype and prints the
recommended shirt size together with the per-region fit verdicts. Pass
``--output-dir`` to also store each fitting result as JSON.
"""

from __future__ import annotations

from pathlib import Path

from body_shape.archetypes import Archetype
from body_shape.profile import UserProfile
from bodyfit.pipelines.fit_from_profile import fit_profile, save_fit
from sizing.size_charts import available_categories


def main() -> int:
    import argparse

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--height", type=float, default=176.0, help="Height in centimetres.")
    parser.add_argument("--weight", type=float, default=72.0, help="Weight in kilograms.")
    parser.add_argument(
        "--category",
        default=available_categories()[0],
        choices=available_categories(),
        help="Size chart to match against.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory in which to store one fitting result per archetype.",
    )
    args = parser.parse_args()

    for archetype in Archetype:
        result = fit_profile(UserProfile(args.height, args.weight, archetype), category=args.category)
        verdicts = ", ".join(
            f"{region} {verdict.value}" for region, verdict in result.recommendation.fit_report.regions.items()
        )
        print(f"{archetype.value:<18} {result.recommendation.size:<4} {verdicts}")

        if args.output_dir is not None:
            output_path = args.output_dir / f"{archetype.value}.json"
            save_fit(result, output_path)

    if args.output_dir is not None:
        print(f"Saved fitting results to {args.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
