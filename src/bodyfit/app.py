"""High-level command helpers for bodyfit."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from body_shape.archetypes import ARCHETYPES, load_archetype_table
from sizing.size_charts import SizeChart, available_categories, get_size_chart, load_size_chart

from .pipelines.fit_from_profile import add_fit_arguments, run_fit

__all__ = ["build_cli", "describe_archetypes", "describe_size_chart"]


def describe_archetypes(path: Path | None = None) -> str:
    table = load_archetype_table(path) if path is not None else ARCHETYPES
    lines = []
    for spec in table.values():
        scale = ", ".join(f"{name} {value:g}" for name, value in spec.scale.as_dict().items())
        lines.append(f"{spec.key:<18} {spec.name}: {spec.description}")
        lines.append(f"{'':<18} {scale}")
    return "\n".join(lines)


def describe_size_chart(chart: SizeChart) -> str:
    header = f"{'size':<6}{'shoulder':>10}{'chest':>8}{'waist':>8}{'length':>8}{'arm':>6}"
    lines = [f"Size chart: {chart.category}", header]
    for label, spec in chart.items():
        lines.append(
            f"{label:<6}{spec.shoulder:>10g}{spec.chest:>8g}{spec.waist:>8g}{spec.length:>8g}{spec.arm_length:>6g}"
        )
    return "\n".join(lines)


def build_cli(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="bodyfit command launcher")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fit = subparsers.add_parser(
        "fit",
        help="Estimate measurements and recommend a size for one profile",
    )
    add_fit_arguments(fit)

    archetypes = subparsers.add_parser(
        "archetypes",
        help="List the available body-shape archetypes",
    )
    archetypes.add_argument("--table", type=Path, help="Optional JSON/YAML archetype table override")

    sizes = subparsers.add_parser(
        "sizes",
        help="Print a garment size chart",
    )
    sizes.add_argument(
        "--category",
        default=available_categories()[0],
        choices=available_categories(),
        help="Built-in size chart to print",
    )
    sizes.add_argument("--size-chart", type=Path, help="Print a JSON/YAML size chart instead")

    args = parser.parse_args(argv)

    if args.command == "fit":
        return run_fit(args, fit)
    if args.command == "archetypes":
        print(describe_archetypes(args.table))
        return 0
    if args.command == "sizes":
        chart = load_size_chart(args.size_chart) if args.size_chart else get_size_chart(args.category)
        print(describe_size_chart(chart))
        return 0

    parser.error(f"Unknown command {args.command!r}")
    return 2
