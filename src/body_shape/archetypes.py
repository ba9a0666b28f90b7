"""Body-shape archetypes and their girth scale vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

__all__ = [
    "SCALE_DIMENSIONS",
    "Archetype",
    "ArchetypeSpec",
    "ARCHETYPES",
    "NEUTRAL_SCALE",
    "ScaleVector",
    "UnknownArchetypeError",
    "available_archetypes",
    "load_archetype_table",
    "lookup_archetype",
    "lookup_scale",
]

SCALE_DIMENSIONS: tuple[str, ...] = ("shoulder", "chest", "waist", "hip", "arm", "leg")


class UnknownArchetypeError(LookupError):
    """Raised when an archetype key is not part of the archetype table."""

    def __init__(self, key: object):
        self.key = key
        known = ", ".join(member.value for member in Archetype)
        super().__init__(f"Unknown body archetype {key!r}; expected one of: {known}")


class Archetype(str, Enum):
    """Closed set of body-shape archetypes offered to the user."""

    INVERTED_TRIANGLE = "inverted-triangle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    ROUND = "round"
    SLIM = "slim"
    HOURGLASS = "hourglass"

    @classmethod
    def parse(cls, key: "str | Archetype") -> "Archetype":
        if isinstance(key, cls):
            return key
        try:
            return cls(str(key).strip().lower())
        except ValueError as exc:
            raise UnknownArchetypeError(key) from exc


@dataclass(frozen=True)
class ScaleVector:
    """Per-dimension multipliers relative to a neutral 1.0 body."""

    shoulder: float = 1.0
    chest: float = 1.0
    waist: float = 1.0
    hip: float = 1.0
    arm: float = 1.0
    leg: float = 1.0

    def __post_init__(self) -> None:
        for name in SCALE_DIMENSIONS:
            value = float(getattr(self, name))
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Scale component '{name}' must be a positive finite number, received {value!r}.")
            object.__setattr__(self, name, value)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ScaleVector":
        missing = [name for name in SCALE_DIMENSIONS if name not in payload]
        if missing:
            raise KeyError(f"Scale vector is missing dimensions: {', '.join(missing)}")
        return cls(**{name: float(payload[name]) for name in SCALE_DIMENSIONS})

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in SCALE_DIMENSIONS}


NEUTRAL_SCALE = ScaleVector()


@dataclass(frozen=True)
class ArchetypeSpec:
    """Display metadata and scale vector for a single archetype."""

    archetype: Archetype
    name: str
    description: str
    scale: ScaleVector

    @property
    def key(self) -> str:
        return self.archetype.value

    def as_dict(self) -> dict[str, object]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "scale": self.scale.as_dict(),
        }


ARCHETYPES: Mapping[Archetype, ArchetypeSpec] = MappingProxyType(
    {
        Archetype.INVERTED_TRIANGLE: ArchetypeSpec(
            Archetype.INVERTED_TRIANGLE,
            "Inverted triangle",
            "Broad shoulders with a narrow waist.",
            ScaleVector(shoulder=1.2, chest=1.15, waist=0.9, hip=0.95, arm=1.1, leg=1.0),
        ),
        Archetype.TRIANGLE: ArchetypeSpec(
            Archetype.TRIANGLE,
            "Triangle",
            "Developed lower body with narrower shoulders.",
            ScaleVector(shoulder=0.9, chest=0.95, waist=1.0, hip=1.2, arm=0.95, leg=1.15),
        ),
        Archetype.RECTANGLE: ArchetypeSpec(
            Archetype.RECTANGLE,
            "Rectangle",
            "Evenly balanced proportions.",
            NEUTRAL_SCALE,
        ),
        Archetype.ROUND: ArchetypeSpec(
            Archetype.ROUND,
            "Round",
            "Fuller midsection with a large waist circumference.",
            ScaleVector(shoulder=1.0, chest=1.15, waist=1.25, hip=1.15, arm=1.1, leg=1.05),
        ),
        Archetype.SLIM: ArchetypeSpec(
            Archetype.SLIM,
            "Slim",
            "Long and lean throughout.",
            ScaleVector(shoulder=0.85, chest=0.85, waist=0.8, hip=0.85, arm=0.8, leg=0.9),
        ),
        Archetype.HOURGLASS: ArchetypeSpec(
            Archetype.HOURGLASS,
            "Hourglass",
            "Broad shoulders and hips with a defined waist.",
            ScaleVector(shoulder=1.1, chest=1.1, waist=0.8, hip=1.15, arm=0.95, leg=1.05),
        ),
    }
)


def lookup_archetype(
    key: "str | Archetype",
    table: Mapping[Archetype, ArchetypeSpec] | None = None,
) -> ArchetypeSpec:
    """Return the :class:`ArchetypeSpec` registered for *key*."""

    table = ARCHETYPES if table is None else table
    archetype = Archetype.parse(key)
    try:
        return table[archetype]
    except KeyError as exc:
        raise UnknownArchetypeError(key) from exc


def lookup_scale(
    key: "str | Archetype",
    table: Mapping[Archetype, ArchetypeSpec] | None = None,
) -> ScaleVector:
    """Return the scale vector for *key*."""

    return lookup_archetype(key, table).scale


def available_archetypes() -> tuple[str, ...]:
    return tuple(archetype.value for archetype in ARCHETYPES)


def load_archetype_table(path: Path) -> Mapping[Archetype, ArchetypeSpec]:
    """Load and validate an archetype table override from a JSON or YAML file.

    Archetypes omitted from the file keep their built-in definition, so the
    returned table always covers the full closed set.
    """

    from schemas.validators import load_payload, validate_archetype_payload

    payload = load_payload(Path(path))
    validate_archetype_payload(payload)

    table: dict[Archetype, ArchetypeSpec] = dict(ARCHETYPES)
    for key, entry in payload["archetypes"].items():
        archetype = Archetype.parse(key)
        table[archetype] = ArchetypeSpec(
            archetype=archetype,
            name=str(entry["name"]),
            description=str(entry.get("description", "")),
            scale=ScaleVector.from_mapping(entry["scale"]),
        )
    return MappingProxyType(table)
