"""Apply resolved joint scales to a rigged garment skeleton.

Garment meshes are authored by hand and are often only partially rigged, so
joints that the rig does not expose are skipped with an
:class:`UnmappedJointWarning` instead of failing the deformation.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

import numpy as np

from .joint_scales import Joint, JointScaleMap, ScaleTriple

__all__ = [
    "Bone",
    "JointApplication",
    "JointOutcome",
    "Rig",
    "RigDeformationReport",
    "UnmappedJointWarning",
    "apply_body_scales",
    "load_rig",
]


class UnmappedJointWarning(RuntimeWarning):
    """Emitted when a resolved joint has no matching bone in the rig."""


@dataclass(slots=True)
class Bone:
    """A named rig bone carrying a local ``(x, y, z)`` scale."""

    name: str
    scale: np.ndarray = field(default_factory=lambda: np.ones(3, dtype=float))

    def set_scale(self, triple: Iterable[float]) -> None:
        values = np.asarray(tuple(triple), dtype=float).reshape(-1)
        if values.size != 3:
            raise ValueError(f"Bone '{self.name}' expects three scale components, received {values.size}.")
        self.scale = values


@dataclass(slots=True)
class Rig:
    """Minimal skeleton view of a loaded garment mesh."""

    bones: dict[str, Bone]
    name: str = "garment"
    root_scale: np.ndarray = field(default_factory=lambda: np.ones(3, dtype=float))

    @classmethod
    def from_bone_names(cls, names: Iterable[str], *, name: str = "garment") -> "Rig":
        return cls(bones={bone: Bone(bone) for bone in names}, name=name)

    def bone_names(self) -> tuple[str, ...]:
        return tuple(self.bones)

    def get(self, name: str) -> Bone | None:
        return self.bones.get(name)


class JointOutcome(str, Enum):
    APPLIED = "applied"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class JointApplication:
    joint: Joint
    outcome: JointOutcome
    scale: ScaleTriple

    def as_dict(self) -> dict[str, object]:
        return {"joint": self.joint.value, "outcome": self.outcome.value, "scale": list(self.scale)}


@dataclass(frozen=True)
class RigDeformationReport:
    """Per-joint record of how a :class:`JointScaleMap` was applied."""

    rig_name: str
    overall_scale: float
    entries: tuple[JointApplication, ...]

    def applied(self) -> tuple[JointApplication, ...]:
        return tuple(entry for entry in self.entries if entry.outcome is JointOutcome.APPLIED)

    def skipped(self) -> tuple[JointApplication, ...]:
        return tuple(entry for entry in self.entries if entry.outcome is JointOutcome.SKIPPED)

    @property
    def skip_count(self) -> int:
        return len(self.skipped())

    def as_dict(self) -> dict[str, object]:
        return {
            "rig": self.rig_name,
            "overall_scale": float(self.overall_scale),
            "joints": [entry.as_dict() for entry in self.entries],
            "skipped": self.skip_count,
        }


def apply_body_scales(
    rig: Rig,
    joint_scales: JointScaleMap,
    *,
    overall_scale: float = 1.0,
) -> RigDeformationReport:
    """Scale *rig* uniformly by *overall_scale* and each bone by its joint triple."""

    rig.root_scale = np.full(3, float(overall_scale), dtype=float)

    entries: list[JointApplication] = []
    for joint, triple in joint_scales.items():
        bone = rig.get(joint.value)
        if bone is None:
            warnings.warn(
                f"Bone '{joint.value}' not found in rig '{rig.name}'; skipping its scale.",
                UnmappedJointWarning,
                stacklevel=2,
            )
            entries.append(JointApplication(joint, JointOutcome.SKIPPED, triple))
            continue
        bone.set_scale(triple)
        entries.append(JointApplication(joint, JointOutcome.APPLIED, triple))

    return RigDeformationReport(rig.name, float(overall_scale), tuple(entries))


def load_rig(path: Path) -> Rig:
    """Load a rig description (``{"name": ..., "bones": [...]}``) from JSON or YAML."""

    from schemas.validators import load_payload, validate_rig_payload

    path = Path(path)
    payload = load_payload(path)
    validate_rig_payload(payload)
    return Rig.from_bone_names(payload["bones"], name=str(payload.get("name", path.stem)))
