"""Map archetype scale vectors onto named garment rig joints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

import numpy as np

from .archetypes import ScaleVector

__all__ = [
    "AXES",
    "Joint",
    "JointBinding",
    "JOINT_BINDINGS",
    "JointScaleMap",
    "ScaleTriple",
    "resolve_joint_scales",
]

AXES = ("x", "y", "z")
ScaleTriple = tuple[float, float, float]


class Joint(str, Enum):
    """Rig bones that respond to body-shape scaling.

    Values follow the bone names authored in the garment rigs.
    """

    SHOULDER_LEFT = "shoulder_L"
    SHOULDER_RIGHT = "shoulder_R"
    CHEST = "chest"
    WAIST = "waist"
    HIP = "hip"
    ARM_LEFT = "arm_L"
    ARM_RIGHT = "arm_R"


@dataclass(frozen=True)
class JointBinding:
    """Which joints a scale dimension drives and along which axes."""

    dimension: str
    joints: tuple[Joint, ...]
    axes: tuple[bool, bool, bool]

    def triple(self, value: float) -> ScaleTriple:
        scaled = np.where(np.asarray(self.axes, dtype=bool), float(value), 1.0)
        return (float(scaled[0]), float(scaled[1]), float(scaled[2]))


# Shoulders widen only; girth joints scale in the frontal plane. The leg
# dimension is reserved and drives no joint on upper-body garments.
JOINT_BINDINGS: tuple[JointBinding, ...] = (
    JointBinding("shoulder", (Joint.SHOULDER_LEFT, Joint.SHOULDER_RIGHT), (True, False, False)),
    JointBinding("chest", (Joint.CHEST,), (True, True, False)),
    JointBinding("waist", (Joint.WAIST,), (True, True, False)),
    JointBinding("hip", (Joint.HIP,), (True, True, False)),
    JointBinding("arm", (Joint.ARM_LEFT, Joint.ARM_RIGHT), (True, True, False)),
)


@dataclass(frozen=True)
class JointScaleMap(Mapping[Joint, ScaleTriple]):
    """Read-only mapping from joint to its ``(x, y, z)`` scale triple."""

    scales: Mapping[Joint, ScaleTriple]

    def __getitem__(self, joint: "Joint | str") -> ScaleTriple:
        try:
            key = Joint(joint)
        except ValueError as exc:
            raise KeyError(joint) from exc
        return self.scales[key]

    def __iter__(self) -> Iterator[Joint]:
        return iter(self.scales)

    def __len__(self) -> int:
        return len(self.scales)

    def as_array(self) -> np.ndarray:
        """Return an ``(n_joints, 3)`` matrix in iteration order."""

        return np.asarray([self.scales[joint] for joint in self.scales], dtype=float).reshape(-1, 3)

    def as_dict(self) -> dict[str, list[float]]:
        return {joint.value: list(triple) for joint, triple in self.scales.items()}


def resolve_joint_scales(scale: ScaleVector) -> JointScaleMap:
    """Resolve the per-joint scale triples for an archetype scale vector."""

    scales: dict[Joint, ScaleTriple] = {}
    for binding in JOINT_BINDINGS:
        triple = binding.triple(getattr(scale, binding.dimension))
        for joint in binding.joints:
            scales[joint] = triple
    return JointScaleMap(MappingProxyType(scales))
