"""Body-shape archetypes, profile validation and rig joint scaling."""

from __future__ import annotations

from importlib import import_module

__all__ = [
    "ARCHETYPES",
    "Archetype",
    "ArchetypeSpec",
    "InvalidProfileError",
    "Joint",
    "JointScaleMap",
    "Rig",
    "RigDeformationReport",
    "ScaleVector",
    "UnknownArchetypeError",
    "UnmappedJointWarning",
    "UserProfile",
    "apply_body_scales",
    "compute_overall_scale",
    "lookup_archetype",
    "lookup_scale",
    "resolve_joint_scales",
]

_ATTRIBUTE_MODULES: dict[str, str] = {
    "ARCHETYPES": ".archetypes",
    "Archetype": ".archetypes",
    "ArchetypeSpec": ".archetypes",
    "ScaleVector": ".archetypes",
    "UnknownArchetypeError": ".archetypes",
    "lookup_archetype": ".archetypes",
    "lookup_scale": ".archetypes",
    "InvalidProfileError": ".profile",
    "UserProfile": ".profile",
    "compute_overall_scale": ".profile",
    "Joint": ".joint_scales",
    "JointScaleMap": ".joint_scales",
    "resolve_joint_scales": ".joint_scales",
    "Rig": ".rig",
    "RigDeformationReport": ".rig",
    "UnmappedJointWarning": ".rig",
    "apply_body_scales": ".rig",
}


def __getattr__(name: str):
    try:
        module_name = _ATTRIBUTE_MODULES[name]
    except KeyError as exc:
        raise AttributeError(f"module 'body_shape' has no attribute {name!r}") from exc

    module = import_module(module_name, __name__)
    value = getattr(module, name)
    globals()[name] = value
    return value
