"""Session pipelines combining body-shape and sizing stages."""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple

__all__ = [
    "FittingResult",
    "fit_profile",
    "fit_profile_main",
    "save_fit",
]

_LAZY_IMPORTS: Dict[str, Tuple[str, str]] = {
    "FittingResult": ("bodyfit.pipelines.fit_from_profile", "FittingResult"),
    "fit_profile": ("bodyfit.pipelines.fit_from_profile", "fit_profile"),
    "fit_profile_main": ("bodyfit.pipelines.fit_from_profile", "main"),
    "save_fit": ("bodyfit.pipelines.fit_from_profile", "save_fit"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attribute = _LAZY_IMPORTS[name]
    except KeyError as exc:
        raise AttributeError(f"module 'bodyfit.pipelines' has no attribute {name!r}") from exc

    module = import_module(module_name)
    value = getattr(module, attribute)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(__all__)
