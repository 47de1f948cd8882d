"""Utility helpers shared by the pagetree configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str) -> str:
    """Return the non-empty string stored under ``key`` or raise."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"Configuration is missing required field '{key}'."
        raise SiteConfigError(msg)
    return value


def _resolve_dir(value: object | None, *, base: Path, default: Path) -> Path:
    """Resolve a directory setting relative to the config file location."""
    if value is None:
        return default
    if not isinstance(value, str | Path):
        msg = f"Expected a path string, got {type(value).__name__}."
        raise SiteConfigError(msg)
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return base / candidate


def _coerce_bool(value: object, *, key: str, default: bool) -> bool:
    """Return ``value`` as a bool, rejecting anything but real booleans."""
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"Field '{key}' must be true or false, got {value!r}."
            raise SiteConfigError(msg)


def _coerce_mapping(value: object, *, key: str) -> dict[str, typ.Any]:
    """Return a plain dict copy of a mapping setting."""
    if value is None:
        return {}
    if not isinstance(value, cabc.Mapping):
        msg = f"Field '{key}' must be a mapping, got {type(value).__name__}."
        raise SiteConfigError(msg)
    return dict(value)


__all__ = [
    "_coerce_bool",
    "_coerce_mapping",
    "_optional_str",
    "_require_str",
    "_resolve_dir",
]
