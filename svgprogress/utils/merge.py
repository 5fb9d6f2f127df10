"""Recursive option merging. No engine imports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def deep_merge(defaults: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge overrides over defaults, recursing into nested mappings.

    Neither input is mutated. Every mapping and list in the result is newly
    allocated, so two results never share nested state. Other values
    (scalars, callables, object references) are carried by reference.
    """
    merged = {key: _copy(value) for key, value in defaults.items()}
    for key, value in (overrides or {}).items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _copy(value)
    return merged


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _copy(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy(item) for item in value]
    return value
