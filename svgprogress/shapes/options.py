"""Shape options — defaults, recursive resolution, and the frozen model.

User options may be spelled camelCase (``strokeWidth``) or snake_case
(``stroke_width``). Resolution always yields a new ShapeOptions that shares
no nested state with its inputs or with other instances.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from svgprogress.config import settings
from svgprogress.utils.merge import deep_merge

# Only the documented keys are renamed; state keys inside from/to are left alone
_TOP_LEVEL_ALIASES = {
    "stroke_width": "strokeWidth",
    "trail_color": "trailColor",
    "trail_width": "trailWidth",
    "from_": "from",
}
_TEXT_ALIASES = {
    "auto_style": "autoStyle",
    "class_name": "className",
}


class TextOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    auto_style: bool = Field(default=True, alias="autoStyle")
    color: str | None = None
    value: str = ""
    class_name: str = Field(default="progressbar-text", alias="className")


class ShapeOptions(BaseModel):
    """Resolved configuration for one shape instance."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    color: str = "#555"
    stroke_width: float = Field(default=1.0, alias="strokeWidth", ge=0)
    trail_color: str | None = Field(default=None, alias="trailColor")
    trail_width: float | None = Field(default=None, alias="trailWidth", ge=0)
    fill: str | None = None
    text: TextOptions = Field(default_factory=TextOptions)

    # Forwarded to the path animator
    duration: float = Field(default=800.0, ge=0)
    easing: str | Callable[[float], float] = "linear"
    from_: Mapping[str, Any] = Field(default_factory=dict, alias="from", validate_default=True)
    to: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    step: Callable[..., Any] | None = None

    @field_validator("from_", "to", mode="after")
    @classmethod
    def _read_only_state(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        # Frozen all the way down: state mappings are read-only views
        return MappingProxyType(dict(value))

    @field_serializer("from_", "to")
    def _dump_state(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @property
    def has_trail(self) -> bool:
        return bool(self.trail_color or self.trail_width)

    def animation_options(self) -> dict[str, Any]:
        return {
            "duration": self.duration,
            "easing": self.easing,
            "from": dict(self.from_),
            "to": dict(self.to),
            "step": self.step,
        }


def default_options() -> dict[str, Any]:
    """A fresh copy of the shape defaults."""
    return {
        "color": "#555",
        "strokeWidth": 1.0,
        "trailColor": None,
        "trailWidth": None,
        "fill": None,
        "text": {
            "autoStyle": True,
            "color": None,
            "value": "",
            "className": "progressbar-text",
        },
        "duration": float(settings.default_duration_ms),
        "easing": settings.default_easing,
        "from": {},
        "to": {},
        "step": None,
    }


DEFAULT_OPTIONS: Mapping[str, Any] = default_options()


def resolve_options(
    defaults: Mapping[str, Any],
    user_options: Mapping[str, Any] | ShapeOptions | None = None,
) -> ShapeOptions:
    """Deep-merge user options over defaults into a new ShapeOptions.

    Nested mappings such as ``text`` merge key by key; scalars are replaced.
    Neither argument is mutated.
    """
    if isinstance(user_options, ShapeOptions):
        user_options = user_options.model_dump(by_alias=True)
    merged = deep_merge(_canonical_keys(defaults), _canonical_keys(user_options or {}))
    return ShapeOptions.model_validate(merged)


def _canonical_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    canonical = {_TOP_LEVEL_ALIASES.get(key, key): value for key, value in options.items()}
    text = canonical.get("text")
    if isinstance(text, Mapping):
        canonical["text"] = {_TEXT_ALIASES.get(key, key): value for key, value in text.items()}
    return canonical
