"""Easing registry — every easing is a plain function of t in [0, 1].

Usage:
    @easing("easeInQuad")
    def ease_in_quad(t: float) -> float:
        return t * t

Names are camelCase. snake_case spellings resolve to the same function.
"""

from __future__ import annotations

import math
from typing import Callable

EasingFn = Callable[[float], float]

_EASINGS: dict[str, EasingFn] = {}

# Short names map to the cubic family
_ALIASES = {
    "easeIn": "easeInCubic",
    "easeOut": "easeOutCubic",
    "easeInOut": "easeInOutCubic",
    "bounce": "easeOutBounce",
}


def easing(name: str):
    """Decorator to register an easing function."""

    def decorator(fn: EasingFn) -> EasingFn:
        if name in _EASINGS:
            raise ValueError(f"Duplicate easing: {name}")
        _EASINGS[name] = fn
        return fn

    return decorator


def get_easing(name: str | EasingFn) -> EasingFn:
    """Resolve an easing name (or pass a callable through)."""
    if callable(name):
        return name
    key = _camel_case(name)
    key = _ALIASES.get(key, key)
    try:
        return _EASINGS[key]
    except KeyError:
        raise ValueError(f"Unknown easing: {name!r}") from None


def easing_names() -> list[str]:
    return sorted([*_EASINGS, *_ALIASES])


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@easing("linear")
def linear(t: float) -> float:
    return t


@easing("easeInQuad")
def ease_in_quad(t: float) -> float:
    return t * t


@easing("easeOutQuad")
def ease_out_quad(t: float) -> float:
    return t * (2 - t)


@easing("easeInOutQuad")
def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


@easing("easeInCubic")
def ease_in_cubic(t: float) -> float:
    return t ** 3


@easing("easeOutCubic")
def ease_out_cubic(t: float) -> float:
    return (t - 1) ** 3 + 1


@easing("easeInOutCubic")
def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t ** 3
    return (t - 1) * (2 * t - 2) ** 2 + 1


@easing("easeInSine")
def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


@easing("easeOutSine")
def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


@easing("easeInOutSine")
def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


@easing("easeOutBounce")
def ease_out_bounce(t: float) -> float:
    # Four parabolic segments, each 1/2.75 of the timeline wide
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


@easing("easeInBounce")
def ease_in_bounce(t: float) -> float:
    return 1 - ease_out_bounce(1 - t)
