"""Tween — timed interpolation of a flat state mapping.

Numbers interpolate linearly through the eased factor. Colours (#rgb,
#rrggbb, rgb(r, g, b)) interpolate per channel and render as rgb(...).
Anything else holds its start value and snaps to the target at the end.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from numbers import Real
from typing import Any, Callable

import numpy as np

from svgprogress.engine.easing import EasingFn, get_easing
from svgprogress.engine.scheduler import FrameScheduler

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$")

State = dict[str, Any]


def parse_color(value: str) -> np.ndarray | None:
    """RGB channels of a colour string, or None if it is not a colour."""
    text = value.strip()
    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return np.array([int(digits[i:i + 2], 16) for i in (0, 2, 4)], dtype=np.float64)
    match = _RGB_RE.match(text)
    if match:
        return np.array([float(g) for g in match.groups()], dtype=np.float64)
    return None


def _format_color(channels: np.ndarray) -> str:
    r, g, b = np.clip(np.rint(channels), 0, 255).astype(int)
    return f"rgb({r}, {g}, {b})"


def _interpolate_value(start: Any, end: Any, factor: float, position: float) -> Any:
    if isinstance(start, Real) and isinstance(end, Real) and not isinstance(start, bool):
        return start + (end - start) * factor
    if isinstance(start, str) and isinstance(end, str):
        a, b = parse_color(start), parse_color(end)
        if a is not None and b is not None:
            return _format_color(a + (b - a) * factor)
    return end if position >= 1.0 else start


def interpolate(
    from_state: Mapping[str, Any],
    to_state: Mapping[str, Any],
    position: float,
    easing: str | EasingFn = "linear",
) -> State:
    """State at ``position`` (0..1) between two states, eased.

    Keys present on only one side keep that side's value.
    """
    factor = get_easing(easing)(position)
    state: State = {}
    for key in {**from_state, **to_state}:
        if key not in to_state:
            state[key] = from_state[key]
        elif key not in from_state:
            state[key] = to_state[key]
        else:
            state[key] = _interpolate_value(from_state[key], to_state[key], factor, position)
    return state


class Tweenable:
    """Drives one tween at a time on a frame scheduler."""

    def __init__(self, scheduler: FrameScheduler) -> None:
        self._scheduler = scheduler
        self._handle: object | None = None
        # Bumped on every start/stop; frames from an older generation are dropped
        self._generation = 0
        self._playing = False
        self.state: State = {}

    def is_playing(self) -> bool:
        return self._playing

    def tween(
        self,
        from_state: Mapping[str, Any],
        to_state: Mapping[str, Any],
        duration: float,
        easing: str | EasingFn = "linear",
        step: Callable[[State], None] | None = None,
        finish: Callable[[State], None] | None = None,
    ) -> None:
        self.stop()
        self._generation += 1
        generation = self._generation
        ease = get_easing(easing)
        start_ms = self._scheduler.now()
        self.state = dict(from_state)
        self._playing = True

        def frame(now_ms: float) -> None:
            if generation != self._generation:
                return
            elapsed = now_ms - start_ms
            position = 1.0 if duration <= 0 else min(max(elapsed / duration, 0.0), 1.0)
            self.state = interpolate(from_state, to_state, position, ease)
            if step is not None:
                step(self.state)
            # step() may have stopped or restarted us
            if generation != self._generation:
                return
            if position >= 1.0:
                self._handle = None
                self._playing = False
                if finish is not None:
                    finish(self.state)
            else:
                self._handle = self._scheduler.request_frame(frame)

        self._handle = self._scheduler.request_frame(frame)

    def stop(self) -> None:
        if self._handle is not None:
            self._scheduler.cancel_frame(self._handle)
            self._handle = None
        if self._playing:
            logger.debug("Tween stopped at %s", self.state)
        self._generation += 1
        self._playing = False
