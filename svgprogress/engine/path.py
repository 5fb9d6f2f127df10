"""PathAnimator — animates a path's visible length through stroke-dashoffset.

The dash array is set to the full path length, so an offset of ``length``
hides the stroke and an offset of 0 shows all of it. Progress p maps to
offset ``length - p * length``.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, Callable

from svgpathtools import parse_path

from svgprogress.engine.config import AnimationConfig
from svgprogress.engine.easing import get_easing
from svgprogress.engine.scheduler import FrameScheduler, get_default_scheduler
from svgprogress.engine.tween import State, Tweenable, interpolate
from svgprogress.utils.math_helpers import check_progress, format_number
from svgprogress.utils.merge import deep_merge

logger = logging.getLogger(__name__)


def path_length(d: str) -> float:
    """Total length of an SVG path description, in user units."""
    if not d.strip():
        return 0.0
    return float(parse_path(d).length())


class PathAnimator:
    """Binds one tween engine to one path element."""

    def __init__(
        self,
        path: ET.Element,
        options: Mapping[str, Any] | None = None,
        *,
        attachment: Any = None,
        scheduler: FrameScheduler | None = None,
        config: AnimationConfig | None = None,
        reset: bool = True,
    ) -> None:
        self.path = path
        self._config = config or AnimationConfig.from_settings()
        self._opts = deep_merge(
            {
                "duration": self._config.duration_ms,
                "easing": self._config.easing,
                "from": {},
                "to": {},
                "step": None,
                "shape": None,
            },
            options,
        )
        self._attachment = attachment
        self._scheduler = scheduler or get_default_scheduler()
        self._tweenable = Tweenable(self._scheduler)
        self._length = path_length(path.get("d", ""))
        self._progress = 0.0

        length = format_number(self._length)
        self.path.set("stroke-dasharray", f"{length} {length}")
        # With reset=False the owner runs the first set(0) itself
        if reset:
            self.set(0)

    @property
    def length(self) -> float:
        return self._length

    @property
    def scheduler(self) -> FrameScheduler:
        """The frame clock driving this animator's tweens."""
        return self._scheduler

    def value(self) -> float:
        """Last committed progress."""
        return self._progress

    def is_animating(self) -> bool:
        return self._tweenable.is_playing()

    def set(self, progress: float) -> None:
        """Apply progress immediately, cancelling any running tween."""
        progress = check_progress(progress)
        self.stop()
        self._write_offset(self._progress_to_offset(progress))
        self._progress = progress

        step = self._opts["step"]
        if callable(step):
            easing = get_easing(self._opts["easing"])
            values = interpolate(self._opts["from"], self._opts["to"], progress, easing)
            step(values, self._opts["shape"] or self, self._attachment)

    def stop(self) -> None:
        """Cancel the running tween, leaving the path where it is."""
        self._tweenable.stop()

    def animate(
        self,
        progress: float,
        opts: Mapping[str, Any] | Callable[[], None] | None = None,
        callback: Callable[[], None] | None = None,
    ) -> None:
        """Tween from the current offset to ``progress``. Returns immediately.

        ``callback`` runs once when the tween completes. A stopped or
        superseded tween never calls back.
        """
        if callable(opts) and callback is None:
            callback, opts = opts, None
        progress = check_progress(progress)

        passed = dict(opts or {})
        merged = deep_merge(self._opts, passed)
        easing = get_easing(merged["easing"])
        values = self._resolve_from_and_to(progress, easing, merged, passed)

        self.stop()

        offset = self._current_offset()
        new_offset = self._progress_to_offset(progress)
        reference = merged["shape"] or self
        step = merged["step"]

        def on_step(state: State) -> None:
            self._write_offset(state["offset"])
            self._progress = self._offset_to_progress(state["offset"])
            if callable(step):
                step(state, reference, self._attachment)

        def on_finish(state: State) -> None:
            self._write_offset(new_offset)
            self._progress = progress
            logger.debug("Animation finished at %.4f", progress)
            if callback is not None:
                callback()

        logger.debug(
            "Animating %.4f -> %.4f over %sms (%s)",
            self._progress, progress, merged["duration"], merged["easing"],
        )
        self._tweenable.tween(
            {**values["from"], "offset": offset},
            {**values["to"], "offset": new_offset},
            duration=float(merged["duration"]),
            easing=easing,
            step=on_step,
            finish=on_finish,
        )

    def _resolve_from_and_to(
        self,
        progress: float,
        easing: Callable[[float], float],
        merged: Mapping[str, Any],
        passed: Mapping[str, Any],
    ) -> dict[str, State]:
        # A call that names both ends wins outright
        if passed.get("from") and passed.get("to"):
            return {"from": dict(passed["from"]), "to": dict(passed["to"])}
        return {
            "from": interpolate(merged["from"], merged["to"], self._progress, easing),
            "to": interpolate(merged["from"], merged["to"], progress, easing),
        }

    def _current_offset(self) -> float:
        raw = self.path.get("stroke-dashoffset")
        return float(raw) if raw is not None else self._length

    def _write_offset(self, offset: float) -> None:
        self.path.set("stroke-dashoffset", format_number(offset))

    def _progress_to_offset(self, progress: float) -> float:
        return self._length - progress * self._length

    def _offset_to_progress(self, offset: float) -> float:
        if self._length <= 0:
            return self._progress
        progress = 1 - offset / self._length
        return round(min(max(progress, 0.0), 1.0), self._config.value_precision)
