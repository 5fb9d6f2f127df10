"""Animation configuration — tunables for the path animator and schedulers."""

from __future__ import annotations

from dataclasses import dataclass

from svgprogress.config import settings


@dataclass
class AnimationConfig:
    """Controls tween timing and how progress is read back from the path."""

    # Tween defaults, overridable per shape and per animate() call
    duration_ms: float = 800.0
    easing: str = "linear"

    # Frames per second for the built-in schedulers
    frame_rate: int = 60

    # Decimal places kept when progress is derived from the dash offset
    value_precision: int = 6

    @property
    def frame_interval_ms(self) -> float:
        return 1000.0 / self.frame_rate

    @classmethod
    def from_settings(cls) -> AnimationConfig:
        return cls(
            duration_ms=float(settings.default_duration_ms),
            easing=settings.default_easing,
            frame_rate=settings.frame_rate,
        )
