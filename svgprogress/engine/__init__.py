"""Animation engine — easing, tweening, frame scheduling and the path animator."""

from svgprogress.engine.config import AnimationConfig
from svgprogress.engine.easing import easing, easing_names, get_easing
from svgprogress.engine.path import PathAnimator, path_length
from svgprogress.engine.scheduler import (
    AsyncioFrameScheduler,
    FrameScheduler,
    SteppedFrameScheduler,
    get_default_scheduler,
)
from svgprogress.engine.tween import Tweenable, interpolate

__all__ = [
    "AnimationConfig",
    "AsyncioFrameScheduler",
    "FrameScheduler",
    "PathAnimator",
    "SteppedFrameScheduler",
    "Tweenable",
    "easing",
    "easing_names",
    "get_default_scheduler",
    "get_easing",
    "interpolate",
    "path_length",
]
