"""Frame schedulers — the host's frame clock, made explicit.

A scheduler hands out frame callbacks ``cb(now_ms)`` and can revoke them.
Everything runs on one thread; cancellation is synchronous.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from typing import Callable, Protocol

from svgprogress.engine.config import AnimationConfig

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    def now(self) -> float: ...

    def request_frame(self, callback: FrameCallback) -> object: ...

    def cancel_frame(self, handle: object) -> None: ...


class AsyncioFrameScheduler:
    """Schedules frames on an asyncio event loop at a fixed interval."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        interval_ms: float | None = None,
    ) -> None:
        self._loop = loop
        self.interval_ms = interval_ms or AnimationConfig.from_settings().frame_interval_ms

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        # Bound lazily so a shape can be built before the loop runs
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        return self.loop.call_later(self.interval_ms / 1000.0, lambda: callback(self.now()))

    def cancel_frame(self, handle: object) -> None:
        handle.cancel()


class SteppedFrameScheduler:
    """Deterministic frame clock, advanced by hand.

    Used for headless rendering (frame export) and tests. Time starts at 0
    and only moves on advance() / run_until_idle().
    """

    def __init__(self, interval_ms: float | None = None) -> None:
        self.interval_ms = interval_ms or AnimationConfig.from_settings().frame_interval_ms
        self._now = 0.0
        self._queue: list[tuple[float, int]] = []
        self._callbacks: dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)

    def now(self) -> float:
        return self._now

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._callbacks[handle] = callback
        heapq.heappush(self._queue, (self._now + self.interval_ms, handle))
        return handle

    def cancel_frame(self, handle: object) -> None:
        self._callbacks.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def advance(self, ms: float) -> int:
        """Move the clock forward by ms, running every frame that falls due. Returns frames run."""
        target = self._now + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            if self._run_next():
                ran += 1
        self._now = target
        return ran

    def run_until_idle(self, max_frames: int = 100_000) -> int:
        """Run frames until nothing is scheduled. Returns frames run."""
        ran = 0
        while self._queue:
            if ran >= max_frames:
                raise RuntimeError(f"Scheduler still busy after {max_frames} frames")
            if self._run_next():
                ran += 1
        return ran

    def _run_next(self) -> bool:
        due, handle = heapq.heappop(self._queue)
        callback = self._callbacks.pop(handle, None)
        if callback is None:
            # Cancelled
            return False
        self._now = max(self._now, due)
        callback(self._now)
        return True


def get_default_scheduler() -> FrameScheduler:
    """Asyncio scheduler inside a running loop, otherwise a stepped one."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.debug("No running event loop; using a stepped frame scheduler")
        return SteppedFrameScheduler()
    return AsyncioFrameScheduler(loop)
