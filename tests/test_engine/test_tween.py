"""Tests for state interpolation and the Tweenable."""

from __future__ import annotations

import pytest

from svgprogress.engine.scheduler import SteppedFrameScheduler
from svgprogress.engine.tween import Tweenable, interpolate, parse_color


class TestInterpolate:
    def test_numbers(self):
        assert interpolate({"x": 0}, {"x": 10}, 0.25) == {"x": 2.5}

    def test_eased(self):
        assert interpolate({"x": 0}, {"x": 10}, 0.5, "easeInQuad") == {"x": 2.5}

    def test_hex_colors(self):
        assert interpolate({"c": "#000000"}, {"c": "#ffffff"}, 0.5) == {"c": "rgb(128, 128, 128)"}

    def test_short_hex_and_rgb(self):
        state = interpolate({"c": "#f00"}, {"c": "rgb(0, 0, 255)"}, 1.0)
        assert state == {"c": "rgb(0, 0, 255)"}

    def test_non_interpolable_snaps_at_end(self):
        assert interpolate({"s": "a"}, {"s": "b"}, 0.5) == {"s": "a"}
        assert interpolate({"s": "a"}, {"s": "b"}, 1.0) == {"s": "b"}

    def test_one_sided_keys(self):
        assert interpolate({"a": 1}, {"b": 2}, 0.5) == {"a": 1, "b": 2}

    def test_parse_color(self):
        assert parse_color("#fff").tolist() == [255.0, 255.0, 255.0]
        assert parse_color("rgb(1, 2, 3)").tolist() == [1.0, 2.0, 3.0]
        assert parse_color("red") is None


class TestTweenable:
    def test_runs_to_completion(self):
        clock = SteppedFrameScheduler(interval_ms=10)
        tween = Tweenable(clock)
        states, done = [], []
        tween.tween({"x": 0}, {"x": 100}, duration=50, step=lambda s: states.append(s["x"]), finish=done.append)
        assert tween.is_playing()
        clock.run_until_idle()
        assert states == pytest.approx([20, 40, 60, 80, 100])
        assert done == [{"x": 100}]
        assert not tween.is_playing()

    def test_nothing_runs_synchronously(self):
        clock = SteppedFrameScheduler(interval_ms=10)
        states = []
        Tweenable(clock).tween({"x": 0}, {"x": 1}, duration=50, step=states.append)
        assert states == []

    def test_zero_duration_completes_on_first_frame(self):
        clock = SteppedFrameScheduler(interval_ms=10)
        done = []
        Tweenable(clock).tween({"x": 0}, {"x": 1}, duration=0, finish=done.append)
        assert clock.run_until_idle() == 1
        assert done == [{"x": 1}]

    def test_stop_cancels_future_frames(self):
        clock = SteppedFrameScheduler(interval_ms=10)
        tween = Tweenable(clock)
        states, done = [], []
        tween.tween({"x": 0}, {"x": 100}, duration=100, step=lambda s: states.append(s["x"]), finish=done.append)
        clock.advance(30)
        tween.stop()
        clock.run_until_idle()
        assert states == pytest.approx([10, 20, 30])
        assert done == []
        assert tween.state == {"x": pytest.approx(30)}

    def test_restart_supersedes_previous(self):
        clock = SteppedFrameScheduler(interval_ms=10)
        tween = Tweenable(clock)
        first, second = [], []
        tween.tween({"x": 0}, {"x": 1}, duration=50, finish=first.append)
        clock.advance(20)
        tween.tween({"x": 0}, {"x": 1}, duration=50, finish=second.append)
        clock.run_until_idle()
        assert first == []
        assert len(second) == 1

    def test_stop_from_step(self):
        clock = SteppedFrameScheduler(interval_ms=10)
        tween = Tweenable(clock)
        done = []

        def step(state):
            tween.stop()

        tween.tween({"x": 0}, {"x": 1}, duration=50, step=step, finish=done.append)
        assert clock.run_until_idle() == 1
        assert done == []
