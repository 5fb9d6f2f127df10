"""Number helpers shared by geometry and animation. No engine imports."""

from __future__ import annotations

import math

# Six decimals is well below one device pixel for any 0..100 viewBox.
_DECIMALS = 6


def format_number(value: float, decimals: int = _DECIMALS) -> str:
    """Compact decimal for SVG attributes: 1.0 -> "1", 0.50 -> "0.5"."""
    text = f"{value:.{decimals}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def check_progress(progress: float) -> float:
    """Validate a progress value and return it as a float."""
    value = float(progress)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValueError(f"Progress must be within [0, 1], got {progress!r}")
    return value
