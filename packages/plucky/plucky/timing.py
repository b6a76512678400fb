"""Timing curves for the pull and release motions.

Both curves are total over the reals: progress past 1.0 (a late frame) or
below 0.0 is evaluated as-is rather than clamped.
"""
from __future__ import annotations

import math
from typing import Callable

PULL_BASE = 2.3
PULL_RATE = 6.0
DECAY_RATE = 5.0


def pull_ease(t: float) -> float:
    """Ease-in for the pull: ``1 - 2.3^(-6t)``. Fast rise, never quite 1."""
    try:
        return 1 - PULL_BASE ** (-PULL_RATE * t)
    except OverflowError:
        return -math.inf


def decay(t: float, decay_freq: float) -> float:
    """Damped cosine: ``e^(-5t) * cos(2*pi*decay_freq*t)``, 1.0 at t=0.

    A non-finite phase yields NaN; an envelope too large for a float
    saturates to infinity.
    """
    phase = 2 * math.pi * decay_freq * t
    if not math.isfinite(phase):
        return math.nan
    try:
        envelope = math.exp(-DECAY_RATE * t)
    except OverflowError:
        envelope = math.inf
    return envelope * math.cos(phase)


def make_linear_interpolator(start: float, end: float) -> Callable[[float], float]:
    """Map progress 0 -> 1 onto ``start`` -> ``end``."""

    def interpolate(t: float) -> float:
        return t * (end - start) + start

    return interpolate
