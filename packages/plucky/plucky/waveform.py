"""Bezier approximation of a sine wave, laid out in a 1x1 box.

Each half-wave is twelve horizontal steps wide and drawn as four cubic
commands: two for the rising quarter and two for the falling quarter. The
control-point heights come from the classic quarter-sine fit, scaled by the
signed amplitude of the lobe. Lobes alternate sign so consecutive
half-waves join into one continuous wave.
"""
from __future__ import annotations

import math
from typing import NamedTuple

SQRT2 = math.sqrt(2)
Y1 = (2 * SQRT2) / 7 - 1 / 7
Y2 = (4 * SQRT2) / 7 - 2 / 7
Y3 = SQRT2 / 2
Y4 = (3 * SQRT2) / 7 + 2 / 7

XD = math.pi / 12
WIDTH = 1.0
BASELINE = 1.0

# Height ratios of the twelve points in one lobe, in drawing order.
_LOBE_RATIOS = (Y1, Y2, Y3, Y4, 1.0, 1.0, 1.0, Y4, Y3, Y2, Y1, 0.0)

Point = tuple[float, float]


class CubicSegment(NamedTuple):
    c1: Point
    c2: Point
    end: Point


def wave_segments(amplitude: float, num_half_waves: int) -> list[CubicSegment]:
    """Return the cubic segments of the wave, four per half-wave.

    The first lobe is drawn with ``-amplitude`` so it rises above the
    baseline (y grows downward in the target coordinate box).
    """
    if num_half_waves <= 0:
        return []

    xd = XD * (WIDTH / (num_half_waves * math.pi))
    amp = -amplitude
    x = 0.0
    segments: list[CubicSegment] = []

    for _ in range(num_half_waves):
        points = [
            (x + (i + 1) * xd, BASELINE + amp * ratio)
            for i, ratio in enumerate(_LOBE_RATIOS)
        ]
        # the lobe always lands back on the baseline
        points[-1] = (points[-1][0], BASELINE)
        for i in range(0, len(points), 3):
            segments.append(CubicSegment(points[i], points[i + 1], points[i + 2]))
        x += WIDTH / num_half_waves
        amp = -amp

    return segments


def format_number(value: float) -> str:
    """Shortest round-trip text for ``value``; integral values drop ``.0``."""
    if value == 0:
        return "0"
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def _fmt_point(point: Point) -> str:
    return f"{format_number(point[0])}, {format_number(point[1])}"


def generate_wave_path(amplitude: float, num_half_waves: int) -> str:
    """Build the path description (``M`` + ``C`` commands) for the wave."""
    parts = [f"M {format_number(0.0)} {format_number(BASELINE)}"]
    for seg in wave_segments(amplitude, num_half_waves):
        parts.append(
            f"C {_fmt_point(seg.c1)} {_fmt_point(seg.c2)} {_fmt_point(seg.end)}"
        )
    return " ".join(parts)


def lobe_peaks(segments: list[CubicSegment]) -> list[Point]:
    """Peak point of every lobe: the end of its second segment."""
    return [seg.end for seg in segments[1::4]]
