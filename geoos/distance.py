"""Spherical distances between longitude/latitude points, in degrees."""

from __future__ import annotations

import math
from typing import Sequence

DEGREE_RAD = math.pi / 180.0
"""Factor that turns degrees into radians."""

EARTH_R = 6371.0
"""Earth radius in kilometres."""

_SINE_B = 4 / math.pi
_SINE_C = -4 / (math.pi * math.pi)
_SINE_P = 0.225


def distance_spherical(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Return the approximate spherical distance between two points in kilometres."""
    v1 = (p1[1] - p2[1]) * DEGREE_RAD
    v2 = (p1[0] - p2[0]) * DEGREE_RAD * math.cos((p1[1] + p2[1]) / 2.0 * DEGREE_RAD)
    return EARTH_R * math.sqrt(v1 * v1 + v2 * v2)


def fast_sine(x: float) -> float:
    """Approximate sin(x) with a parabola; x must lie in [-pi, pi]."""
    if x > math.pi or x < -math.pi:
        raise ValueError(f"angle out of range [-pi, pi]: {x}")
    y = _SINE_B * x + _SINE_C * x * abs(x)
    return _SINE_P * (y * abs(y) - y) + y


def fast_cos(x: float) -> float:
    """Approximate cos(x) through fast_sine."""
    x += math.pi / 2.0
    while x > math.pi:
        x -= 2 * math.pi
    return fast_sine(x)


def distance_spherical_fast(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Return a squared distance in degrees, without the square root or Earth radius.

    Take the square root and multiply by EARTH_R * DEGREE_RAD to get kilometres.
    An empty point counts as the origin.
    """
    if len(p1) == 0:
        p1 = (0.0, 0.0)
    if len(p2) == 0:
        p2 = (0.0, 0.0)
    v1 = p1[1] - p2[1]
    v2 = (p1[0] - p2[0]) * fast_cos((p1[1] + p2[1]) / 2.0 * DEGREE_RAD)
    return v1 * v1 + v2 * v2