"""Tolerance-aware comparison and normalisation of floating-point values"""

import math

from planegeom import EPSILON

FULL_TURN = math.tau
HALF_TURN = math.pi


def feq(a: float, b: float, eps: float = EPSILON) -> bool:
    """Determine whether two values differ by no more than the given absolute tolerance."""
    return abs(a - b) <= eps


def round_to(value: float, places: int) -> float:
    """Round to a fixed number of decimal places, with ties going away from zero (unlike builtin round)."""
    if not math.isfinite(value):
        return value
    factor = 10.0 ** places
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def normalize_bearing(angle: float) -> float:
    """Wrap an angle (radians) into [0, 2*pi); a non-finite angle has no bearing, so gives NaN."""
    if not math.isfinite(angle):
        return math.nan
    wrapped = math.fmod(angle, FULL_TURN)
    if wrapped < 0:
        wrapped += FULL_TURN
    # A tiny negative remainder plus a full turn can round up to exactly one full turn.
    return 0.0 if wrapped >= FULL_TURN else wrapped
