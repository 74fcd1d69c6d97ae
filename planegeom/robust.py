"""
Robust orientation predicate for triples of points in the plane.

The determinant is first evaluated in ordinary floating point, and that value is trusted only
when its magnitude exceeds a static bound on the accumulated rounding error (the first stage
of Shewchuk's adaptive orient2d). When the bound can't certify the sign, the determinant is
recomputed exactly, with the coordinates lifted to rationals, and then rounded once.
"""

from fractions import Fraction
import logging
import math
import sys
from typing import Sequence

__all__ = ["CCW_ERROR_BOUND", "orient2d"]

# Half the machine epsilon, i.e. the relative error bound of a single rounded operation.
_ROUNDOFF = sys.float_info.epsilon / 2
CCW_ERROR_BOUND = (3.0 + 16.0 * _ROUNDOFF) * _ROUNDOFF

# Below this, products may have lost precision to underflow, which the error bound doesn't account for.
_UNDERFLOW_GUARD = sys.float_info.min / _ROUNDOFF

# Smallest positive (subnormal) double, for a nonzero exact result which rounds to zero.
_TINIEST = math.ulp(0.0)


def orient2d(pa: Sequence[float], pb: Sequence[float], pc: Sequence[float]) -> float:
    """
    Twice the signed area of the triangle (pa, pb, pc).

    Parameters
    ----------
    pa, pb, pc : Sequence[float]
        The (x, y) coordinates of the three points

    Returns
    -------
    float
        Positive when the points occur in counter-clockwise order, negative when clockwise,
        and exactly zero when they're collinear. The sign is always correct; the magnitude is
        approximate unless the exact fallback was used, and is infinite when the exact value
        exceeds the float range. Non-finite inputs give NaN or infinity.
    """
    detleft = (pa[0] - pc[0]) * (pb[1] - pc[1])
    detright = (pa[1] - pc[1]) * (pb[0] - pc[0])
    det = detleft - detright

    if not math.isfinite(det):
        # Finite coordinates whose differences or products overflow still have a well-defined sign.
        if all(math.isfinite(v) for v in (pa[0], pa[1], pb[0], pb[1], pc[0], pc[1])):
            return _orient2d_exact(pa, pb, pc)
        return det

    if abs(detleft) < _UNDERFLOW_GUARD and abs(detright) < _UNDERFLOW_GUARD:
        return _orient2d_exact(pa, pb, pc)

    if detleft > 0:
        if detright <= 0:
            return det
        detsum = detleft + detright
    elif detleft < 0:
        if detright >= 0:
            return det
        detsum = -detleft - detright
    else:
        return det

    if not math.isfinite(detsum):
        return _orient2d_exact(pa, pb, pc)
    errbound = CCW_ERROR_BOUND * detsum
    if det >= errbound or -det >= errbound:
        return det
    return _orient2d_exact(pa, pb, pc)


def _orient2d_exact(pa: Sequence[float], pb: Sequence[float], pc: Sequence[float]) -> float:
    ax, ay = _lift(pa[0]), _lift(pa[1])
    bx, by = _lift(pb[0]), _lift(pb[1])
    cx, cy = _lift(pc[0]), _lift(pc[1])
    det = (ax - cx) * (by - cy) - (ay - cy) * (bx - cx)
    logging.debug("Orientation undecided by error bound; exact determinant: %s", det)
    if det == 0:
        return 0.0
    try:
        approx = float(det)
    except OverflowError:
        return math.inf if det > 0 else -math.inf
    if approx == 0.0:
        return _TINIEST if det > 0 else -_TINIEST
    return approx


def _lift(value: float) -> Fraction:
    # numpy's narrower floats aren't accepted by the Fraction constructor.
    return Fraction(value) if isinstance(value, (int, float, Fraction)) else Fraction(float(value))
