"""
Rack tooth outline.

The rack is built as one closed outline: a monotonic left-to-right tooth
profile over the requested length, closed underneath by a flat backing
plate. Coordinates are y-up with the pitch line at ``origin[1]``; tips sit
at +addendum and roots at -dedendum.
"""

import logging
import math
from typing import List, Optional

from ..calculator.constants import (
    RACK_BACKING_FACTOR,
    RACK_DEDUP_TOLERANCE,
    RACK_EXTRA_PERIODS,
    RACK_MAX_PERIODS,
    RACK_MIN_BACKING,
    RACK_MIN_PERIODS,
)
from ..io.loaders import GearDimensions
from .outline import Point, Polyline, is_drawable

logger = logging.getLogger(__name__)


def _same(a: Point, b: Point) -> bool:
    return abs(a[0] - b[0]) <= RACK_DEDUP_TOLERANCE and abs(a[1] - b[1]) <= RACK_DEDUP_TOLERANCE


def _same_x(a: Point, b: Point) -> bool:
    return abs(a[0] - b[0]) <= RACK_DEDUP_TOLERANCE


def _clean(points: List[Point]) -> Polyline:
    """
    Drop repeated points, then keep only the ends of each vertical run.

    Clamping at the rack ends can stack several points on one x; only the
    lowest-to-highest extent of such a run is needed.
    """
    deduped: Polyline = []
    for p in points:
        if not deduped or not _same(deduped[-1], p):
            deduped.append(p)

    cleaned: Polyline = []
    for i, p in enumerate(deduped):
        if 0 < i < len(deduped) - 1 and _same_x(deduped[i - 1], p) and _same_x(p, deduped[i + 1]):
            continue
        cleaned.append(p)
    return cleaned


def build_rack_top(dims: GearDimensions, origin: Point = (0.0, 0.0)) -> Optional[Polyline]:
    """
    Tooth profile of the rack from x0 to x0 + rack_length.

    Returns:
        Points in non-decreasing x, starting and ending on the root line,
        or None when the dimensions cannot be drawn
    """
    p = dims.circular_pitch
    L = dims.rack_length
    a = dims.addendum
    b = dims.dedendum
    phi = dims.pressure_angle

    if not is_drawable(p, L, a, b) or not (0 < phi < math.pi / 2) \
            or not math.isfinite(dims.tooth_thickness):
        logger.warning(f"Cannot build rack outline: p={p}, L={L}, a={a}, b={b}")
        return None

    x0, y = origin
    x1 = x0 + L
    y_tip = y + a
    y_root = y - b
    h = a + b
    half = dims.tooth_thickness / 2

    # Horizontal run of a flank from root to tip
    run = h / math.tan(phi)

    periods = L / p
    if not periods <= RACK_MAX_PERIODS:
        logger.warning(f"Cannot build rack outline: {periods} tooth periods over L={L}")
        return None

    count = max(RACK_MIN_PERIODS, math.ceil(periods) + RACK_EXTRA_PERIODS)

    raw: List[Point] = [(x0, y_root)]
    prev_tip_r: Optional[float] = None
    prev_root_r: Optional[float] = None

    for i in range(-1, count + 1):
        xc = x0 + i * p
        tip_l = xc - half
        tip_r = xc + half
        root_l = tip_l - run
        root_r = tip_r + run

        if root_r < x0 or root_l > x1:
            continue

        if prev_root_r is not None and root_l < prev_root_r:
            # Flanks of neighbouring teeth cross above the root line: the
            # valley is where the falling and rising flanks meet
            valley_x = (prev_tip_r + tip_l) / 2
            valley_y = y_tip - (valley_x - prev_tip_r) * h / run
            raw[-1] = (valley_x, valley_y)
        else:
            raw.append((root_l, y_root))

        raw.append((tip_l, y_tip))
        raw.append((tip_r, y_tip))
        raw.append((root_r, y_root))

        prev_tip_r = tip_r
        prev_root_r = root_r

    clamped = [(min(max(x, x0), x1), py) for x, py in raw]
    top = _clean(clamped)

    if not _same(top[-1], (x1, y_root)):
        top.append((x1, y_root))
        top = _clean(top)

    return top


def build_rack_profile(dims: GearDimensions, origin: Point = (0.0, 0.0)) -> Polyline:
    """
    Closed rack outline: tooth profile plus a backing plate.

    Args:
        dims: Dimensions from calculate_dimensions() for a rack
        origin: Left end of the pitch line in world coordinates

    Returns:
        Single closed outline (the closing edge runs from the last point
        back to the first), or an empty list when the dimensions cannot be
        drawn
    """
    top = build_rack_top(dims, origin)
    if top is None:
        return []

    x0, y = origin
    x1 = x0 + dims.rack_length
    backing = max(RACK_MIN_BACKING, dims.dedendum * RACK_BACKING_FACTOR)
    y_back = y - dims.dedendum - backing

    logger.debug(f"Rack outline: {len(top)} profile points, backing {backing:.4f}")
    return top + [(x1, y_back), (x0, y_back)]
