"""
2D point helpers shared by the profile builders.

Points are plain (x, y) tuples and outlines are lists of points, so the
results can be handed to any renderer or exporter without conversion.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

Point = Tuple[float, float]
Polyline = List[Point]


def polar(radius: float, angle: float) -> Point:
    return (radius * math.cos(angle), radius * math.sin(angle))


def rotate(point: Point, angle: float) -> Point:
    """Rotate a point about the origin (counter-clockwise, radians)."""
    c, s = math.cos(angle), math.sin(angle)
    x, y = point
    return (x * c - y * s, x * s + y * c)


def translate(point: Point, dx: float, dy: float) -> Point:
    return (point[0] + dx, point[1] + dy)


def angle_of(point: Point) -> float:
    return math.atan2(point[1], point[0])


def mirror_x(points: Sequence[Point]) -> Polyline:
    """Mirror about the x axis (negate y) and reverse the order."""
    return [(x, -y) for x, y in reversed(points)]


def arc_points(radius: float, start_angle: float, end_angle: float, steps: int) -> Polyline:
    """
    Interior points of a circular arc, taking the shorter way round.

    The end points themselves are not included (they belong to the flanks
    the arc bridges), so ``steps - 1`` points are returned.
    """
    sweep = (end_angle - start_angle) % (2 * math.pi)
    if sweep > math.pi:
        sweep -= 2 * math.pi
    return [
        polar(radius, start_angle + sweep * (i / steps))
        for i in range(1, steps)
    ]


def replicate(tooth: Sequence[Point], count: int, center: Point) -> List[Polyline]:
    """Copy a tooth outline around the centre, tooth k rotated by k·2π/count."""
    cx, cy = center
    polylines = []
    for k in range(count):
        a = k * (2 * math.pi / count)
        polylines.append([translate(rotate(p, a), cx, cy) for p in tooth])
    return polylines


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounds of a set of outlines"""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


def bounding_box(polylines: Iterable[Sequence[Point]]) -> Optional[BoundingBox]:
    """Bounds of all finite points, or None when there are none."""
    xs: List[float] = []
    ys: List[float] = []
    for poly in polylines or []:
        for x, y in poly or []:
            if math.isfinite(x) and math.isfinite(y):
                xs.append(x)
                ys.append(y)
    if not xs:
        return None
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def is_drawable(*values: float) -> bool:
    """True when every value is a finite, positive length."""
    return all(math.isfinite(v) and v > 0 for v in values)
