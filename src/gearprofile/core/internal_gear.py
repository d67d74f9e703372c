"""
Internal (ring) gear tooth-space outlines.

The ring's teeth point at the centre, so each outline bounds the space
between two teeth: flanks running from the base circle toward the inner tip
circle, a tip arc on the small circle and a root arc on the large one.

This reuses the external flank construction mirrored in scale. It is an
approximation, not the conjugate of a mating pinion.
"""

import logging
import math
from typing import List

from ..calculator.constants import MIN_ARC_STEPS
from ..io.loaders import MIN_SAMPLES, GearDimensions
from .external_gear import flank_rotation
from .involute import sample_involute
from .outline import (
    Point,
    Polyline,
    angle_of,
    arc_points,
    is_drawable,
    mirror_x,
    polar,
    replicate,
    rotate,
)

logger = logging.getLogger(__name__)


def build_internal_tooth_space(dims: GearDimensions, samples: int) -> Polyline:
    """
    Outline of a single tooth space centred on the +x axis.

    Order matches the external tooth: left flank, tip arc, right flank,
    root arc. When the tip circle lies inside the base circle the involute
    has zero length and the flank becomes a radial line from the base
    circle down to the tip circle.
    """
    samples = max(MIN_SAMPLES, samples)
    rp = dims.pitch_diameter / 2
    rb = dims.base_diameter / 2
    r_tip_inner = dims.internal_tip_diameter / 2
    r_root_outer = dims.internal_root_diameter / 2

    rot = flank_rotation(rb, rp, dims.tooth_thickness)
    involute = sample_involute(rb, r_tip_inner, samples)

    if involute.t_max > 0:
        left: List[Point] = [rotate(p, rot) for p in involute.points]
    else:
        left = [
            polar(rb + (r_tip_inner - rb) * (i / samples), rot)
            for i in range(samples + 1)
        ]

    right = mirror_x(left)

    arc_steps = max(MIN_ARC_STEPS, samples // 2)
    tip = arc_points(r_tip_inner, angle_of(left[-1]), angle_of(right[0]), arc_steps)
    root = arc_points(r_root_outer, angle_of(right[-1]), angle_of(left[0]), arc_steps)

    return left + tip + right + root


def build_internal_profile(
    dims: GearDimensions,
    samples: int,
    center: Point = (0.0, 0.0)
) -> List[Polyline]:
    """
    Closed tooth-space outlines for an internal (ring) gear.

    Args:
        dims: Dimensions from calculate_dimensions() for an internal gear
        samples: Flank samples (>= 12)
        center: Gear centre in world coordinates

    Returns:
        num_teeth closed outlines in tooth index order, or an empty list
        when the dimensions cannot be drawn
    """
    N = dims.num_teeth
    if N <= 0 or not is_drawable(
        dims.pitch_diameter,
        dims.base_diameter,
        dims.internal_tip_diameter,
        dims.internal_root_diameter,
    ) or not math.isfinite(dims.tooth_thickness):
        logger.warning(
            f"Cannot build internal gear outline: N={N}, D={dims.pitch_diameter}, "
            f"Db={dims.base_diameter}"
        )
        return []

    space = build_internal_tooth_space(dims, samples)
    logger.debug(f"Internal tooth space: {len(space)} points, replicating {N} times")
    return replicate(space, N, center)
