"""
External spur gear tooth outlines.

Each tooth is one closed outline: involute flank up to the tip circle, tip
arc, mirrored flank back down, and a root arc closing it. The tooth is built
about the +x axis and then copied around the gear.
"""

import logging
import math
from typing import List

from ..calculator.constants import MIN_ARC_STEPS
from ..io.loaders import MIN_SAMPLES, GearDimensions
from .involute import involute_parameter, involute_point, sample_involute
from .outline import (
    Point,
    Polyline,
    angle_of,
    arc_points,
    is_drawable,
    mirror_x,
    replicate,
    rotate,
)

logger = logging.getLogger(__name__)


def flank_rotation(rb: float, rp: float, tooth_thickness: float) -> float:
    """
    Rotation that puts the involute's pitch-circle crossing at +s/(2·rp).

    Args:
        rb: Base radius
        rp: Pitch radius
        tooth_thickness: Tooth thickness at the pitch circle

    Returns:
        Rotation angle (radians) to apply to the raw involute
    """
    theta_pitch_half = tooth_thickness / (2 * rp)
    alpha_pitch = angle_of(involute_point(rb, involute_parameter(rb, rp)))
    return theta_pitch_half - alpha_pitch


def build_external_tooth(dims: GearDimensions, samples: int) -> Polyline:
    """
    Outline of a single tooth centred on the +x axis.

    Order: left flank (root to tip), tip arc, right flank (tip to root),
    root arc. Point count is 2·(samples + 1) + 2·(arc_steps - 1).
    """
    samples = max(MIN_SAMPLES, samples)
    rp = dims.pitch_diameter / 2
    rb = dims.base_diameter / 2
    ra = dims.external_outside_diameter / 2
    rr = dims.external_root_diameter / 2

    # A root circle outside the base circle means the flank starts at the root
    r_start = max(rr, rb)

    involute = sample_involute(rb, ra, samples)
    rot = flank_rotation(rb, rp, dims.tooth_thickness)

    left: List[Point] = [rotate(p, rot) for p in involute.points]
    left[0] = rotate(involute_point(rb, involute_parameter(rb, r_start)), rot)

    right = mirror_x(left)

    arc_steps = max(MIN_ARC_STEPS, samples // 2)
    tip = arc_points(ra, angle_of(left[-1]), angle_of(right[0]), arc_steps)
    root = arc_points(rr, angle_of(right[-1]), angle_of(left[0]), arc_steps)

    return left + tip + right + root


def build_external_profile(
    dims: GearDimensions,
    samples: int,
    center: Point = (0.0, 0.0)
) -> List[Polyline]:
    """
    Closed tooth outlines for an external spur gear.

    Args:
        dims: Dimensions from calculate_dimensions()
        samples: Involute samples per flank (>= 12)
        center: Gear centre in world coordinates

    Returns:
        num_teeth closed outlines in tooth index order, or an empty list
        when the dimensions cannot be drawn
    """
    N = dims.num_teeth
    if N <= 0 or not is_drawable(
        dims.pitch_diameter,
        dims.base_diameter,
        dims.external_outside_diameter,
        dims.external_root_diameter,
    ) or not math.isfinite(dims.tooth_thickness):
        logger.warning(
            f"Cannot build external gear outline: N={N}, D={dims.pitch_diameter}, "
            f"Db={dims.base_diameter}"
        )
        return []

    tooth = build_external_tooth(dims, samples)
    logger.debug(f"External tooth: {len(tooth)} points, replicating {N} times")
    return replicate(tooth, N, center)
