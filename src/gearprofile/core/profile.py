"""
Profile dispatch: GearSpec in, outlines out.

Every call recomputes the dimensions and outlines from scratch; nothing is
cached between calls.
"""

import logging
from typing import List, Optional

from ..enums import GearType
from ..io.loaders import GearSpec, GearDimensions
from ..calculator.core import calculate_dimensions
from .external_gear import build_external_profile
from .internal_gear import build_internal_profile
from .outline import Point, Polyline
from .rack import build_rack_profile

logger = logging.getLogger(__name__)


def build_profile(
    spec: GearSpec,
    dims: Optional[GearDimensions] = None,
    center: Point = (0.0, 0.0)
) -> List[Polyline]:
    """
    Outlines for any gear form.

    Args:
        spec: Gear design parameters
        dims: Precomputed dimensions (calculated from spec if omitted)
        center: Gear centre, or the left end of the pitch line for racks

    Returns:
        List of closed outlines: one per tooth (gears) or a single outline
        (rack). Empty when the spec cannot be drawn.
    """
    if dims is None:
        dims = calculate_dimensions(spec)

    if spec.type == GearType.RACK:
        outline = build_rack_profile(dims, origin=center)
        return [outline] if outline else []
    if spec.type == GearType.INTERNAL:
        return build_internal_profile(dims, spec.samples, center=center)
    return build_external_profile(dims, spec.samples, center=center)
