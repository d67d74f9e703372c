"""
Solid gear geometry using build123d.

Extrudes the 2D outlines by the face width:
1. External: root-circle hub fused with the extruded teeth
2. Internal: ring blank with the tooth spaces cut out
3. Rack: the closed rack outline extruded as-is
"""

import logging
from typing import List, Optional

from build123d import (
    Part, Cylinder, Align, Pos, Vector, Wire,
    make_face, extrude,
)

from ..enums import GearType
from ..io.loaders import GearSpec, GearDimensions
from ..calculator.core import calculate_dimensions
from ..calculator.constants import RING_RIM_FACTOR
from .geometry_base import BaseGeometry
from .outline import Point, Polyline, is_drawable
from .profile import build_profile

logger = logging.getLogger(__name__)


def _prism(outline: Polyline, height: float) -> Part:
    """Extrude one closed outline along +Z."""
    wire = Wire.make_polygon([Vector(x, y, 0) for x, y in outline], close=True)
    face = make_face(wire.edges())
    return extrude(face, amount=height)


class GearSolidGeometry(BaseGeometry):
    """
    Generates a 3D solid from a gear spec.

    The solid sits on the XY plane (z from 0 to thickness) with the gear
    centre (or rack origin) at ``center``.
    """

    _part_name = "gear"

    def __init__(
        self,
        spec: GearSpec,
        dimensions: Optional[GearDimensions] = None,
        thickness: Optional[float] = None,
        center: Point = (0.0, 0.0)
    ):
        """
        Initialize solid geometry generator.

        Args:
            spec: Gear design parameters
            dimensions: Precomputed dimensions (calculated from spec if omitted)
            thickness: Face width (default: spec.thickness)
            center: Gear centre, or left end of the rack pitch line
        """
        self.spec = spec
        self.dimensions = dimensions if dimensions is not None else calculate_dimensions(spec)
        self.thickness = thickness if thickness is not None else spec.thickness
        self.center = center
        self._part_name = f"{spec.type.value} gear"

        # Cache for built geometry (avoids rebuilding on export)
        self._part = None

    def build(self) -> Part:
        """
        Build the solid.

        Returns:
            build123d Part object ready for export

        Raises:
            ValueError: If the spec produces no drawable outline or the
                thickness is not a positive length
        """
        if self._part is not None:
            return self._part

        if not is_drawable(self.thickness):
            raise ValueError(f"Thickness must be a positive length, got {self.thickness}")

        outlines = build_profile(self.spec, self.dimensions, center=self.center)
        if not outlines:
            raise ValueError(f"No drawable outline for {self.spec.type.value} spec")

        if self.spec.type == GearType.RACK:
            part = _prism(outlines[0], self.thickness)
        elif self.spec.type == GearType.INTERNAL:
            part = self._build_ring(outlines)
        else:
            part = self._build_external(outlines)

        logger.info(f"Built {self._part_name}: {len(outlines)} outline(s), thickness {self.thickness}")
        self._part = part
        return part

    def _cylinder(self, radius: float) -> Part:
        cx, cy = self.center
        return Pos(cx, cy, 0) * Cylinder(
            radius=radius,
            height=self.thickness,
            align=(Align.CENTER, Align.CENTER, Align.MIN)
        )

    def _build_external(self, teeth: List[Polyline]) -> Part:
        """Hub at the root circle plus every tooth."""
        gear = self._cylinder(self.dimensions.external_root_diameter / 2)
        for tooth in teeth:
            gear = gear + _prism(tooth, self.thickness)
        return gear

    def _build_ring(self, spaces: List[Polyline]) -> Part:
        """Ring between the tip circle and a rim outside the root circle, minus the tooth spaces."""
        dims = self.dimensions
        r_outer = dims.internal_root_diameter / 2 + RING_RIM_FACTOR * dims.dedendum
        r_bore = dims.internal_tip_diameter / 2

        # Cutters overshoot both faces for clean booleans
        extension = 0.1 * self.thickness

        ring = self._cylinder(r_outer) - self._cylinder(r_bore)
        for space in spaces:
            cutter = Pos(0, 0, -extension) * _prism(space, self.thickness + 2 * extension)
            ring = ring - cutter
        return ring
