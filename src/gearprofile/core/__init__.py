"""
Gearprofile Core - Pure geometry generation engine.

Turns gear dimensions into tooth outlines (lists of (x, y) points) and,
when build123d is installed, into extruded solids.

Example:
    >>> from gearprofile.core import build_profile
    >>> from gearprofile.io import GearSpec
    >>>
    >>> spec = GearSpec(type="external", num_teeth=20, pitch_diameter=40)
    >>> teeth = build_profile(spec)
    >>> len(teeth)
    20
"""

# Outline builders are pure Python (no build123d dependency)
from .outline import Point, Polyline, BoundingBox, bounding_box
from .involute import InvoluteSample, involute_point, involute_parameter, sample_involute
from .external_gear import build_external_profile, build_external_tooth
from .internal_gear import build_internal_profile, build_internal_tooth_space
from .rack import build_rack_profile, build_rack_top
from .profile import build_profile

__all__ = [
    # Outline types
    "Point",
    "Polyline",
    "BoundingBox",
    "bounding_box",

    # Involute sampling
    "InvoluteSample",
    "involute_point",
    "involute_parameter",
    "sample_involute",

    # Profile builders
    "build_external_profile",
    "build_external_tooth",
    "build_internal_profile",
    "build_internal_tooth_space",
    "build_rack_profile",
    "build_rack_top",
    "build_profile",
]

# Solid geometry requires build123d - make import conditional
# This keeps the calculator and outline builders usable without it
try:
    from .solid import GearSolidGeometry

    __all__.append("GearSolidGeometry")
except ImportError:
    pass
