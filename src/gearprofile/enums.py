"""Type-safe enums for the gear profile calculator."""

from enum import Enum


class GearType(Enum):
    """Gear form to generate"""
    EXTERNAL = "external"  # Spur gear, teeth pointing outward
    INTERNAL = "internal"  # Ring gear, teeth pointing inward
    RACK = "rack"  # Straight rack (infinite pitch radius)


class Units(Enum):
    """Length units - affect display rounding only, the math is unit-agnostic"""
    MM = "mm"
    IN = "in"
