"""
Engineering constants for gear profile calculations.

This module centralizes the numerical constants used by the calculator,
the profile builders and the exporters. Each constant is documented with
its source (ISO standard or the behaviour the profile outlines rely on).

MODIFICATION GUIDELINES:
- Never change ISO constants without updating the standard reference
- Add new constants here rather than hardcoding in functions
- Lengths are unit-agnostic (mm or in, whatever the GearSpec uses)

Constants are grouped by category:
- ISO 53: Standard basic rack tooth proportions
- ISO 54: Standard modules
- Geometry clamps: Floors that keep radii and curves drawable
- Rack: Rack outline construction
- Output: Display and export rounding
"""

from typing import Tuple

# =============================================================================
# ISO 53 - Full-depth tooth proportions
# =============================================================================

# Addendum = 1.0 × module
ADDENDUM_FACTOR: float = 1.0

# Dedendum = 1.25 × module (addendum + 0.25 × module bottom clearance)
DEDENDUM_FACTOR: float = 1.25

# Standard pressure angles
STANDARD_PRESSURE_ANGLES_DEG: Tuple[float, ...] = (14.5, 20.0, 25.0)

# Undercut limit without profile shift: z_min = 2 / sin²(α)
UNDERCUT_NUMERATOR: float = 2.0

# =============================================================================
# ISO 54 - Standard Modules (mm)
# =============================================================================

STANDARD_MODULES_MM: Tuple[float, ...] = (
    0.3, 0.4, 0.5, 0.6, 0.7, 0.75, 0.8, 0.9, 1.0,
    1.125, 1.25, 1.375, 1.5, 1.75, 2.0, 2.25, 2.5, 2.75,
    3.0, 3.5, 4.0, 4.5, 5.0, 5.5, 6.0, 7.0, 8.0, 9.0, 10.0,
    11.0, 12.0, 14.0, 16.0, 18.0, 20.0, 22.0, 25.0
)

# Relative deviation (percent) below which a module counts as standard
MODULE_STANDARD_TOLERANCE_PERCENT: float = 0.1

# =============================================================================
# Geometry Clamps
# =============================================================================

# Smallest root (external) / tip (internal) diameter; keeps radii positive
MIN_DIAMETER: float = 0.001

# Arcs use at least this many steps (or samples // 2 when larger)
MIN_ARC_STEPS: int = 10

# =============================================================================
# Rack
# =============================================================================

# Module used when a rack spec has no usable pitch diameter / tooth count
RACK_FALLBACK_MODULE: float = 2.0

# Backing plate depth below the root line = factor × dedendum
RACK_BACKING_FACTOR: float = 1.2
RACK_MIN_BACKING: float = 0.0001

# Consecutive outline points closer than this are merged
RACK_DEDUP_TOLERANCE: float = 1e-6

# Extra tooth periods generated past the rack length
RACK_EXTRA_PERIODS: int = 2
RACK_MIN_PERIODS: int = 2

# Racks needing more tooth periods than this are not drawn
RACK_MAX_PERIODS: int = 100_000

# =============================================================================
# Internal (ring) gear solid
# =============================================================================

# Rim outside the root circle = factor × dedendum
RING_RIM_FACTOR: float = 1.0

# =============================================================================
# Output
# =============================================================================

# Placeholder shown for non-finite values
NO_VALUE: str = "—"

# Decimal places written to DXF vertex coordinates
DXF_DECIMALS: int = 3

# Default DXF layer base name (layers are <base>_<index>)
DXF_DEFAULT_LAYER: str = "GEAR"
