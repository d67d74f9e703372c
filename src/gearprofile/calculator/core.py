"""
Gear Profile Calculator - Core Calculations

Pure mathematical functions deriving standard gear dimensions from a
GearSpec. Returns typed GearDimensions models.

Nothing here raises for numeric input: division by zero and trigonometry
of non-finite angles follow IEEE semantics (inf / nan) so that bad input
shows up as non-finite dimensions rather than an exception.

Reference standards:
- ISO 53 (basic rack tooth proportions)
- ISO 54 (standard modules)
"""

import math
from typing import Union

from ..enums import GearType
from ..io.loaders import GearSpec, GearDimensions
from .constants import (
    ADDENDUM_FACTOR,
    DEDENDUM_FACTOR,
    MIN_DIAMETER,
    MODULE_STANDARD_TOLERANCE_PERCENT,
    RACK_FALLBACK_MODULE,
    STANDARD_MODULES_MM,
    UNDERCUT_NUMERATOR,
)

# ISO 54 / DIN 780 standard modules (mm)
STANDARD_MODULES = list(STANDARD_MODULES_MM)


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics (x/0 -> ±inf, 0/0 -> nan)."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _cos(angle: float) -> float:
    return math.cos(angle) if math.isfinite(angle) else math.nan


def _sin(angle: float) -> float:
    return math.sin(angle) if math.isfinite(angle) else math.nan


def _ceil(value: float) -> Union[int, float]:
    """Ceil to int, passing non-finite values through."""
    return math.ceil(value) if math.isfinite(value) else value


def nearest_standard_module(module: float) -> float:
    """Find nearest ISO standard module"""
    return min(STANDARD_MODULES, key=lambda m: abs(m - module))


def is_standard_module(module: float, tolerance_percent: float = MODULE_STANDARD_TOLERANCE_PERCENT) -> bool:
    """Check if module is a standard value (within tolerance_percent)"""
    nearest = nearest_standard_module(module)
    return abs(module - nearest) / nearest * 100 < tolerance_percent


def calculate_minimum_teeth(pressure_angle_deg: float) -> Union[int, float]:
    """
    Minimum tooth count without undercut (no profile shift).

    Formula: z_min = ceil(2 / sin²(α))

    Args:
        pressure_angle_deg: Pressure angle in degrees

    Returns:
        Minimum number of teeth; inf/nan for degenerate angles
    """
    sin_alpha = _sin(math.radians(pressure_angle_deg))
    return _ceil(_div(UNDERCUT_NUMERATOR, sin_alpha ** 2))


def calculate_module(
    gear_type: GearType,
    pitch_diameter: float,
    num_teeth: int
) -> float:
    """
    Module from pitch diameter and tooth count.

    Racks have no pitch circle of their own; they still take D/N when both
    are usable and otherwise fall back to a 2-unit module.
    """
    if gear_type == GearType.RACK:
        if math.isfinite(pitch_diameter) and num_teeth > 0:
            return pitch_diameter / num_teeth
        return RACK_FALLBACK_MODULE
    return _div(pitch_diameter, num_teeth)


def calculate_dimensions(spec: GearSpec) -> GearDimensions:
    """
    Derive the standard dimensions of a gear or rack.

    Args:
        spec: Gear design parameters

    Returns:
        GearDimensions. For internal gears outside_diameter is the outer root
        circle and root_diameter the inner tip circle.
    """
    gear_type = spec.type
    N = spec.num_teeth
    D = spec.pitch_diameter
    phi = spec.pressure_angle

    m = calculate_module(gear_type, D, N)
    p = math.pi * m

    # Overrides only count when positive
    a = spec.addendum if spec.addendum is not None and spec.addendum > 0 else ADDENDUM_FACTOR * m
    b = spec.dedendum if spec.dedendum is not None and spec.dedendum > 0 else DEDENDUM_FACTOR * m

    # Tooth thickness at the pitch circle; backlash thins it, never below zero
    s0 = p / 2
    s = max(0.0, s0 - spec.backlash)
    if math.isnan(s0 - spec.backlash):
        s = math.nan

    Db = 0.0 if gear_type == GearType.RACK else D * _cos(phi)

    # External: tips outward
    Do_ext = D + 2 * a
    Dr_ext = max(MIN_DIAMETER, D - 2 * b)

    # Internal (ring): tips point at the centre, so the tip circle is the small one
    Dt_int = max(MIN_DIAMETER, D - 2 * a)
    Dro_int = D + 2 * b

    # max() swallows nan; keep it visible
    if math.isnan(D - 2 * b):
        Dr_ext = math.nan
    if math.isnan(D - 2 * a):
        Dt_int = math.nan

    n_min = calculate_minimum_teeth(spec.pressure_angle_deg)
    undercut_risk = gear_type != GearType.RACK and N < n_min

    if gear_type == GearType.INTERNAL:
        Do, Dr = Dro_int, Dt_int
    else:
        Do, Dr = Do_ext, Dr_ext

    return GearDimensions(
        type=gear_type,
        units=spec.units,
        num_teeth=N,
        pitch_diameter=D,
        pressure_angle_deg=spec.pressure_angle_deg,
        backlash=spec.backlash,
        rack_length=spec.rack_length,
        thickness=spec.thickness,
        module=m,
        circular_pitch=p,
        addendum=a,
        dedendum=b,
        tooth_thickness_nominal=s0,
        tooth_thickness=s,
        base_diameter=Db,
        outside_diameter=Do,
        root_diameter=Dr,
        external_outside_diameter=Do_ext,
        external_root_diameter=Dr_ext,
        internal_tip_diameter=Dt_int,
        internal_root_diameter=Dro_int,
        undercut_risk=bool(undercut_risk),
        min_teeth_no_undercut=n_min,
    )
