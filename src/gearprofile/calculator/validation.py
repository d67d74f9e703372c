"""
Gear Profile Calculator - Validation Rules

Engineering validation of a gear spec and its derived dimensions.

The calculator itself never rejects input: it clamps silently and lets
non-finite values propagate. This module is where those situations are
reported, as messages the caller can display next to the dimensions.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..enums import GearType, Units
from ..io.loaders import GearSpec, GearDimensions
from .constants import MIN_DIAMETER, STANDARD_PRESSURE_ANGLES_DEG
from .core import calculate_dimensions, is_standard_module, nearest_standard_module


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_spec(spec: GearSpec, dims: Optional[GearDimensions] = None) -> ValidationResult:
    """
    Validate a gear spec against engineering rules.

    Args:
        spec: Gear design parameters
        dims: Precomputed dimensions (calculated from spec if omitted)

    Returns:
        ValidationResult with all findings
    """
    if dims is None:
        dims = calculate_dimensions(spec)

    messages: List[ValidationMessage] = []

    messages.extend(_validate_inputs(spec))
    messages.extend(_validate_finite(dims))
    messages.extend(_validate_pressure_angle(spec))
    messages.extend(_validate_backlash(spec, dims))
    messages.extend(_validate_overrides(spec))
    messages.extend(_validate_module(spec, dims))

    if spec.type == GearType.RACK:
        messages.extend(_validate_rack(spec))
    else:
        messages.extend(_validate_undercut(dims))
        messages.extend(_validate_radii(spec, dims))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def _validate_inputs(spec: GearSpec) -> List[ValidationMessage]:
    """Check tooth count and pitch diameter can define a gear"""
    messages = []
    if spec.type == GearType.RACK:
        return messages

    if spec.num_teeth <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="TEETH_COUNT_INVALID",
            message=f"Tooth count must be positive, got {spec.num_teeth}",
            suggestion="Enter the number of teeth on the gear"
        ))

    D = spec.pitch_diameter
    if not math.isfinite(D) or D <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PITCH_DIAMETER_INVALID",
            message=f"Pitch diameter must be a positive number, got {D}",
            suggestion="Pitch diameter = module × number of teeth"
        ))

    return messages


def _validate_finite(dims: GearDimensions) -> List[ValidationMessage]:
    """Report derived dimensions that came out inf/nan"""
    names = [
        "module", "circular_pitch", "addendum", "dedendum",
        "tooth_thickness", "base_diameter", "outside_diameter", "root_diameter",
    ]
    bad = [name for name in names if not math.isfinite(getattr(dims, name))]
    if not bad:
        return []
    return [ValidationMessage(
        severity=Severity.ERROR,
        code="NON_FINITE_DIMENSIONS",
        message=f"Derived dimensions are not finite: {', '.join(bad)}",
        suggestion="Check tooth count, pitch diameter and pressure angle"
    )]


def _validate_pressure_angle(spec: GearSpec) -> List[ValidationMessage]:
    """Check pressure angle is usable and standard"""
    alpha = spec.pressure_angle_deg

    if not (0 < alpha < 90):
        return [ValidationMessage(
            severity=Severity.ERROR,
            code="PRESSURE_ANGLE_OUT_OF_RANGE",
            message=f"Pressure angle {alpha}° must be between 0° and 90°",
            suggestion="Use 20° (standard) unless matching an existing gear"
        )]

    if alpha not in STANDARD_PRESSURE_ANGLES_DEG:
        return [ValidationMessage(
            severity=Severity.INFO,
            code="PRESSURE_ANGLE_NON_STANDARD",
            message=f"Pressure angle {alpha}° is non-standard",
            suggestion="Standard values are 14.5°, 20° and 25°"
        )]

    return []


def _validate_backlash(spec: GearSpec, dims: GearDimensions) -> List[ValidationMessage]:
    """Check backlash is non-negative and leaves some tooth"""
    messages = []

    if spec.backlash < 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="BACKLASH_NEGATIVE",
            message=f"Backlash {spec.backlash} is negative and would thicken the teeth",
            suggestion="Use 0 for no backlash"
        ))
    elif dims.tooth_thickness == 0 and math.isfinite(dims.tooth_thickness_nominal):
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="BACKLASH_EXCEEDS_THICKNESS",
            message=(
                f"Backlash {spec.backlash} exceeds the pitch-circle tooth thickness "
                f"{dims.tooth_thickness_nominal:.4f}; teeth have zero thickness"
            ),
            suggestion="Reduce backlash (typically a few percent of the module)"
        ))

    return messages


def _validate_overrides(spec: GearSpec) -> List[ValidationMessage]:
    """Flag addendum/dedendum overrides that are ignored"""
    messages = []
    for name, value in (("addendum", spec.addendum), ("dedendum", spec.dedendum)):
        if value is not None and not value > 0:
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code=f"{name.upper()}_OVERRIDE_IGNORED",
                message=f"{name.capitalize()} override {value} is not positive; using the standard value",
                suggestion=None
            ))
    return messages


def _validate_module(spec: GearSpec, dims: GearDimensions) -> List[ValidationMessage]:
    """Check module is standard (metric only)"""
    if spec.units != Units.MM:
        return []
    module = dims.module
    if not math.isfinite(module) or module <= 0:
        return []
    if is_standard_module(module):
        return []

    nearest = nearest_standard_module(module)
    return [ValidationMessage(
        severity=Severity.INFO,
        code="MODULE_NON_STANDARD",
        message=f"Module {module:.4f}mm is non-standard (ISO 54)",
        suggestion=f"Nearest standard module: {nearest}mm"
    )]


def _validate_undercut(dims: GearDimensions) -> List[ValidationMessage]:
    """Check for undercut risk (no profile shift)"""
    if not dims.undercut_risk:
        return []
    return [ValidationMessage(
        severity=Severity.WARNING,
        code="TEETH_UNDERCUT_RISK",
        message=(
            f"Undercut risk: {dims.num_teeth} teeth is below the minimum "
            f"{dims.min_teeth_no_undercut} at {dims.pressure_angle_deg:.1f}° without profile shift"
        ),
        suggestion="Increase the tooth count or the pressure angle"
    )]


def _validate_radii(spec: GearSpec, dims: GearDimensions) -> List[ValidationMessage]:
    """Report clamped radii and flank construction fallbacks"""
    messages = []
    D = dims.pitch_diameter
    rb = dims.base_diameter / 2

    if spec.type == GearType.EXTERNAL:
        if D - 2 * dims.dedendum <= MIN_DIAMETER:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="ROOT_DIAMETER_CLAMPED",
                message=f"Root diameter {D - 2 * dims.dedendum:.4f} clamped to {MIN_DIAMETER}",
                suggestion="Dedendum is too large for this pitch diameter"
            ))
        elif dims.external_root_diameter / 2 < rb:
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code="ROOT_BELOW_BASE",
                message=(
                    f"Root circle ({dims.external_root_diameter:.3f}) is inside the base circle "
                    f"({dims.base_diameter:.3f}); flanks start at the base circle"
                ),
                suggestion=None
            ))
    else:
        if D - 2 * dims.addendum <= MIN_DIAMETER:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="TIP_DIAMETER_CLAMPED",
                message=f"Tip diameter {D - 2 * dims.addendum:.4f} clamped to {MIN_DIAMETER}",
                suggestion="Addendum is too large for this pitch diameter"
            ))
        elif dims.internal_tip_diameter / 2 < rb:
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code="INTERNAL_TIP_INSIDE_BASE",
                message=(
                    f"Tip circle ({dims.internal_tip_diameter:.3f}) is inside the base circle "
                    f"({dims.base_diameter:.3f}); flanks are drawn as radial lines"
                ),
                suggestion=None
            ))

    return messages


def _validate_rack(spec: GearSpec) -> List[ValidationMessage]:
    """Check rack length and module source"""
    messages = []
    L = spec.rack_length

    if not math.isfinite(L) or L <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="RACK_LENGTH_INVALID",
            message=f"Rack length must be a positive number, got {L}",
            suggestion=None
        ))

    if not (math.isfinite(spec.pitch_diameter) and spec.num_teeth > 0):
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="RACK_MODULE_FALLBACK",
            message="No usable pitch diameter / tooth count; rack uses module 2",
            suggestion="Set pitch diameter and tooth count of the mating pinion"
        ))

    return messages
