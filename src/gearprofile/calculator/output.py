"""Output formatters for gear dimensions.

Converts typed GearDimensions models to display strings, a plain-text
summary, JSON and Markdown.

Uses Pydantic's model_dump(mode='json') for serialization including
automatic enum-to-string conversion.
"""

import json
import math
from typing import Optional, TYPE_CHECKING

from ..enums import GearType
from ..io.loaders import GearDimensions
from ..io.schema import SCHEMA_VERSION
from .constants import NO_VALUE

if TYPE_CHECKING:
    from .validation import ValidationResult


def _decimals(value: float, unit: str) -> int:
    if unit == "deg":
        return 1
    magnitude = abs(value)
    if magnitude >= 100:
        return 2
    if magnitude >= 10:
        return 3
    return 4


def format_value(value: float, unit: str) -> str:
    """Format a number for display with unit-appropriate rounding.

    Args:
        value: Number to format
        unit: "deg" for angles, anything else ("mm", "in") for lengths

    Returns:
        Fixed-point string: 1 decimal for degrees; for lengths 2 decimals at
        |value| >= 100, 3 at >= 10, else 4. Non-finite values give NO_VALUE.
    """
    if value is None or not math.isfinite(value):
        return NO_VALUE
    d = _decimals(value, unit)
    scale = 10 ** d
    scaled = value * scale
    if math.isfinite(scaled):
        # Half up, ties toward +inf
        rounded = math.floor(scaled + 0.5) / scale
    else:
        # Beyond float resolution at this many decimals
        rounded = value
    if rounded == 0:
        rounded = 0.0
    return f"{rounded:.{d}f}"


def _finite_or_none(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types.

    Non-finite floats become None so the JSON stays standard.
    """
    data = model.model_dump(mode='python')
    out = {}
    for key, value in data.items():
        if hasattr(value, 'value'):
            value = value.value
        out[key] = _finite_or_none(value)
    return out


def _validation_dict(validation: "ValidationResult") -> dict:
    return {
        'valid': validation.valid,
        'messages': [
            {
                'severity': m.severity.value,
                'code': m.code,
                'message': m.message,
                'suggestion': m.suggestion,
            }
            for m in validation.messages
        ],
    }


def to_json(
    dims: GearDimensions,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2
) -> str:
    """Convert GearDimensions to JSON string.

    Args:
        dims: Result of calculate_dimensions()
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, dimensions, and optional validation
    """
    result = {
        'schema_version': SCHEMA_VERSION,
        'dimensions': _model_to_dict(dims),
    }

    if validation is not None:
        result['validation'] = _validation_dict(validation)

    return json.dumps(result, indent=indent, allow_nan=False)


def to_summary(
    dims: GearDimensions,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert GearDimensions to formatted text summary.

    Args:
        dims: Result of calculate_dimensions()
        validation: Optional validation results, appended as a findings list

    Returns:
        Multi-line formatted summary string
    """
    unit = dims.units.value

    def length(value: float) -> str:
        return f"{format_value(value, unit)} {unit}"

    lines = [
        f"Type: {dims.type.value}",
        f"Units: {unit}",
    ]
    if dims.type != GearType.RACK:
        lines.append(f"N (teeth): {dims.num_teeth}")
        lines.append(f"D (pitch dia): {length(dims.pitch_diameter)}")

    lines.extend([
        f"Pressure angle: {format_value(dims.pressure_angle_deg, 'deg')}°",
        f"Module m: {length(dims.module)}",
        f"Circular pitch p: {length(dims.circular_pitch)}",
        f"Tooth thickness at pitch (no backlash): {length(dims.tooth_thickness_nominal)}",
        f"Backlash (entered): {length(dims.backlash)}",
        f"Tooth thickness at pitch (with backlash): {length(dims.tooth_thickness)}",
        "",
        f"Thickness (face width): {length(dims.thickness)}",
        "",
    ])

    if dims.type == GearType.RACK:
        lines.extend([
            f"Rack length: {length(dims.rack_length)}",
            f"Rack addendum: {length(dims.addendum)}",
            f"Rack dedendum: {length(dims.dedendum)}",
            f"Total tooth height: {length(dims.addendum + dims.dedendum)}",
        ])
    else:
        lines.extend([
            f"Addendum a: {length(dims.addendum)}",
            f"Dedendum b: {length(dims.dedendum)}",
            f"Outside dia Do: {length(dims.outside_diameter)}",
            f"Root dia Dr: {length(dims.root_diameter)}",
            f"Base dia Db: {length(dims.base_diameter)}",
        ])
        if dims.undercut_risk:
            lines.extend([
                "",
                f"⚠ Undercut risk: HIGH (N < ~{dims.min_teeth_no_undercut}) at "
                f"{format_value(dims.pressure_angle_deg, 'deg')}° without profile shift",
            ])

    if validation is not None and validation.messages:
        lines.append("")
        lines.append("Validation:")
        for msg in validation.messages:
            lines.append(f"  [{msg.severity.value.upper()}] {msg.code}: {msg.message}")

    return "\n".join(lines)


def to_markdown(
    dims: GearDimensions,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert GearDimensions to a markdown specification.

    Args:
        dims: Result of calculate_dimensions()
        validation: Optional validation results to include

    Returns:
        Markdown specification string
    """
    unit = dims.units.value
    kind = {
        GearType.EXTERNAL: "External Spur Gear",
        GearType.INTERNAL: "Internal (Ring) Gear",
        GearType.RACK: "Rack",
    }[dims.type]

    md = f"# {kind} Specification\n\n"

    md += "## Overview\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    if dims.type != GearType.RACK:
        md += f"| Teeth | {dims.num_teeth} |\n"
        md += f"| Pitch Diameter | {format_value(dims.pitch_diameter, unit)} {unit} |\n"
    md += f"| Module | {format_value(dims.module, unit)} {unit} |\n"
    md += f"| Circular Pitch | {format_value(dims.circular_pitch, unit)} {unit} |\n"
    md += f"| Pressure Angle | {format_value(dims.pressure_angle_deg, 'deg')}° |\n"
    md += f"| Backlash | {format_value(dims.backlash, unit)} {unit} |\n"
    md += f"| Face Width | {format_value(dims.thickness, unit)} {unit} |\n\n"

    md += "## Tooth\n\n"
    md += "| Dimension | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Addendum | {format_value(dims.addendum, unit)} {unit} |\n"
    md += f"| Dedendum | {format_value(dims.dedendum, unit)} {unit} |\n"
    md += f"| Thickness (no backlash) | {format_value(dims.tooth_thickness_nominal, unit)} {unit} |\n"
    md += f"| Thickness (with backlash) | {format_value(dims.tooth_thickness, unit)} {unit} |\n\n"

    if dims.type == GearType.RACK:
        md += "## Rack\n\n"
        md += "| Dimension | Value |\n"
        md += "|-----------|-------|\n"
        md += f"| Length | {format_value(dims.rack_length, unit)} {unit} |\n"
        md += f"| Total Tooth Height | {format_value(dims.addendum + dims.dedendum, unit)} {unit} |\n\n"
    else:
        md += "## Diameters\n\n"
        md += "| Dimension | Value |\n"
        md += "|-----------|-------|\n"
        md += f"| Outside (Do) | {format_value(dims.outside_diameter, unit)} {unit} |\n"
        md += f"| Pitch (D) | {format_value(dims.pitch_diameter, unit)} {unit} |\n"
        md += f"| Root (Dr) | {format_value(dims.root_diameter, unit)} {unit} |\n"
        md += f"| Base (Db) | {format_value(dims.base_diameter, unit)} {unit} |\n\n"
        if dims.type == GearType.INTERNAL:
            md += "For internal gears Do is the outer root circle and Dr the inner tip circle.\n\n"
        md += f"Minimum teeth without undercut: {dims.min_teeth_no_undercut}"
        md += " (undercut risk)\n\n" if dims.undercut_risk else "\n\n"

    if validation is not None:
        md += "## Validation\n\n"
        if not validation.messages:
            md += "No issues found.\n"
        for msg in validation.messages:
            md += f"- **{msg.severity.value.upper()}** `{msg.code}`: {msg.message}\n"
            if msg.suggestion:
                md += f"  - {msg.suggestion}\n"

    return md
