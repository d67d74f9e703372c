"""
JSON schema definition and validation for gear spec files.

This defines the contract between saved spec files and the calculator.
Field types are enforced by the Pydantic models in loaders.py; this module
provides lightweight structural checks that report problems as lists of
messages instead of raising.
"""

from typing import Any, Dict, List

SCHEMA_VERSION = "1.0"

SPEC_FIELDS: Dict[str, str] = {
    "type": "string",  # "external" | "internal" | "rack"
    "units": "string",  # "mm" | "in"
    "num_teeth": "int",
    "pitch_diameter": "float",
    "pressure_angle_deg": "float",
    "backlash": "float",
    "addendum": "float",  # Optional override
    "dedendum": "float",  # Optional override
    "rack_length": "float",  # Rack only
    "thickness": "float",  # Face width for extrusion
    "samples": "int",  # Curve resolution (floored at 12)
}

VALID_TYPES = ("external", "internal", "rack")
VALID_UNITS = ("mm", "in")


def validate_spec_json(data: Dict) -> Dict[str, Any]:
    """
    Validate JSON data against the spec schema.

    Args:
        data: Parsed JSON data (optionally wrapped in a 'spec' section)

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }
    """
    errors: List[str] = []
    warnings: List[str] = []

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field (assuming current format)")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    spec = data.get("spec", data)
    if not isinstance(spec, dict):
        errors.append("'spec' section must be an object")
        return {
            "valid": False,
            "errors": errors,
            "warnings": warnings,
            "schema_version": schema_version
        }

    gear_type = spec.get("type")
    if gear_type is not None and str(gear_type).lower() not in VALID_TYPES:
        errors.append(
            f"Invalid type '{gear_type}'. Must be one of: {', '.join(VALID_TYPES)}"
        )

    units = spec.get("units")
    if units is not None and str(units).lower() not in VALID_UNITS:
        errors.append(
            f"Invalid units '{units}'. Must be one of: {', '.join(VALID_UNITS)}"
        )

    for name, kind in SPEC_FIELDS.items():
        if name in ("type", "units") or spec.get(name) is None:
            continue
        value = spec[name]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"Field '{name}' must be a number ({kind}), got {value!r}")

    unknown = sorted(k for k in spec if k not in SPEC_FIELDS and k != "schema_version")
    for name in unknown:
        warnings.append(f"Unknown field '{name}' will be ignored")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }
