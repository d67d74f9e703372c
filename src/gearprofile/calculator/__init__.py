"""
Gear Profile Calculator - Standard spur gear and rack dimensions.

This module derives gear dimensions from a GearSpec, validates them and
formats them for display. It has no build123d dependency.

Example:
    >>> from gearprofile.calculator import calculate_dimensions, format_value
    >>> from gearprofile.io import GearSpec
    >>>
    >>> dims = calculate_dimensions(GearSpec(num_teeth=20, pitch_diameter=40))
    >>> format_value(dims.outside_diameter, "mm")
    '44.000'
"""

from .core import (
    # Constants
    STANDARD_MODULES,

    # Utility functions
    nearest_standard_module,
    is_standard_module,
    calculate_minimum_teeth,
    calculate_module,

    # Dimension calculation (returns GearDimensions)
    calculate_dimensions,
)

from .validation import (
    # Validation
    validate_spec,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    # Formatting
    format_value,
    to_summary,
    to_json,
    to_markdown,
)

from ..enums import (
    # Type-safe enums
    GearType,
    Units,
)

from ..io.loaders import GearSpec, GearDimensions

__all__ = [
    # Constants
    "STANDARD_MODULES",

    # Utility functions
    "nearest_standard_module",
    "is_standard_module",
    "calculate_minimum_teeth",
    "calculate_module",

    # Dimension calculation
    "calculate_dimensions",

    # Validation
    "validate_spec",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Formatting
    "format_value",
    "to_summary",
    "to_json",
    "to_markdown",

    # Enums
    "GearType",
    "Units",

    # Models
    "GearSpec",
    "GearDimensions",
]
