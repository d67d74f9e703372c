"""
Gearprofile - Involute spur gear, ring gear and rack profile generator.

From gear parameters to CAD-ready tooth outlines (DXF) and optional solids (STEP).

Example:
    >>> from gearprofile.io import GearSpec, save_dxf
    >>> from gearprofile.calculator import calculate_dimensions
    >>> from gearprofile.core import build_profile
    >>>
    >>> spec = GearSpec(type="external", num_teeth=20, pitch_diameter=40)
    >>> dims = calculate_dimensions(spec)
    >>> teeth = build_profile(spec, dims)
    >>> save_dxf(teeth, "gear.dxf")

Note: All imports are lazy-loaded for fast startup. The calculator can be
imported without triggering geometry (build123d) imports.
"""

__version__ = "0.1.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"GearType", "Units"}

_CALCULATOR = {
    "STANDARD_MODULES",
    "calculate_dimensions",
    "nearest_standard_module",
    "is_standard_module",
    "validate_spec",
    "Severity",
    "ValidationResult",
    "format_value",
}

_IO = {
    "GearSpec",
    "GearDimensions",
    "load_spec_json",
    "save_spec_json",
    "dxf_from_polylines",
    "save_dxf",
}

_CORE = {
    "sample_involute",
    "build_external_profile",
    "build_internal_profile",
    "build_rack_profile",
    "build_profile",
    "bounding_box",
    "GearSolidGeometry",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'gearprofile' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "GearType",
    "Units",

    # Calculator (lazy loaded from calculator)
    "STANDARD_MODULES",
    "calculate_dimensions",
    "nearest_standard_module",
    "is_standard_module",
    "validate_spec",
    "Severity",
    "ValidationResult",
    "format_value",

    # IO (lazy loaded from io)
    "GearSpec",
    "GearDimensions",
    "load_spec_json",
    "save_spec_json",
    "dxf_from_polylines",
    "save_dxf",

    # Geometry (lazy loaded from core)
    "sample_involute",
    "build_external_profile",
    "build_internal_profile",
    "build_rack_profile",
    "build_profile",
    "bounding_box",
    "GearSolidGeometry",
]
