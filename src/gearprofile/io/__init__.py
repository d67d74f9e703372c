"""
Gearprofile IO - JSON schema, loaders, and exporters.

This module handles spec serialization and CAD export.

Example:
    >>> from gearprofile.io import GearSpec, save_spec_json, load_spec_json
    >>>
    >>> spec = GearSpec(type="external", num_teeth=20, pitch_diameter=40)
    >>> save_spec_json(spec, "spec.json")
    >>> loaded = load_spec_json("spec.json")
"""

from .loaders import (
    GearSpec,
    GearDimensions,
    load_spec_json,
    save_spec_json,
)

from .dxf import (
    dxf_from_polylines,
    save_dxf,
)

from .schema import (
    SCHEMA_VERSION,
    validate_spec_json,
)

__all__ = [
    # Models
    "GearSpec",
    "GearDimensions",

    # Loaders
    "load_spec_json",
    "save_spec_json",

    # DXF export
    "dxf_from_polylines",
    "save_dxf",

    # Schema
    "SCHEMA_VERSION",
    "validate_spec_json",
]
