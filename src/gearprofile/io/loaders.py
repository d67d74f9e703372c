"""
JSON input/output for gear profile parameters.

Defines the GearSpec input model and the GearDimensions result model, and
loads/saves specs as JSON.

Uses Pydantic for automatic validation and enum coercion.
"""

import json
import math
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..enums import GearType, Units

# Curve resolution floor and default (samples per flank)
MIN_SAMPLES = 12
DEFAULT_SAMPLES = 48


class GearSpec(BaseModel):
    """Gear design parameters supplied for one computation."""
    model_config = ConfigDict(extra='ignore')

    type: GearType = GearType.EXTERNAL
    units: Units = Units.MM
    num_teeth: int = 20  # Rack: preview tooth count hint only
    pitch_diameter: float = 40.0
    pressure_angle_deg: float = 20.0
    backlash: float = 0.0
    addendum: Optional[float] = None  # Override, ignored unless > 0
    dedendum: Optional[float] = None  # Override, ignored unless > 0
    rack_length: float = 100.0
    thickness: float = 6.0  # Face width for extrusion
    samples: int = DEFAULT_SAMPLES

    @field_validator('type', mode='before')
    @classmethod
    def coerce_type(cls, v):
        if isinstance(v, str):
            return GearType(v.lower())
        return v

    @field_validator('units', mode='before')
    @classmethod
    def coerce_units(cls, v):
        if isinstance(v, str):
            return Units(v.lower())
        return v

    @field_validator('samples', mode='before')
    @classmethod
    def floor_samples(cls, v):
        # Unusable values fall back to the default, everything else floors at 12
        try:
            v = float(v)
        except (TypeError, ValueError):
            return DEFAULT_SAMPLES
        if not math.isfinite(v) or v == 0:
            return DEFAULT_SAMPLES
        return max(MIN_SAMPLES, int(math.floor(v)))

    @property
    def pressure_angle(self) -> float:
        """Pressure angle in radians."""
        return math.radians(self.pressure_angle_deg)


class GearDimensions(BaseModel):
    """Derived gear dimensions.

    For internal gears ``outside_diameter`` is the outer root circle and
    ``root_diameter`` the inner tip circle, so consumers always get an
    outer/inner pair regardless of gear type.
    """
    model_config = ConfigDict(frozen=True, extra='ignore')

    # Inputs echoed for display
    type: GearType
    units: Units
    num_teeth: int
    pitch_diameter: float
    pressure_angle_deg: float
    backlash: float
    rack_length: float
    thickness: float

    # Derived
    module: float
    circular_pitch: float
    addendum: float
    dedendum: float
    tooth_thickness_nominal: float  # At pitch circle, no backlash
    tooth_thickness: float  # At pitch circle, after backlash
    base_diameter: float
    outside_diameter: float
    root_diameter: float

    # Type-specific diameters
    external_outside_diameter: float
    external_root_diameter: float
    internal_tip_diameter: float
    internal_root_diameter: float

    undercut_risk: bool
    min_teeth_no_undercut: Union[int, float]  # float only when non-finite

    @property
    def pressure_angle(self) -> float:
        """Pressure angle in radians."""
        return math.radians(self.pressure_angle_deg)


def load_spec_json(filepath: Union[str, Path]) -> GearSpec:
    """
    Load a gear spec from a JSON file.

    Args:
        filepath: Path to JSON file

    Returns:
        GearSpec with all parameters

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON does not hold an object
        ValidationError: If fields have the wrong type or unknown enum values
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Spec file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # Check for 'spec' wrapper (saved files have this)
    if isinstance(data, dict) and 'spec' in data:
        data = data['spec']

    if not isinstance(data, dict):
        raise ValueError("Invalid spec JSON - expected an object of gear parameters")

    return GearSpec.model_validate(data)


def save_spec_json(spec: GearSpec, filepath: Union[str, Path]) -> None:
    """
    Save a gear spec to a JSON file.

    Args:
        spec: Gear spec
        filepath: Path to save JSON file
    """
    from .schema import SCHEMA_VERSION

    filepath = Path(filepath)
    data = {
        'schema_version': SCHEMA_VERSION,
        'spec': spec.model_dump(mode='json'),
    }

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)
