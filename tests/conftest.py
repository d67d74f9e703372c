"""
Pytest configuration and shared fixtures for gearprofile tests.
"""

import json
import pytest

from gearprofile.io import GearSpec
from gearprofile.calculator import calculate_dimensions


# ─── Specs ───────────────────────────────────────────────────────────────


@pytest.fixture
def external_spec():
    """20-tooth, 40mm pitch diameter spur gear (module 2)."""
    return GearSpec(type="external", num_teeth=20, pitch_diameter=40, pressure_angle_deg=20)


@pytest.fixture
def internal_spec():
    """20-tooth ring gear; tip circle sits inside the base circle."""
    return GearSpec(type="internal", num_teeth=20, pitch_diameter=40, pressure_angle_deg=20)


@pytest.fixture
def large_internal_spec():
    """40-tooth ring gear; tip circle outside the base circle."""
    return GearSpec(type="internal", num_teeth=40, pitch_diameter=80, pressure_angle_deg=20)


@pytest.fixture
def rack_spec():
    """100mm rack meshing with a module 2 pinion."""
    return GearSpec(type="rack", num_teeth=20, pitch_diameter=40, rack_length=100)


# ─── Dimensions ──────────────────────────────────────────────────────────


@pytest.fixture
def external_dims(external_spec):
    return calculate_dimensions(external_spec)


@pytest.fixture
def internal_dims(internal_spec):
    return calculate_dimensions(internal_spec)


@pytest.fixture
def rack_dims(rack_spec):
    return calculate_dimensions(rack_spec)


# ─── Files ───────────────────────────────────────────────────────────────


@pytest.fixture
def spec_dict():
    """Spec as saved by save_spec_json."""
    return {
        "schema_version": "1.0",
        "spec": {
            "type": "internal",
            "units": "mm",
            "num_teeth": 30,
            "pitch_diameter": 60.0,
            "pressure_angle_deg": 20.0,
            "backlash": 0.05,
            "addendum": None,
            "dedendum": None,
            "rack_length": 100.0,
            "thickness": 8.0,
            "samples": 24,
        },
    }


@pytest.fixture
def temp_json_file(tmp_path, spec_dict):
    """Write spec_dict to a temporary JSON file."""
    path = tmp_path / "spec.json"
    path.write_text(json.dumps(spec_dict, indent=2))
    return path
