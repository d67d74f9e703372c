"""
Unit tests for gear spec validation.

No geometry building, so all tests are fast (no @pytest.mark.slow).
"""

import pytest

from gearprofile.calculator import calculate_dimensions
from gearprofile.calculator.validation import (
    validate_spec,
    _validate_pressure_angle,
    _validate_overrides,
    Severity,
    ValidationMessage,
    ValidationResult,
)
from gearprofile.io import GearSpec


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _codes(messages):
    """Extract code strings from a list of ValidationMessages."""
    return [m.code for m in messages]


def _severities(messages):
    """Extract (code, severity) pairs."""
    return {m.code: m.severity for m in messages}


def _validate(**fields):
    return validate_spec(GearSpec(**fields))


# ---------------------------------------------------------------------------
# ValidationResult
# ---------------------------------------------------------------------------

class TestValidationResult:

    def test_partitions_by_severity(self):
        result = ValidationResult(valid=False, messages=[
            ValidationMessage(Severity.ERROR, "A", "a"),
            ValidationMessage(Severity.WARNING, "B", "b"),
            ValidationMessage(Severity.INFO, "C", "c"),
            ValidationMessage(Severity.ERROR, "D", "d"),
        ])
        assert _codes(result.errors) == ["A", "D"]
        assert _codes(result.warnings) == ["B"]
        assert _codes(result.infos) == ["C"]

    def test_default_messages(self):
        assert ValidationResult(valid=True).messages == []


# ---------------------------------------------------------------------------
# External gears
# ---------------------------------------------------------------------------

class TestExternalValidation:

    def test_standard_gear_valid(self, external_spec):
        result = validate_spec(external_spec)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_root_below_base_info(self, external_spec):
        result = validate_spec(external_spec)
        assert _severities(result.messages) == {"ROOT_BELOW_BASE": Severity.INFO}

    def test_root_above_base_no_info(self):
        result = _validate(num_teeth=60, pitch_diameter=120)
        assert "ROOT_BELOW_BASE" not in _codes(result.messages)

    def test_uses_given_dimensions(self, external_spec, external_dims):
        assert validate_spec(external_spec, external_dims) == validate_spec(external_spec)

    def test_zero_teeth(self):
        result = _validate(num_teeth=0)
        assert not result.valid
        assert "TEETH_COUNT_INVALID" in _codes(result.errors)
        assert "NON_FINITE_DIMENSIONS" in _codes(result.errors)

    @pytest.mark.parametrize("diameter", [0.0, -10.0, float("nan"), float("inf")])
    def test_bad_pitch_diameter(self, diameter):
        result = _validate(pitch_diameter=diameter)
        assert not result.valid
        assert "PITCH_DIAMETER_INVALID" in _codes(result.errors)

    def test_undercut_warning(self):
        result = _validate(num_teeth=10, pitch_diameter=20)
        assert result.valid
        assert _codes(result.warnings) == ["TEETH_UNDERCUT_RISK"]
        assert "18" in result.warnings[0].message

    def test_root_clamped_warning(self):
        result = _validate(dedendum=25.0)
        assert "ROOT_DIAMETER_CLAMPED" in _codes(result.warnings)


class TestPressureAngle:

    @pytest.mark.parametrize("angle", [14.5, 20.0, 25.0])
    def test_standard(self, angle):
        assert _validate_pressure_angle(GearSpec(pressure_angle_deg=angle)) == []

    def test_non_standard_info(self):
        messages = _validate_pressure_angle(GearSpec(pressure_angle_deg=22.5))
        assert _severities(messages) == {"PRESSURE_ANGLE_NON_STANDARD": Severity.INFO}

    @pytest.mark.parametrize("angle", [0.0, -5.0, 90.0, 120.0])
    def test_out_of_range(self, angle):
        result = _validate(pressure_angle_deg=angle)
        assert not result.valid
        assert "PRESSURE_ANGLE_OUT_OF_RANGE" in _codes(result.errors)


class TestBacklash:

    def test_negative(self):
        result = _validate(backlash=-0.1)
        assert not result.valid
        assert "BACKLASH_NEGATIVE" in _codes(result.errors)

    def test_exceeds_thickness(self):
        result = _validate(backlash=10.0)
        assert result.valid
        assert "BACKLASH_EXCEEDS_THICKNESS" in _codes(result.warnings)

    def test_normal_backlash(self):
        result = _validate(backlash=0.05)
        assert not any(c.startswith("BACKLASH") for c in _codes(result.messages))


class TestOverrides:

    def test_ignored_overrides_reported(self):
        messages = _validate_overrides(GearSpec(addendum=0.0, dedendum=-1.0))
        assert _codes(messages) == ["ADDENDUM_OVERRIDE_IGNORED", "DEDENDUM_OVERRIDE_IGNORED"]
        assert all(m.severity == Severity.INFO for m in messages)

    def test_positive_overrides_silent(self):
        assert _validate_overrides(GearSpec(addendum=2.5, dedendum=3.0)) == []

    def test_missing_overrides_silent(self):
        assert _validate_overrides(GearSpec()) == []


class TestModule:

    def test_non_standard_module(self):
        result = _validate(num_teeth=20, pitch_diameter=42)
        messages = [m for m in result.messages if m.code == "MODULE_NON_STANDARD"]
        assert len(messages) == 1
        assert messages[0].severity == Severity.INFO
        assert "2.0mm" in messages[0].suggestion

    def test_inch_units_skip_module_check(self):
        result = _validate(units="in", num_teeth=20, pitch_diameter=42)
        assert "MODULE_NON_STANDARD" not in _codes(result.messages)


# ---------------------------------------------------------------------------
# Internal gears
# ---------------------------------------------------------------------------

class TestInternalValidation:

    def test_tip_inside_base_info(self, internal_spec):
        result = validate_spec(internal_spec)
        assert result.valid
        assert "INTERNAL_TIP_INSIDE_BASE" in _codes(result.infos)

    def test_tip_outside_base(self, large_internal_spec):
        result = validate_spec(large_internal_spec)
        assert result.messages == []

    def test_tip_clamped(self):
        result = _validate(type="internal", addendum=25.0)
        codes = _codes(result.warnings)
        assert "TIP_DIAMETER_CLAMPED" in codes
        assert "ROOT_DIAMETER_CLAMPED" not in codes


# ---------------------------------------------------------------------------
# Racks
# ---------------------------------------------------------------------------

class TestRackValidation:

    def test_default_rack_valid(self, rack_spec):
        result = validate_spec(rack_spec)
        assert result.valid
        assert result.messages == []

    @pytest.mark.parametrize("length", [0.0, -1.0, float("nan")])
    def test_bad_length(self, length):
        result = _validate(type="rack", rack_length=length)
        assert not result.valid
        assert "RACK_LENGTH_INVALID" in _codes(result.errors)

    def test_module_fallback_info(self):
        result = _validate(type="rack", num_teeth=0)
        assert result.valid
        assert _codes(result.infos) == ["RACK_MODULE_FALLBACK"]

    def test_no_undercut_check(self):
        result = _validate(type="rack", num_teeth=5, pitch_diameter=10)
        assert "TEETH_UNDERCUT_RISK" not in _codes(result.messages)
