"""Tests to verify the calculator and outline builders work without build123d.

The calculator, the 2D outline builders and DXF export are pure Python
(plus Pydantic). Only the solid geometry depends on build123d.
"""

import importlib.abc
import sys
import pytest


class _BlockBuild123d(importlib.abc.MetaPathFinder):
    """Meta path finder that makes build123d unimportable."""

    def find_spec(self, fullname, path, target=None):
        if fullname == 'build123d' or fullname.startswith('build123d.'):
            raise ImportError(f"Simulating missing dependency: {fullname}")
        return None


def test_imports_without_build123d():
    """Calculator, outlines and DXF export import and run without build123d."""
    # Save current module state
    saved_modules = dict(sys.modules)

    # Remove any cached imports of gearprofile and build123d modules
    to_remove = [k for k in sys.modules if k.startswith(('gearprofile', 'build123d'))]
    for key in to_remove:
        del sys.modules[key]

    blocker = _BlockBuild123d()
    sys.meta_path.insert(0, blocker)

    try:
        from gearprofile.calculator import calculate_dimensions, validate_spec, to_json
        from gearprofile.core import build_profile
        from gearprofile.io import GearSpec, dxf_from_polylines
        import gearprofile.core

        spec = GearSpec(num_teeth=20, pitch_diameter=40)
        dims = calculate_dimensions(spec)
        assert dims.module == 2.0
        assert validate_spec(spec, dims).valid
        assert '"schema_version"' in to_json(dims)

        teeth = build_profile(spec, dims)
        assert len(teeth) == 20
        assert "GEAR_20" in dxf_from_polylines(teeth)

        # Solid geometry is simply not exported
        assert "GearSolidGeometry" not in gearprofile.core.__all__

    finally:
        # Restore module state
        sys.meta_path.remove(blocker)

        to_remove = [k for k in sys.modules if k.startswith(('gearprofile', 'build123d'))]
        for key in to_remove:
            del sys.modules[key]

        for key, mod in saved_modules.items():
            if key.startswith(('gearprofile', 'build123d')):
                sys.modules[key] = mod


def test_calculator_does_not_load_geometry():
    """Importing the calculator leaves the solid module unloaded."""
    saved_modules = dict(sys.modules)
    to_remove = [k for k in sys.modules if k.startswith('gearprofile')]
    for key in to_remove:
        del sys.modules[key]

    try:
        import gearprofile.calculator  # noqa: F401
        assert 'gearprofile.core.solid' not in sys.modules
    finally:
        to_remove = [k for k in sys.modules if k.startswith('gearprofile')]
        for key in to_remove:
            del sys.modules[key]
        for key, mod in saved_modules.items():
            if key.startswith('gearprofile'):
                sys.modules[key] = mod


def test_lazy_package_attributes():
    import gearprofile

    assert gearprofile.__version__
    assert callable(gearprofile.calculate_dimensions)
    assert callable(gearprofile.build_profile)
    with pytest.raises(AttributeError):
        gearprofile.no_such_name
