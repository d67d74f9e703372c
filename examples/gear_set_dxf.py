"""
Export a pinion, a ring gear and a rack that all share module 2.

Writes one DXF per part into the current directory and prints the
dimension summary of each.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from gearprofile.io import GearSpec, save_dxf
from gearprofile.calculator import calculate_dimensions, validate_spec, to_summary
from gearprofile.core import build_profile, bounding_box

print("="*70)
print("MODULE 2 GEAR SET")
print("="*70)
print()

parts = {
    "pinion": GearSpec(type="external", num_teeth=18, pitch_diameter=36),
    "ring": GearSpec(type="internal", num_teeth=60, pitch_diameter=120),
    "rack": GearSpec(type="rack", num_teeth=18, pitch_diameter=36, rack_length=120),
}

for name, spec in parts.items():
    dims = calculate_dimensions(spec)
    validation = validate_spec(spec, dims)

    print(f"--- {name} ---")
    print(to_summary(dims, validation))

    outlines = build_profile(spec, dims)
    box = bounding_box(outlines)
    filename = f"{name}.dxf"
    save_dxf(outlines, filename, layer=name.upper())
    print(f"\nSaved {filename}: {len(outlines)} outline(s), "
          f"{box.width:.2f} × {box.height:.2f} mm")
    print()
