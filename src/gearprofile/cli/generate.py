"""
Command-line interface for gear profile generation.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from ..io.loaders import GearSpec, load_spec_json, save_spec_json
from ..io.dxf import save_dxf
from ..calculator.constants import DXF_DEFAULT_LAYER
from ..calculator.core import calculate_dimensions
from ..calculator.validation import validate_spec
from ..calculator.output import to_json, to_markdown, to_summary
from ..core.outline import bounding_box
from ..core.profile import build_profile

# Flag name -> GearSpec field
_SPEC_FLAGS = {
    'type': 'type',
    'units': 'units',
    'teeth': 'num_teeth',
    'pitch_diameter': 'pitch_diameter',
    'pressure_angle': 'pressure_angle_deg',
    'backlash': 'backlash',
    'addendum': 'addendum',
    'dedendum': 'dedendum',
    'rack_length': 'rack_length',
    'thickness': 'thickness',
    'samples': 'samples',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gearprofile',
        description="Calculate involute gear dimensions and export tooth profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dimensions of a 20-tooth, 40mm pitch diameter spur gear
  gearprofile --teeth 20 --pitch-diameter 40

  # Ring gear profile to DXF
  gearprofile --type internal --teeth 40 --pitch-diameter 80 --dxf ring.dxf

  # 120mm rack as JSON, with a 3mm module pinion
  gearprofile --type rack --teeth 20 --pitch-diameter 60 --rack-length 120 --format json

  # Load parameters from a file, override backlash, export a STEP solid
  gearprofile --spec gear.json --backlash 0.05 --step gear.step
        """
    )

    parser.add_argument(
        '--spec',
        type=str,
        default=None,
        help='JSON spec file (flags below override its values)'
    )

    parser.add_argument(
        '--type',
        choices=['external', 'internal', 'rack'],
        default=None,
        help='Gear form (default: external)'
    )

    parser.add_argument(
        '--units',
        choices=['mm', 'in'],
        default=None,
        help='Length units (default: mm)'
    )

    parser.add_argument(
        '--teeth',
        type=int,
        default=None,
        help='Number of teeth (default: 20)'
    )

    parser.add_argument(
        '--pitch-diameter',
        type=float,
        default=None,
        help='Pitch diameter (default: 40)'
    )

    parser.add_argument(
        '--pressure-angle',
        type=float,
        default=None,
        help='Pressure angle in degrees (default: 20)'
    )

    parser.add_argument(
        '--backlash',
        type=float,
        default=None,
        help='Backlash, subtracted from tooth thickness (default: 0)'
    )

    parser.add_argument(
        '--addendum',
        type=float,
        default=None,
        help='Addendum override (default: 1.0 × module)'
    )

    parser.add_argument(
        '--dedendum',
        type=float,
        default=None,
        help='Dedendum override (default: 1.25 × module)'
    )

    parser.add_argument(
        '--rack-length',
        type=float,
        default=None,
        help='Rack length (default: 100)'
    )

    parser.add_argument(
        '--thickness',
        type=float,
        default=None,
        help='Face width for extrusion (default: 6)'
    )

    parser.add_argument(
        '--samples',
        type=int,
        default=None,
        help='Involute samples per flank, minimum 12 (default: 48)'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'json', 'markdown'],
        default='summary',
        help='Dimension output format (default: summary)'
    )

    parser.add_argument(
        '--dxf',
        type=str,
        default=None,
        help='Write tooth outlines to this DXF file'
    )

    parser.add_argument(
        '--layer',
        type=str,
        default=DXF_DEFAULT_LAYER,
        help=f'Base DXF layer name (default: {DXF_DEFAULT_LAYER})'
    )

    parser.add_argument(
        '--step',
        type=str,
        default=None,
        help='Write an extruded solid to this STEP file (requires build123d)'
    )

    parser.add_argument(
        '--save-json',
        type=str,
        default=None,
        help='Save the effective spec as JSON'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug logging'
    )

    return parser


def _resolve_spec(args: argparse.Namespace) -> GearSpec:
    """Spec file values, overridden by any flags given."""
    data = {}
    if args.spec:
        data = load_spec_json(args.spec).model_dump()

    for flag, field_name in _SPEC_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            data[field_name] = value

    return GearSpec.model_validate(data)


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # Load spec
    try:
        spec = _resolve_spec(args)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error loading spec: {e}", file=sys.stderr)
        return 1

    dims = calculate_dimensions(spec)
    validation = validate_spec(spec, dims)

    if args.format == 'json':
        print(to_json(dims, validation))
    elif args.format == 'markdown':
        print(to_markdown(dims, validation))
    else:
        print(to_summary(dims, validation))

    if not validation.valid:
        print(f"\nSpec has {len(validation.errors)} error(s); nothing exported", file=sys.stderr)
        return 1

    if args.dxf:
        outlines = build_profile(spec, dims)
        if not outlines:
            print("Error: no drawable outline for these dimensions", file=sys.stderr)
            return 1
        save_dxf(outlines, args.dxf, layer=args.layer)
        box = bounding_box(outlines)
        print(f"\nSaved: {args.dxf} ({len(outlines)} outline(s))", file=sys.stderr)
        if box is not None:
            print(f"  Extent: {box.width:.3f} × {box.height:.3f} {spec.units.value}", file=sys.stderr)

    if args.step:
        try:
            from ..core.solid import GearSolidGeometry
        except ImportError:
            print("Error: build123d not available for STEP export", file=sys.stderr)
            print("Install with: pip install gearprofile[geometry]", file=sys.stderr)
            return 1
        try:
            solid = GearSolidGeometry(spec, dimensions=dims)
            solid.build()
            solid.export_step(args.step)
        except ValueError as e:
            print(f"Error building solid: {e}", file=sys.stderr)
            return 1
        print(f"Saved: {args.step}", file=sys.stderr)

    if args.save_json:
        output_path = Path(args.save_json)
        save_spec_json(spec, output_path)
        print(f"Saved spec: {output_path}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
