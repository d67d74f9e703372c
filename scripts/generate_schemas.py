#!/usr/bin/env python3
"""
Generate JSON Schemas from the Pydantic models.

The GearSpec schema describes the "spec" section of saved spec files; the
GearDimensions schema describes the "dimensions" section of --format json
output.

Usage:
    python scripts/generate_schemas.py
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import __version__ as PYDANTIC_VERSION

from gearprofile.io.loaders import GearSpec, GearDimensions
from gearprofile.io.schema import SCHEMA_VERSION
from gearprofile.enums import GearType, Units


def get_model_schema(model_class) -> dict:
    """Get JSON schema from a Pydantic model.

    Uses by_alias=False to use field names (not aliases) in the schema.
    This ensures the schema matches what model_dump() produces by default.
    """
    return model_class.model_json_schema(by_alias=False)


def main():
    output_dir = Path(__file__).parent.parent / "schemas"
    output_dir.mkdir(exist_ok=True)

    print("Generating JSON schemas from Pydantic models...")
    print(f"  Pydantic version: {PYDANTIC_VERSION}")

    models = {
        "gear-spec": (GearSpec, "Gear design parameters (the 'spec' section of a spec file)"),
        "gear-dimensions": (GearDimensions, "Derived gear dimensions"),
    }

    for name, (model, description) in models.items():
        schema = get_model_schema(model)
        schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
        schema["title"] = model.__name__
        schema["description"] = description

        schema_file = output_dir / f"{name}-v{SCHEMA_VERSION}.json"
        with open(schema_file, "w") as f:
            json.dump(schema, f, indent=2)
        print(f"  Generated: {schema_file}")

    enums_schema = {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "GearprofileEnums",
        "description": "Enum definitions for gearprofile types",
        "definitions": {
            "GearType": {
                "type": "string",
                "enum": [e.value for e in GearType],
                "description": "Gear form"
            },
            "Units": {
                "type": "string",
                "enum": [e.value for e in Units],
                "description": "Length units (display only, the math is unit-agnostic)"
            },
        }
    }

    enums_file = output_dir / f"enums-v{SCHEMA_VERSION}.json"
    with open(enums_file, "w") as f:
        json.dump(enums_schema, f, indent=2)
    print(f"  Generated: {enums_file}")

    print(f"\nAll schemas written to: {output_dir}/")


if __name__ == "__main__":
    main()
