"""
Minimal DXF export (R12) using POLYLINE / VERTEX entities.

Each outline becomes one closed POLYLINE on its own layer, which imports
cleanly into most CAD packages. Coordinates are rounded to 3 decimals.
"""

import logging
import math
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from ..calculator.constants import DXF_DECIMALS, DXF_DEFAULT_LAYER

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def _num(value: float) -> str:
    """Round to 3 decimals (half up) and print in shortest form ('44', '-1.5')."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    scale = 10 ** DXF_DECIMALS
    scaled = value * scale
    if math.isfinite(scaled):
        rounded = math.floor(scaled + 0.5) / scale + 0.0  # + 0.0 drops -0.0
    else:
        rounded = value
    if rounded.is_integer() and abs(rounded) < 1e21:
        return str(int(rounded))
    return repr(rounded)


def _header() -> List[str]:
    return [
        '0', 'SECTION',
        '2', 'HEADER',
        '9', '$ACADVER',
        '1', 'AC1009',
        '0', 'ENDSEC',
        '0', 'SECTION',
        '2', 'ENTITIES',
    ]


def _footer() -> List[str]:
    return [
        '0', 'ENDSEC',
        '0', 'EOF',
    ]


def _polyline(points: Sequence[Point], layer: str, closed: bool = True) -> List[str]:
    lines = ['0', 'POLYLINE', '8', layer, '66', '1', '70', '1' if closed else '0']
    for x, y in points:
        lines.extend([
            '0', 'VERTEX',
            '8', layer,
            '10', _num(x),
            '20', _num(y),
            '30', '0',
        ])
    lines.extend(['0', 'SEQEND'])
    return lines


def dxf_from_polylines(polylines: Sequence[Sequence[Point]], layer: str = DXF_DEFAULT_LAYER) -> str:
    """
    Serialize outlines as DXF text.

    Args:
        polylines: Point sequences, each written as one closed POLYLINE
        layer: Base layer name; polyline i goes on layer "<layer>_<i+1>"

    Returns:
        DXF document text. Outlines with fewer than 2 points are skipped but
        still consume their layer index.
    """
    out = '\n'.join(_header()) + '\n'
    for i, points in enumerate(polylines):
        if not points or len(points) < 2:
            logger.debug(f"Skipping outline {i + 1}: {len(points or [])} point(s)")
            continue
        out += '\n'.join(_polyline(points, f"{layer}_{i + 1}", closed=True)) + '\n'
    out += '\n'.join(_footer()) + '\n'
    return out


def save_dxf(
    polylines: Sequence[Sequence[Point]],
    filepath: Union[str, Path],
    layer: str = DXF_DEFAULT_LAYER
) -> None:
    """Write outlines to a DXF file."""
    filepath = Path(filepath)
    text = dxf_from_polylines(polylines, layer=layer)
    filepath.write_text(text)
    logger.info(f"Exported {len(polylines)} outline(s) to {filepath}")
