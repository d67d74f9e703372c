"""
Tests for DXF export.

Exported text is read back with ezdxf to check it loads in a real CAD
library and that entities match the source outlines.
"""

import io

import ezdxf
import pytest

from gearprofile.core import build_profile
from gearprofile.io import dxf_from_polylines, save_dxf
from gearprofile.io.dxf import _num

HEADER = "0\nSECTION\n2\nHEADER\n9\n$ACADVER\n1\nAC1009\n0\nENDSEC\n0\nSECTION\n2\nENTITIES\n"
FOOTER = "0\nENDSEC\n0\nEOF\n"


def _polylines(text):
    doc = ezdxf.read(io.StringIO(text))
    return list(doc.modelspace().query("POLYLINE"))


class TestDocumentFraming:

    def test_empty_document(self):
        assert dxf_from_polylines([]) == HEADER + FOOTER

    def test_exact_polyline_text(self):
        text = dxf_from_polylines([[(0, 0), (1.5, -2)]])
        expected = HEADER + (
            "0\nPOLYLINE\n8\nGEAR_1\n66\n1\n70\n1\n"
            "0\nVERTEX\n8\nGEAR_1\n10\n0\n20\n0\n30\n0\n"
            "0\nVERTEX\n8\nGEAR_1\n10\n1.5\n20\n-2\n30\n0\n"
            "0\nSEQEND\n"
        ) + FOOTER
        assert text == expected

    def test_r12_version(self, external_spec):
        doc = ezdxf.read(io.StringIO(dxf_from_polylines(build_profile(external_spec))))
        assert doc.dxfversion == "AC1009"


class TestNumbers:

    @pytest.mark.parametrize("value,expected", [
        (44.0, "44"),
        (-1.5, "-1.5"),
        (1.23456, "1.235"),
        (0.1, "0.1"),
        (-0.0001, "0"),
        (17.99999, "18"),
        (-3.14159, "-3.142"),
    ])
    def test_rounding(self, value, expected):
        assert _num(value) == expected

    def test_non_finite(self):
        assert _num(float("nan")) == "NaN"
        assert _num(float("inf")) == "Infinity"
        assert _num(float("-inf")) == "-Infinity"

    def test_huge_values_unrounded(self):
        assert _num(1e306) == "1e+306"
        assert _num(-1e306) == "-1e+306"

    def test_huge_coordinates_export(self):
        text = dxf_from_polylines([[(0, 0), (1e306, 0)]])
        assert "10\n1e+306\n" in text


class TestEntities:

    def test_one_entity_per_outline(self, external_spec):
        teeth = build_profile(external_spec)
        assert len(_polylines(dxf_from_polylines(teeth))) == len(teeth) == 20

    def test_vertex_counts_match(self, internal_spec):
        spaces = build_profile(internal_spec)
        polylines = _polylines(dxf_from_polylines(spaces))
        assert [len(p) for p in polylines] == [len(s) for s in spaces]

    def test_coordinates_within_rounding(self, rack_spec):
        outline = build_profile(rack_spec)[0]
        exported = _polylines(dxf_from_polylines([outline]))[0]
        vertices = list(exported.points())
        assert len(vertices) == len(outline)
        for (x, y), v in zip(outline, vertices):
            assert v.x == pytest.approx(x, abs=0.0005 + 1e-9)
            assert v.y == pytest.approx(y, abs=0.0005 + 1e-9)
            assert v.z == 0.0

    def test_closed_flag(self, external_spec):
        polylines = _polylines(dxf_from_polylines(build_profile(external_spec)))
        assert all(p.is_closed for p in polylines)

    def test_layer_names(self, external_spec):
        polylines = _polylines(dxf_from_polylines(build_profile(external_spec)))
        assert [p.dxf.layer for p in polylines] == [f"GEAR_{i}" for i in range(1, 21)]

    def test_custom_layer(self):
        polylines = _polylines(dxf_from_polylines([[(0, 0), (1, 1)]], layer="RING"))
        assert polylines[0].dxf.layer == "RING_1"

    def test_short_outlines_skipped_keep_index(self):
        text = dxf_from_polylines([[(0, 0), (1, 0)], [(5, 5)], [], [(2, 2), (3, 3), (4, 2)]])
        polylines = _polylines(text)
        assert [p.dxf.layer for p in polylines] == ["GEAR_1", "GEAR_4"]
        assert len(polylines[1]) == 3


class TestSaveDxf:

    def test_writes_file(self, tmp_path, rack_spec):
        outlines = build_profile(rack_spec)
        path = tmp_path / "rack.dxf"
        save_dxf(outlines, path)
        assert path.read_text() == dxf_from_polylines(outlines)

    def test_readable_by_ezdxf(self, tmp_path, external_spec):
        path = tmp_path / "gear.dxf"
        save_dxf(build_profile(external_spec), path)
        doc = ezdxf.readfile(str(path))
        assert len(doc.modelspace().query("POLYLINE")) == 20

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "line.dxf"
        save_dxf([[(0, 0), (1, 0)]], str(path), layer="L")
        assert "L_1" in path.read_text()
