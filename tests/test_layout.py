"""Tests for layout providers, statistics and serialization."""

from __future__ import annotations

import json
import math
import tempfile
import unittest
from pathlib import Path

from fabflow.layout import (
    BoundingBox, Layer, MockGDSProvider, JSONLayoutProvider, InvalidLayoutError,
    get_layout_provider, load_layout, mock_cmos_layout,
    extract_layers, get_layout_stats, layout_to_dict, parse_layout,
)
from tests.cmos_fixture import make_reference_layout


class _TempDir(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.dir = Path(tmp.name)


class TestMockGDSProvider(_TempDir):

    def test_missing_file(self):
        missing = self.dir / "nope.gds"
        with self.assertRaises(FileNotFoundError) as cm:
            MockGDSProvider().load(missing)
        self.assertIn("GDS file not found", str(cm.exception))

    def test_returns_fixture_regardless_of_contents(self):
        gds = self.dir / "chip.gds"
        gds.write_bytes(b"\x00\x06\x00\x02\x02\x58")
        layout = MockGDSProvider().load(gds)
        self.assertEqual(layout.filename, str(gds))
        self.assertEqual(layout.layer_names, ["ACTIVE", "POLY", "CONTACT", "METAL1", "VIA1"])
        self.assertEqual(layout.feature_count, 950)
        self.assertEqual(layout, make_reference_layout(str(gds)))

    def test_fixture_units_and_counts(self):
        layout = mock_cmos_layout("x.gds")
        self.assertEqual(sum(l.feature_count for l in layout.layers), 950)
        self.assertEqual(layout.units.database_unit, 1e-9)
        self.assertEqual(layout.units.user_unit, 1e-6)


class TestJSONLayoutProvider(_TempDir):

    def test_round_trip_through_file(self):
        layout = make_reference_layout("die.json")
        path = self.dir / "die.json"
        path.write_text(json.dumps(layout_to_dict(layout)), encoding="utf-8")
        loaded = JSONLayoutProvider().load(path)
        self.assertEqual(loaded, layout)

    def test_filename_defaults_to_path(self):
        data = layout_to_dict(make_reference_layout())
        del data["filename"]
        del data["units"]
        path = self.dir / "anon.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        loaded = load_layout(path)
        self.assertEqual(loaded.filename, str(path))
        self.assertEqual(loaded.units.database_unit, 1e-9)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            JSONLayoutProvider().load(self.dir / "missing.json")

    def test_malformed_json_raises_invalid_layout(self):
        path = self.dir / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(InvalidLayoutError) as cm:
            JSONLayoutProvider().load(path)
        self.assertEqual(cm.exception.path, str(path))
        self.assertIn("Invalid layout file", str(cm.exception))

    def test_missing_fields_raise_invalid_layout(self):
        for content in ('{"layers": []}', "[1, 2]", '{"layers": [{"name": "M1"}]}'):
            path = self.dir / "partial.json"
            path.write_text(content, encoding="utf-8")
            with self.assertRaises(InvalidLayoutError, msg=content):
                load_layout(path)

    def test_provider_selection(self):
        self.assertIsInstance(get_layout_provider("a.json"), JSONLayoutProvider)
        self.assertIsInstance(get_layout_provider("a.JSON"), JSONLayoutProvider)
        self.assertIsInstance(get_layout_provider("a.gds"), MockGDSProvider)
        self.assertIsInstance(get_layout_provider("a.gds2"), MockGDSProvider)


class TestLayoutStats(unittest.TestCase):

    def test_reference_stats(self):
        stats = get_layout_stats(make_reference_layout())
        self.assertEqual(stats.total_layers, 5)
        self.assertEqual(stats.total_features, 950)
        self.assertAlmostEqual(stats.area_mm2, 1.0)
        self.assertAlmostEqual(stats.density, 950.0)

    def test_area_subtracts_minimums(self):
        layout = make_reference_layout(
            bounding_box=BoundingBox(min_x=500, min_y=500, max_x=1000, max_y=1000))
        stats = get_layout_stats(layout)
        self.assertAlmostEqual(stats.area_mm2, 0.25)
        self.assertAlmostEqual(stats.density, 3800.0)

    def test_degenerate_box_density_is_infinite(self):
        layout = make_reference_layout(
            bounding_box=BoundingBox(min_x=0, min_y=0, max_x=0, max_y=1000))
        stats = get_layout_stats(layout)
        self.assertEqual(stats.area_mm2, 0.0)
        self.assertTrue(math.isinf(stats.density))

    def test_extract_layers(self):
        layout = make_reference_layout(layers=(Layer(7, "M7", 3, datatype=2),))
        self.assertEqual(extract_layers(layout), [Layer(7, "M7", 3)])

    def test_bounding_box_geometry(self):
        bb = BoundingBox(min_x=10, min_y=20, max_x=110, max_y=70)
        self.assertEqual((bb.width, bb.height), (100, 50))
        self.assertAlmostEqual(bb.area, 5000.0)
        self.assertEqual(BoundingBox.from_bounds(bb.polygon.bounds), bb)


class TestLayoutSerialization(unittest.TestCase):

    def test_round_trip(self):
        layout = make_reference_layout()
        self.assertEqual(parse_layout(layout_to_dict(layout)), layout)
