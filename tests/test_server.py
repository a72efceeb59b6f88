"""Tests for the HTTP API."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from fabflow.web.server import app, get_store
from tests.cmos_fixture import make_store


class TestServer(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.gds = Path(tmp.name) / "chip.gds"
        self.gds.write_bytes(b"\x00")
        store = make_store()
        app.dependency_overrides[get_store] = lambda: store
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def test_list_recipes(self):
        r = self.client.get("/api/recipes")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["recipes"][0]["id"], "small_test")

    def test_get_recipe(self):
        self.assertEqual(self.client.get("/api/recipes/small_test").json()["name"],
                         "Small Test Process")
        self.assertEqual(self.client.get("/api/recipes/nope").status_code, 404)

    def test_analyze(self):
        r = self.client.post("/api/analyze", json={"gds_file": str(self.gds)})
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["analysis"]["suggested_process"], "cmos_standard")
        self.assertEqual(body["analysis"]["min_feature_size"], 32.4)
        self.assertEqual(body["stats"]["total_layers"], 5)

    def test_analyze_missing_file(self):
        r = self.client.post("/api/analyze", json={"gds_file": str(self.gds) + ".missing"})
        self.assertEqual(r.status_code, 404)

    def test_analyze_malformed_layout(self):
        bad = self.gds.with_name("bad.json")
        bad.write_text("{not json", encoding="utf-8")
        r = self.client.post("/api/analyze", json={"gds_file": str(bad)})
        self.assertEqual(r.status_code, 400)
        self.assertIn("Invalid layout file", r.json()["detail"])

    def test_generate_json(self):
        r = self.client.post("/api/generate",
                             json={"gds_file": str(self.gds), "process_type": "small_test"})
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["total_steps"], 6)
        self.assertEqual(body["estimated_duration_hours"], 10.5)

    def test_generate_markdown(self):
        r = self.client.post("/api/generate", json={
            "gds_file": str(self.gds), "process_type": "small_test", "format": "markdown"})
        self.assertTrue(r.json()["content"].startswith("# Fabrication Process Flow"))

    def test_generate_unknown_process_type(self):
        r = self.client.post("/api/generate",
                             json={"gds_file": str(self.gds), "process_type": "nonexistent_type"})
        self.assertEqual(r.status_code, 400)
        self.assertIn("Unknown process type", r.json()["detail"])
