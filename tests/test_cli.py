"""End-to-end tests for the fab-gen command line."""

from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from fabflow.cli import main, build_parser
from fabflow.recipes import recipe_to_dict
from tests.cmos_fixture import make_small_recipe


class _CLITest(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.dir = Path(tmp.name)
        self.gds = self.dir / "chip.gds"
        self.gds.write_bytes(b"\x00\x06\x00\x02")

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()


class TestGenerate(_CLITest):

    def test_generate_json(self):
        target = self.dir / "flow.json"
        code, out, _ = self.run_cli("generate", str(self.gds), "-o", str(target), "-f", "json")
        self.assertEqual(code, 0)
        data = json.loads(target.read_text(encoding="utf-8"))
        self.assertEqual(data["process_type"], "cmos_standard")
        self.assertEqual(data["total_steps"], 24)
        self.assertEqual(data["estimated_duration_hours"], 47.3)
        self.assertEqual(data["layout_file"], str(self.gds))
        self.assertIn("✓ Found 5 layers", out)
        self.assertIn("Estimated Duration: 47.3 hours", out)

    def test_generate_markdown(self):
        target = self.dir / "flow.md"
        code, _, _ = self.run_cli("generate", str(self.gds), "-p", "photonics_waveguide",
                                  "-o", str(target), "-f", "markdown")
        self.assertEqual(code, 0)
        text = target.read_text(encoding="utf-8")
        self.assertTrue(text.startswith("# Fabrication Process Flow"))
        self.assertIn("Layer WAVEGUIDE not found in layout", text)

    def test_unknown_format_writes_text(self):
        target = self.dir / "flow.out"
        code, _, _ = self.run_cli("generate", str(self.gds), "-o", str(target), "-f", "yaml")
        self.assertEqual(code, 0)
        self.assertIn("FABRICATION PROCESS FLOW", target.read_text(encoding="utf-8"))

    def test_unknown_process_type_writes_nothing(self):
        target = self.dir / "flow.txt"
        code, _, err = self.run_cli("generate", str(self.gds), "-p", "nonexistent_type",
                                    "-o", str(target))
        self.assertEqual(code, 1)
        self.assertIn("✗ Error: Unknown process type: nonexistent_type", err)
        self.assertFalse(target.exists())

    def test_missing_layout(self):
        target = self.dir / "flow.txt"
        code, _, err = self.run_cli("generate", str(self.dir / "missing.gds"), "-o", str(target))
        self.assertEqual(code, 1)
        self.assertIn("GDS file not found", err)
        self.assertFalse(target.exists())

    def test_malformed_json_layout(self):
        bad = self.dir / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        target = self.dir / "flow.txt"
        code, _, err = self.run_cli("generate", str(bad), "-o", str(target))
        self.assertEqual(code, 1)
        self.assertIn("✗ Error: Invalid layout file", err)
        self.assertFalse(target.exists())

    def test_custom_recipe_directory(self):
        recipes = self.dir / "recipes"
        recipes.mkdir()
        (recipes / "small.json").write_text(
            json.dumps(recipe_to_dict(make_small_recipe("small_test"))), encoding="utf-8")
        target = self.dir / "flow.json"
        code, _, _ = self.run_cli("--recipes", str(recipes), "generate", str(self.gds),
                                  "-p", "small_test", "-o", str(target), "-f", "json")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(target.read_text(encoding="utf-8"))["estimated_duration_hours"], 10.5)


class TestOtherCommands(_CLITest):

    def test_analyze(self):
        code, out, _ = self.run_cli("analyze", str(self.gds))
        self.assertEqual(code, 0)
        self.assertIn("Min Feature Size: 32.4 µm", out)
        self.assertIn("Complexity: medium", out)
        self.assertIn("Type: cmos_standard", out)

    def test_analyze_missing_file(self):
        code, _, err = self.run_cli("analyze", str(self.dir / "missing.gds"))
        self.assertEqual(code, 1)
        self.assertIn("✗ Error", err)

    def test_list_recipes(self):
        code, out, _ = self.run_cli("list-recipes")
        self.assertEqual(code, 0)
        for pt in ("cmos_standard", "mems_cantilever", "mems_pressure_sensor", "photonics_waveguide"):
            self.assertIn(pt, out)
        self.assertIn("  Steps: 24", out)

    def test_defaults(self):
        args = build_parser().parse_args(["generate", "x.gds"])
        self.assertEqual((args.process, args.output, args.format),
                         ("cmos_standard", "process_flow.txt", "text"))

    def test_command_required(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                build_parser().parse_args([])
