"""fab-gen command line.

Usage:
    fab-gen generate layout.gds -p cmos_standard -o flow.md -f markdown
    fab-gen analyze layout.gds
    fab-gen list-recipes
    fab-gen serve --port 8000
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fabflow import __version__
from fabflow.layout import InvalidLayoutError, load_layout
from fabflow.pipeline.config import PLANNING_RULES
from fabflow.pipeline.formatter import FORMATS, render_flow, write_output
from fabflow.pipeline.planner import generate_flow, analyze_layout
from fabflow.recipes import UnknownProcessTypeError, load_recipe_store


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fab-gen",
        description="Generate nanofabrication process flows from GDS-II mask layouts",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--recipes", default=None,
                   help="Recipe directory (default: packaged recipe_db, or $FABFLOW_RECIPE_DIR)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate process flow from GDS-II file")
    g.add_argument("gds_file", help="Path to GDS-II file (or a .json layout description)")
    g.add_argument("-p", "--process", default=PLANNING_RULES.default_process_type,
                   help="Process type (cmos_standard, mems_cantilever, "
                        "mems_pressure_sensor, photonics_waveguide)")
    g.add_argument("-o", "--output", default="process_flow.txt", help="Output file path")
    g.add_argument("-f", "--format", default="text",
                   help=f"Output format ({', '.join(FORMATS)}); unknown values write text")

    sub.add_parser("list-recipes", help="List available process recipes")

    a = sub.add_parser("analyze", help="Analyze GDS-II layout and suggest process")
    a.add_argument("gds_file", help="Path to GDS-II file (or a .json layout description)")

    sv = sub.add_parser("serve", help="Start the HTTP API")
    sv.add_argument("--host", default="127.0.0.1", help="Host to bind")
    sv.add_argument("--port", type=int, default=8000, help="Port to bind")

    return p


def _cmd_generate(args: argparse.Namespace) -> int:
    print("\n=== Fab Process Generator ===\n")

    store = load_recipe_store(args.recipes)

    print("Parsing GDS-II file...")
    layout = load_layout(args.gds_file)
    print(f"✓ Found {len(layout.layers)} layers")

    print("\nGenerating process flow...")
    flow = generate_flow(layout, store, args.process)
    print(f"✓ Generated {flow.total_steps} process steps")

    output = render_flow(flow, args.format)
    write_output(args.output, output)
    print(f"\n✓ Process flow saved to {args.output}\n")

    print("Process Summary:")
    print(f"  Process: {flow.name}")
    print(f"  Total Steps: {flow.total_steps}")
    print(f"  Lithography Masks: {flow.layers_used}")
    print(f"  Estimated Duration: {flow.estimated_duration_hours} hours\n")
    return 0


def _cmd_list_recipes(args: argparse.Namespace) -> int:
    print("\n=== Available Process Recipes ===\n")

    store = load_recipe_store(args.recipes)
    for recipe in store.recipes():
        print(recipe.id)
        print(f"  Name: {recipe.name}")
        print(f"  Steps: {len(recipe.steps)}")
        if recipe.technology_node:
            print(f"  Technology: {recipe.technology_node}")
        if recipe.application:
            print(f"  Application: {recipe.application}")
        print()
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    print("\n=== Layout Analysis ===\n")

    layout = load_layout(args.gds_file)
    analysis = analyze_layout(layout)

    print("Layout Information:")
    print(f"  Layers: {len(layout.layers)}")
    print(f"  Features: {layout.feature_count}")
    print(f"  Min Feature Size: {analysis.min_feature_size} µm")
    print(f"  Complexity: {analysis.complexity}")

    print("\nSuggested Process:")
    print(f"  Type: {analysis.suggested_process}")
    print(f"  Reason: {analysis.reason}")
    print()
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from fabflow.web.server import main as serve_main
    serve_main(host=args.host, port=args.port, recipe_dir=args.recipes)
    return 0


_COMMANDS = {
    "generate": _cmd_generate,
    "list-recipes": _cmd_list_recipes,
    "analyze": _cmd_analyze,
    "serve": _cmd_serve,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.recipes is not None:
        args.recipes = Path(args.recipes)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.cmd](args)
    except (FileNotFoundError, InvalidLayoutError, UnknownProcessTypeError) as exc:
        print(f"\n✗ Error: {exc}\n", file=sys.stderr)
        return 1
