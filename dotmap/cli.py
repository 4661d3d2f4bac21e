"""CLI entry point for compiling a JSON graph document to DOT, CSS, SVG or a JSON dump."""

from __future__ import annotations

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import graphviz

from .exceptions import DotmapError
from .generators import generate_css, generate_dot
from .loader import load_registry_file
from .registry import Registry
from .render import GraphvizEngine, render_sync

GeneratorFn = Callable[[Registry], str]


def _render_svg(registry: Registry) -> str:
    # main() has already run or skipped placeholder synthesis.
    return render_sync(registry, GraphvizEngine(), synthesize=False)


def _dump_json(registry: Registry) -> str:
    # RawMarkup values serialize as their markup text.
    return json.dumps(registry.to_dict(), ensure_ascii=False, indent=2, default=str) + "\n"


FORMAT_TO_GENERATOR: Dict[str, GeneratorFn] = {
    "dot": generate_dot,
    "css": generate_css,
    "json": _dump_json,
    "svg": _render_svg,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compile a JSON graph document to Graphviz DOT, the highlight stylesheet, SVG, or a registry dump.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # DOT to stdout
  dotmap --in services.json --fmt dot

  # Interactive SVG, only connected nodes
  dotmap --in services.json --fmt svg --prune --out services.svg
        """,
    )
    parser.add_argument("--in", dest="input_path", required=True, help="Path to the graph JSON file")
    parser.add_argument(
        "--fmt",
        dest="format",
        required=True,
        choices=sorted(FORMAT_TO_GENERATOR),
        help="Output format",
    )
    parser.add_argument(
        "--out",
        dest="output_path",
        default=None,
        help="Optional path to write the output; defaults to stdout",
    )
    parser.add_argument("--prune", action="store_true", help="Drop nodes without any edge")
    parser.add_argument(
        "--no-missing",
        dest="missing",
        action="store_false",
        help="Do not add placeholder nodes for edge endpoints that were never declared",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        registry = load_registry_file(args.input_path)
        if args.missing:
            registry.generate_missing_nodes()
        if args.prune:
            registry.prune_unconnected_nodes()
        result = FORMAT_TO_GENERATOR[args.format](registry)
    except (OSError, DotmapError, graphviz.ExecutableNotFound, subprocess.CalledProcessError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output_path:
        Path(args.output_path).write_text(result, encoding="utf-8")
    else:
        print(result, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
