"""
depgraph/cli.py — Command-line interface for depgraph.

Usage:
    depgraph render tree.json                    # DOT on stdout
    depgraph render tree.json --format puml -o deps.puml
    depgraph render a.json b.json --merge-by-group-id --reduce
    depgraph check edges.csv                     # exit 1 on a cycle

'.json' inputs are dependency trees, '.csv' inputs are edge lists
(see depgraph.dependency.loader for both formats).
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import pandas as pd

from depgraph.config import DEFAULT_CONFIG, DepGraphConfig
from depgraph.dependency.loader import load_edge_frame, load_trees
from depgraph.dependency.tree import TreeNode
from depgraph.formatters.registry import FORMAT_NAMES
from depgraph.graph.cycles import format_cycle
from depgraph.pipeline import build_dependency_graph, render_dependency_graph

EXIT_CYCLE = 1
EXIT_INPUT_ERROR = 2


# ── Logging setup ─────────────────────────────────────────────────────────────

def _setup_logging(level: str = "WARNING") -> None:
    """Configure root logger with timestamps on stderr."""
    numeric = getattr(logging, level.upper(), logging.WARNING)
    fmt = "%(asctime)s  %(levelname)-8s  %(name)s — %(message)s"
    datefmt = "%H:%M:%S"
    logging.basicConfig(level=numeric, format=fmt, datefmt=datefmt, stream=sys.stderr)


logger = logging.getLogger("depgraph.cli")


# ── Input loading ─────────────────────────────────────────────────────────────

def _load_inputs(paths: list[str]) -> tuple[list[TreeNode], pd.DataFrame | None]:
    """Split inputs by extension: JSON trees and CSV edge lists (concatenated)."""
    trees: list[TreeNode] = []
    frames: list[pd.DataFrame] = []
    for path in paths:
        suffix = Path(path).suffix.lower()
        if suffix == ".json":
            trees.extend(load_trees(path))
        elif suffix == ".csv":
            frames.append(load_edge_frame(path))
        else:
            raise ValueError(f"{path}: unsupported input type (expected .json or .csv)")

    edge_frame = pd.concat(frames, ignore_index=True) if frames else None
    return trees, edge_frame


def _config_from_args(args: argparse.Namespace) -> DepGraphConfig:
    return dataclasses.replace(
        DEFAULT_CONFIG,
        graph_name=args.graph_name,
        output_format=args.format,
        omit_self_references=args.omit_self_references,
        merge_by_group_id=args.merge_by_group_id,
        reduce_edges=args.reduce,
        detect_cycles=args.detect_cycles,
        exclude_scopes=tuple(args.exclude_scope),
        include_optional=not args.no_optional,
        show_group_ids=args.show_group_ids,
        show_artifact_ids=not args.hide_artifact_ids,
        show_types=args.show_types,
        show_classifiers=args.show_classifiers,
        show_versions_on_nodes=args.show_versions,
        show_versions_on_edges=args.show_edge_versions,
    )


# ── Subcommand: render ────────────────────────────────────────────────────────

def cmd_render(args: argparse.Namespace) -> int:
    """Build, optionally reduce and check, and write the formatted graph."""
    _setup_logging(args.log_level)

    try:
        config = _config_from_args(args)
        trees, edge_frame = _load_inputs(args.inputs)
        result = render_dependency_graph(trees, edge_frame, config)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_INPUT_ERROR

    if args.output:
        try:
            Path(args.output).write_text(result.text, encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", args.output, exc)
            return EXIT_INPUT_ERROR
        logger.info("Wrote %s graph to %s", config.output_format, args.output)
    else:
        sys.stdout.write(result.text)

    logger.info(
        "%d nodes, %d edges (%d removed by reduction).",
        result.node_count,
        result.edge_count,
        len(result.removed_edges),
    )
    return 0


# ── Subcommand: check ─────────────────────────────────────────────────────────

def cmd_check(args: argparse.Namespace) -> int:
    """Report whether the dependency graph contains a cycle."""
    _setup_logging(args.log_level)

    try:
        trees, edge_frame = _load_inputs(args.inputs)
        builder = build_dependency_graph(trees, edge_frame, DEFAULT_CONFIG)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_INPUT_ERROR

    if builder.detect_cycles():
        print(f"Cycle: {format_cycle(builder.find_cycle())}")
        return EXIT_CYCLE

    print(f"No cycles ({len(builder.nodes)} nodes, {len(builder.edges)} edges).")
    return 0


# ── Argument parser ───────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="depgraph",
        description="Build, reduce and render dependency graphs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # DOT graph of one project on stdout
  depgraph render tree.json

  # PlantUML graph of several modules, aggregated by group id
  depgraph render a.json b.json --format puml --merge-by-group-id --reduce -o deps.puml

  # Fail when the edge list contains a cycle
  depgraph check edges.csv
        """,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    # render
    p_render = subparsers.add_parser("render", help="Render the dependency graph")
    p_render.add_argument("inputs", nargs="+", metavar="INPUT", help=".json trees or .csv edge lists")
    p_render.add_argument(
        "--format", default=DEFAULT_CONFIG.output_format, choices=FORMAT_NAMES,
        help="Output format (default: dot)",
    )
    p_render.add_argument("-o", "--output", default=None, metavar="PATH", help="Output file (default: stdout)")
    p_render.add_argument("--graph-name", default=DEFAULT_CONFIG.graph_name, metavar="NAME")
    p_render.add_argument("--reduce", action="store_true", help="Remove edges implied by older paths")
    p_render.add_argument("--detect-cycles", action="store_true", help="Log a warning for a dependency cycle")
    p_render.add_argument("--omit-self-references", action="store_true")
    p_render.add_argument(
        "--merge-by-group-id", action="store_true",
        help="One node per group id (implies --omit-self-references)",
    )
    p_render.add_argument(
        "--exclude-scope", action="append", default=[], metavar="SCOPE",
        help="Prune dependencies in SCOPE (repeatable)",
    )
    p_render.add_argument("--no-optional", action="store_true", help="Prune optional dependencies")
    p_render.add_argument("--show-group-ids", action="store_true")
    p_render.add_argument("--hide-artifact-ids", action="store_true")
    p_render.add_argument("--show-types", action="store_true")
    p_render.add_argument("--show-classifiers", action="store_true")
    p_render.add_argument("--show-versions", action="store_true", help="Versions on nodes")
    p_render.add_argument("--show-edge-versions", action="store_true", help="Versions on edges")
    p_render.set_defaults(func=cmd_render)

    # check
    p_check = subparsers.add_parser("check", help="Exit 1 if the graph contains a cycle")
    p_check.add_argument("inputs", nargs="+", metavar="INPUT")
    p_check.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
