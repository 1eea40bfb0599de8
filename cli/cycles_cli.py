"""Command-line tool that reports the cycles of a graph stored in an edge file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from cyclegraph.config import Settings
from cyclegraph.exceptions import EdgeFileError
from cyclegraph.filesystem.edges_toml import parse_edges_file
from cyclegraph.graph import make_graph_from_edges
from cyclegraph.services.cycles import enumerate_cycles, find_cycle_nodes

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    """Configure CLI logging."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )


def sort_edges(edges: dict[str, list[str]]) -> dict[str, list[str]]:
    """Return *edges* with keys and successor lists in sorted order."""
    return {node: sorted(edges[node]) for node in sorted(edges)}


def format_cycle(cycle: list[str]) -> str:
    """Render a cycle as ``a -> b -> a``."""
    return " -> ".join([*cycle, cycle[0]])


def report_cycles(edges: dict[str, list[str]], limit: int = 0) -> list[str]:
    """Find the cycles of *edges* and return the report lines."""
    graph = make_graph_from_edges(edges)
    cycle_nodes = find_cycle_nodes(graph)
    if cycle_nodes is None:
        return ["No cycles found."]

    cycles = enumerate_cycles(graph, cycle_nodes)
    covered = sum(len(cycle) for cycle in cycles)
    lines = [f"Found {len(cycles)} cycle(s) over {covered} node(s):"]
    shown = cycles[:limit] if limit else cycles
    lines.extend(f"  {format_cycle(cycle)}" for cycle in shown)
    if len(shown) < len(cycles):
        lines.append(f"  ... {len(cycles) - len(shown)} more")
    return lines


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: {exc}")
        return 1

    parser = argparse.ArgumentParser(
        prog="cyclegraph",
        description="Report the cycles of a directed graph read from a TOML edge file",
    )
    parser.add_argument("edge_file", help="TOML file with an [edges] table")
    parser.add_argument(
        "--debug", action="store_true", default=settings.debug, help="Enable debug logging"
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        default=settings.sort_nodes,
        help="Sort nodes and successors before searching",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.max_cycles_shown,
        help="Maximum number of cycles to print (default: all)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.debug)
    if args.limit < 0:
        print("Error: --limit must not be negative")
        return 1

    path = Path(args.edge_file)
    try:
        edges = parse_edges_file(path)
    except (EdgeFileError, OSError) as exc:
        print(f"Error: {exc}")
        return 1

    logger.debug("Loaded %d edge entries from %s", len(edges), path)
    if args.sort:
        edges = sort_edges(edges)

    for line in report_cycles(edges, args.limit):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
