"""TOML reader/writer for edge files.

An edge file maps each node to the list of its direct successors::

    [edges]
    a = ["b", "c"]
    b = ["a"]
"""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

import tomli_w

from cyclegraph.exceptions import EdgeFileError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path


def parse_edges(text: str) -> dict[str, list[str]]:
    """Parse edge-file contents into a mapping of node -> successors."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML: {exc}"
        raise EdgeFileError(msg) from exc

    edges_data: Any = data.get("edges", {})
    if not isinstance(edges_data, dict):
        msg = "'edges' must be a table"
        raise EdgeFileError(msg)

    result: dict[str, list[str]] = {}
    for node, successors in edges_data.items():
        if not isinstance(successors, list):
            msg = f"Successors of {node!r} must be a list, got {type(successors).__name__}"
            raise EdgeFileError(msg)
        for succ in successors:
            if not isinstance(succ, str):
                msg = f"Successor of {node!r} must be a string: {succ!r}"
                raise EdgeFileError(msg)
        result[node] = list(successors)
    return result


def parse_edges_file(path: Path) -> dict[str, list[str]]:
    """Read and parse an edge file. A missing ``[edges]`` table gives an empty mapping."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"{path} is not valid UTF-8: {exc}"
        raise EdgeFileError(msg) from exc
    return parse_edges(text)


def write_edges_file(path: Path, edges: Mapping[str, Iterable[str]]) -> None:
    """Write *edges* back to *path* in edge-file format."""
    edges_data = {node: list(successors) for node, successors in edges.items()}
    path.write_bytes(tomli_w.dumps({"edges": edges_data}).encode("utf-8"))
