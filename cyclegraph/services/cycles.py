"""Cycle detection and enumeration over an abstract directed graph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Hashable, Set

    from cyclegraph.graph import Graph

T = TypeVar("T", bound="Hashable")

logger = logging.getLogger(__name__)


def find_cycle_nodes(graph: Graph[T]) -> set[T] | None:
    """Return the nodes lying on at least one cycle, or ``None`` for a DAG.

    Repeatedly peels every node that has no predecessors or no successors
    among the remaining nodes. Such a node cannot be on a cycle, and removing
    it cannot break one. When a pass finds nothing to peel, whatever is left
    is returned: every node on a cycle, plus any node that only sits on a path
    from one cycle to another. O(V) passes of O(V+E) work each.
    """
    remaining: dict[T, None] = dict.fromkeys(graph.all_nodes())

    out_edges: dict[T, dict[T, None]] = {}
    for node in remaining:
        out_edges[node] = {o: None for o in graph.adjacent_nodes(node) if o in remaining}

    in_edges: dict[T, dict[T, None]] = {node: {} for node in remaining}
    for node, outs in out_edges.items():
        for o in outs:
            in_edges[o][node] = None

    passes = 0
    while remaining:
        passes += 1
        to_remove = [n for n in remaining if not in_edges[n] or not out_edges[n]]
        if not to_remove:
            logger.debug(
                "Peeling finished after %d passes: %d cycle nodes", passes, len(remaining)
            )
            return set(remaining)

        for node in to_remove:
            for o in out_edges.pop(node):
                in_edges[o].pop(node, None)
            for i in in_edges.pop(node):
                out_edges[i].pop(node, None)
            del remaining[node]
        logger.debug("Pass %d peeled %d nodes, %d left", passes, len(to_remove), len(remaining))

    return None


def enumerate_cycles(graph: Graph[T], cycle_nodes: Set[T]) -> list[list[T]]:
    """Partition *cycle_nodes* into simple cycles.

    Starting from the first remaining node, walk along the first successor
    that is still remaining until the walk reaches a node it has already
    visited; the tail of the walk from that node on is emitted as a cycle and
    its nodes are removed. A node with no remaining successor is dropped
    without emitting anything.

    *cycle_nodes* must be a result of :func:`find_cycle_nodes` for the same
    graph; other sets give unspecified (but non-failing) results. The set is
    not modified.
    """
    remaining: dict[T, None] = {n: None for n in graph.all_nodes() if n in cycle_nodes}
    for n in cycle_nodes:
        remaining.setdefault(n, None)

    cycles: list[list[T]] = []
    while remaining:
        node = next(iter(remaining))
        visited: list[T] = [node]
        positions: dict[T, int] = {node: 0}

        while True:
            for nxt in graph.adjacent_nodes(node):
                if nxt in remaining:
                    break
            else:
                logger.debug("Dropping %r: no remaining successor", node)
                del remaining[node]
                break

            index = positions.get(nxt)
            if index is not None:
                cycle = visited[index:]
                for x in cycle:
                    del remaining[x]
                cycles.append(cycle)
                break

            positions[nxt] = len(visited)
            visited.append(nxt)
            node = nxt

    logger.debug("Enumerated %d cycles", len(cycles))
    return cycles


def find_cycles(graph: Graph[T]) -> list[list[T]]:
    """Return a covering of the graph's cycle nodes by simple cycles, or ``[]`` for a DAG."""
    cycle_nodes = find_cycle_nodes(graph)
    if cycle_nodes is None:
        return []
    return enumerate_cycles(graph, cycle_nodes)
