"""Abstract graph capability and an edge-mapping backed implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping

T = TypeVar("T", bound="Hashable")


@runtime_checkable
class Graph(Protocol[T]):
    """Read-only view of a directed graph.

    Algorithms consume a graph only through these two methods, so any backing
    representation works as long as reads are stable for the duration of a call.
    """

    def all_nodes(self) -> Iterable[T]:
        """Return every node of the graph."""
        ...

    def adjacent_nodes(self, node: T) -> Iterable[T]:
        """Return the direct successors of *node*, or nothing for sinks and unknown nodes."""
        ...


@dataclass(frozen=True)
class EdgeGraph(Generic[T]):
    """Graph backed by an ordered snapshot of an edge mapping."""

    nodes: tuple[T, ...]
    edges: Mapping[T, tuple[T, ...]]

    def all_nodes(self) -> tuple[T, ...]:
        return self.nodes

    def adjacent_nodes(self, node: T) -> tuple[T, ...]:
        return self.edges.get(node, ())


def make_graph_from_edges(edges: Mapping[T, Iterable[T]]) -> EdgeGraph[T]:
    """Build a graph from a mapping of node -> direct successors.

    The node set is the union of all keys and all successors, in first-seen
    order. Successors keep the iteration order of the supplied collections.
    """
    nodes: dict[T, None] = {}
    snapshot: dict[T, tuple[T, ...]] = {}
    for node, outs in edges.items():
        nodes.setdefault(node, None)
        successors = tuple(outs)
        for succ in successors:
            nodes.setdefault(succ, None)
        snapshot[node] = successors
    return EdgeGraph(nodes=tuple(nodes), edges=snapshot)
