"""Cycle detection and enumeration for directed graphs."""

from cyclegraph.graph import EdgeGraph, Graph, make_graph_from_edges
from cyclegraph.services.cycles import enumerate_cycles, find_cycle_nodes, find_cycles

__all__ = [
    "EdgeGraph",
    "Graph",
    "enumerate_cycles",
    "find_cycle_nodes",
    "find_cycles",
    "make_graph_from_edges",
]
