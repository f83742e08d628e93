"""
conngraph.graph
===============

Undirected graph store + connectivity analyses.

Public API:

- Graph                            : immutable undirected graph (graphblas adjacency).
- load_graph / save_matrix         : binary adjacency-matrix file format.
- articulation_points_and_bridges  : cut vertices and bridges.
- biconnected_components           : edge partition into biconnected components.
- connected_components             : vertex partition into connected components.
- analyze                          : all of the above as one ConnectivityReport.

The traversal engine (conngraph.graph.traversal) is public for custom hooks;
everything else in this package is an internal implementation detail.
"""

from __future__ import annotations

from .core import Graph
from .io import load_graph, read_matrix, save_matrix, save_graph
from .analysis import (
    ArticulationResult,
    ConnectivityReport,
    articulation_points_and_bridges,
    biconnected_components,
    connected_components,
    analyze,
)

__all__ = [
    "Graph",
    "load_graph",
    "read_matrix",
    "save_matrix",
    "save_graph",
    "ArticulationResult",
    "ConnectivityReport",
    "articulation_points_and_bridges",
    "biconnected_components",
    "connected_components",
    "analyze",
]
