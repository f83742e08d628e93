from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Set, Tuple

import numpy as np

from .core import Graph
from .traversal import NullHooks, TraversalContext, preorder, traverse

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class ArticulationResult:
    """Cut vertices (ascending) and bridges as (parent, child) in detection order."""

    articulation_points: Tuple[int, ...]
    bridges: Tuple[Edge, ...]


@dataclass(frozen=True, slots=True)
class ConnectivityReport:
    """All connectivity results for one graph."""

    num_vertices: int
    articulation_points: Tuple[int, ...]
    bridges: Tuple[Edge, ...]
    biconnected_components: Tuple[Tuple[Edge, ...], ...]
    connected_components: Tuple[Tuple[int, ...], ...]


# ---------------------------------------------------------------------------
# Articulation points and bridges
# ---------------------------------------------------------------------------


@dataclass
class ArticulationHooks(NullHooks):
    """
    Emits cut vertices and bridges on the tree-edge return path.

    - A DFS root is a cut vertex iff it has more than one tree child.
    - A non-root v is a cut vertex iff low[c] >= disc[v] for some child c.
    - Tree edge (v, c) is a bridge iff low[c] > disc[v].
    """

    points: Set[int] = field(default_factory=set)
    bridges: List[Edge] = field(default_factory=list)
    root_children: int = 0

    def on_root(self, ctx: TraversalContext, root: int) -> None:
        self.root_children = 0

    def on_tree_descend(self, ctx: TraversalContext, v: int, child: int) -> None:
        if v == ctx.root:
            self.root_children += 1

    def on_tree_return(self, ctx: TraversalContext, v: int, child: int) -> None:
        if ctx.is_root(v):
            if self.root_children > 1:
                self.points.add(v)
        elif ctx.low[child] >= ctx.disc[v]:
            self.points.add(v)

        if ctx.low[child] > ctx.disc[v]:
            self.bridges.append((int(v), int(child)))


def articulation_points_and_bridges(graph: Graph) -> ArticulationResult:
    hooks = ArticulationHooks()
    traverse(graph, hooks)
    return ArticulationResult(
        articulation_points=tuple(sorted(int(v) for v in hooks.points)),
        bridges=tuple(hooks.bridges),
    )


# ---------------------------------------------------------------------------
# Biconnected components
# ---------------------------------------------------------------------------


@dataclass
class BiconnectedHooks(NullHooks):
    """
    Edge-stack biconnected components.

    Tree edges are pushed on descent. A back edge (v, w) is pushed only from
    its deeper endpoint (disc[w] < disc[v]) so it is never pushed twice.
    When low[c] >= disc[v] after returning from child c, edges are popped
    down to and including (v, c) and form one component. Whatever is left
    when a DFS tree completes is flushed as a final component.
    """

    stack: List[Edge] = field(default_factory=list)
    components: List[Tuple[Edge, ...]] = field(default_factory=list)

    def on_tree_descend(self, ctx: TraversalContext, v: int, child: int) -> None:
        self.stack.append((int(v), int(child)))

    def on_back_edge(self, ctx: TraversalContext, v: int, w: int) -> None:
        if ctx.disc[w] < ctx.disc[v]:
            self.stack.append((int(v), int(w)))

    def on_tree_return(self, ctx: TraversalContext, v: int, child: int) -> None:
        if ctx.low[child] < ctx.disc[v]:
            return
        closing = (int(v), int(child))
        component: List[Edge] = []
        while self.stack:
            edge = self.stack.pop()
            component.append(edge)
            if edge == closing:
                break
        self.components.append(tuple(component))

    def on_root_done(self, ctx: TraversalContext, root: int) -> None:
        if self.stack:
            self.components.append(tuple(self.stack))
            self.stack = []


def biconnected_components(graph: Graph) -> List[Tuple[Edge, ...]]:
    hooks = BiconnectedHooks()
    traverse(graph, hooks)
    return hooks.components


# ---------------------------------------------------------------------------
# Connected components
# ---------------------------------------------------------------------------


def connected_components(graph: Graph) -> List[Tuple[int, ...]]:
    """
    Vertex sets of the connected components.

    Components are ordered by their lowest vertex id (the root each one was
    discovered from); vertices within a component are in DFS preorder.
    """
    visited = np.zeros(graph.num_vertices, dtype=bool)
    components: List[Tuple[int, ...]] = []
    for root in range(graph.num_vertices):
        if not visited[root]:
            components.append(tuple(preorder(graph, root, visited)))
    return components


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


def analyze(graph: Graph) -> ConnectivityReport:
    """Run all three analyses on ``graph``; each owns its traversal state."""
    logger.debug("Analysing %r", graph)

    cut = articulation_points_and_bridges(graph)
    logger.info(
        "Found %d articulation points and %d bridges",
        len(cut.articulation_points),
        len(cut.bridges),
    )

    bcc = biconnected_components(graph)
    logger.info("Found %d biconnected components", len(bcc))

    cc = connected_components(graph)
    logger.info("Found %d connected components", len(cc))

    return ConnectivityReport(
        num_vertices=graph.num_vertices,
        articulation_points=cut.articulation_points,
        bridges=cut.bridges,
        biconnected_components=tuple(bcc),
        connected_components=tuple(cc),
    )


__all__ = [
    "Edge",
    "ArticulationResult",
    "ConnectivityReport",
    "ArticulationHooks",
    "BiconnectedHooks",
    "articulation_points_and_bridges",
    "biconnected_components",
    "connected_components",
    "analyze",
]
