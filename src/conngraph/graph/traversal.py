from __future__ import annotations

"""
Low-link depth-first traversal engine.

One driver, :func:`traverse`, walks the whole DFS forest of a Graph and
maintains discovery times and low-link values. Analyses plug in through a
:class:`TraversalHooks` object that is told about roots, tree edges (on the
way down and on the way back up) and back edges.

The driver keeps an explicit stack of :class:`Frame` objects instead of
recursing, so arbitrarily deep DFS trees (a path graph of N vertices has
depth N) never touch the interpreter's recursion limit. Frames resume their
neighbour scan where they left off, which reproduces the visiting order of
the textbook recursive formulation exactly.
"""

from dataclasses import dataclass
from typing import Iterator, List, Protocol

import numpy as np

from .core import Graph

NO_PARENT = -1


@dataclass(slots=True)
class Frame:
    """One suspended DFS call: vertex, next neighbour index, tree parent."""

    vertex: int
    parent: int
    cursor: int = 0


@dataclass(slots=True)
class TraversalContext:
    """
    Per-run traversal state.

    Owned by exactly one analysis run; never shared between runs.
    """

    visited: np.ndarray
    disc: np.ndarray
    low: np.ndarray
    parent: np.ndarray
    clock: int = 0
    root: int = NO_PARENT

    @classmethod
    def for_graph(cls, graph: Graph) -> TraversalContext:
        n = graph.num_vertices
        return cls(
            visited=np.zeros(n, dtype=bool),
            disc=np.zeros(n, dtype=np.int64),
            low=np.zeros(n, dtype=np.int64),
            parent=np.full(n, NO_PARENT, dtype=np.int64),
        )

    def discover(self, v: int, parent: int) -> None:
        self.visited[v] = True
        self.disc[v] = self.clock
        self.low[v] = self.clock
        self.parent[v] = parent
        self.clock += 1

    def is_root(self, v: int) -> bool:
        return self.parent[v] == NO_PARENT


class TraversalHooks(Protocol):
    """Protocol for analyses driven by :func:`traverse`."""

    def on_root(self, ctx: TraversalContext, root: int) -> None:
        """A new DFS tree starts at ``root`` (already discovered)."""

    def on_tree_descend(self, ctx: TraversalContext, v: int, child: int) -> None:
        """Tree edge ``v -> child`` is about to be followed."""

    def on_tree_return(self, ctx: TraversalContext, v: int, child: int) -> None:
        """``child`` is finished and ``low[v]`` has been relaxed through it."""

    def on_back_edge(self, ctx: TraversalContext, v: int, w: int) -> None:
        """Non-tree edge ``v - w`` to an already visited, non-parent vertex."""

    def on_root_done(self, ctx: TraversalContext, root: int) -> None:
        """The DFS tree rooted at ``root`` is complete."""


class NullHooks:
    """No-op base for TraversalHooks implementations."""

    def on_root(self, ctx: TraversalContext, root: int) -> None:
        pass

    def on_tree_descend(self, ctx: TraversalContext, v: int, child: int) -> None:
        pass

    def on_tree_return(self, ctx: TraversalContext, v: int, child: int) -> None:
        pass

    def on_back_edge(self, ctx: TraversalContext, v: int, w: int) -> None:
        pass

    def on_root_done(self, ctx: TraversalContext, root: int) -> None:
        pass


def traverse(graph: Graph, hooks: TraversalHooks) -> TraversalContext:
    """
    Run a full low-link DFS over every vertex of ``graph``.

    Roots are tried in ascending id order; neighbours in adjacency order.
    For each neighbour ``w`` of ``v``:

    - unvisited: tree edge. ``on_tree_descend`` fires, ``w`` is discovered
      and explored; when it finishes ``low[v] = min(low[v], low[w])`` and
      ``on_tree_return`` fires.
    - visited and not ``v``'s parent: back edge.
      ``low[v] = min(low[v], disc[w])`` and ``on_back_edge`` fires.

    Returns the final context (discovery and low-link arrays).
    """
    ctx = TraversalContext.for_graph(graph)
    adjacency = graph.adjacency
    visited = ctx.visited
    disc = ctx.disc
    low = ctx.low

    for root in range(graph.num_vertices):
        if visited[root]:
            continue

        ctx.root = root
        ctx.discover(root, NO_PARENT)
        hooks.on_root(ctx, root)

        stack: List[Frame] = [Frame(root, NO_PARENT)]
        while stack:
            frame = stack[-1]
            v = frame.vertex
            nbrs = adjacency[v]

            if frame.cursor < len(nbrs):
                w = nbrs[frame.cursor]
                frame.cursor += 1
                if not visited[w]:
                    hooks.on_tree_descend(ctx, v, w)
                    ctx.discover(w, v)
                    stack.append(Frame(w, v))
                elif w != frame.parent:
                    if disc[w] < low[v]:
                        low[v] = disc[w]
                    hooks.on_back_edge(ctx, v, w)
                continue

            # v exhausted: return to its parent
            stack.pop()
            if stack:
                p = frame.parent
                if low[v] < low[p]:
                    low[p] = low[v]
                hooks.on_tree_return(ctx, p, v)

        hooks.on_root_done(ctx, root)

    return ctx


def preorder(graph: Graph, root: int, visited: np.ndarray) -> Iterator[int]:
    """
    Plain reachability DFS from ``root``, yielding vertices in preorder.

    ``visited`` is updated in place; already visited vertices are skipped.
    No discovery times or low-links are tracked.
    """
    if visited[root]:
        return
    adjacency = graph.adjacency
    visited[root] = True
    yield root

    stack: List[Frame] = [Frame(root, NO_PARENT)]
    while stack:
        frame = stack[-1]
        nbrs = adjacency[frame.vertex]
        if frame.cursor >= len(nbrs):
            stack.pop()
            continue
        w = nbrs[frame.cursor]
        frame.cursor += 1
        if not visited[w]:
            visited[w] = True
            yield w
            stack.append(Frame(w, frame.vertex))


__all__ = [
    "NO_PARENT",
    "Frame",
    "TraversalContext",
    "TraversalHooks",
    "NullHooks",
    "traverse",
    "preorder",
]
