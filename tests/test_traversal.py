from __future__ import annotations

from typing import List, Tuple

import numpy as np

from conngraph.graph import Graph
from conngraph.graph.traversal import NO_PARENT, NullHooks, TraversalContext, preorder, traverse


def make_graph(n: int, edges: List[Tuple[int, int]]) -> Graph:
    src = [u for u, _ in edges]
    dst = [v for _, v in edges]
    return Graph.from_edges(src, dst, num_vertices=n)


class RecordingHooks(NullHooks):
    """Records every hook call as (name, *args)."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def on_root(self, ctx: TraversalContext, root: int) -> None:
        self.calls.append(("root", root))

    def on_tree_descend(self, ctx: TraversalContext, v: int, child: int) -> None:
        self.calls.append(("descend", v, child))

    def on_tree_return(self, ctx: TraversalContext, v: int, child: int) -> None:
        self.calls.append(("return", v, child, int(ctx.low[v])))

    def on_back_edge(self, ctx: TraversalContext, v: int, w: int) -> None:
        self.calls.append(("back", v, w))

    def on_root_done(self, ctx: TraversalContext, root: int) -> None:
        self.calls.append(("done", root))


def test_triangle_hook_sequence() -> None:
    g = make_graph(3, [(0, 1), (1, 2), (0, 2)])
    hooks = RecordingHooks()
    ctx = traverse(g, hooks)

    assert hooks.calls == [
        ("root", 0),
        ("descend", 0, 1),
        ("descend", 1, 2),
        ("back", 2, 0),
        ("return", 1, 2, 0),
        ("return", 0, 1, 0),
        ("back", 0, 2),  # seen again from the ancestor side
        ("done", 0),
    ]
    assert ctx.disc.tolist() == [0, 1, 2]
    assert ctx.low.tolist() == [0, 0, 0]
    assert ctx.parent.tolist() == [NO_PARENT, 0, 1]
    assert ctx.clock == 3


def test_forest_restarts_from_each_unvisited_vertex() -> None:
    g = make_graph(5, [(0, 1), (3, 4)])
    hooks = RecordingHooks()
    ctx = traverse(g, hooks)

    roots = [c[1] for c in hooks.calls if c[0] == "root"]
    assert roots == [0, 2, 3]
    assert ctx.visited.all()
    assert ctx.disc.tolist() == [0, 1, 2, 3, 4]


def test_path_low_links_equal_discovery_times() -> None:
    n = 6
    g = make_graph(n, [(i, i + 1) for i in range(n - 1)])
    ctx = traverse(g, NullHooks())
    assert ctx.low.tolist() == ctx.disc.tolist() == list(range(n))


def test_deep_path_does_not_recurse() -> None:
    n = 50_000
    g = Graph.from_edges(np.arange(n - 1), np.arange(1, n), num_vertices=n)
    ctx = traverse(g, NullHooks())
    assert ctx.clock == n
    assert ctx.parent[n - 1] == n - 2


def test_preorder_matches_recursive_order() -> None:
    # 0 - 1 - 3, 0 - 2, 1 - 2
    g = make_graph(5, [(0, 1), (1, 3), (0, 2), (1, 2)])
    visited = np.zeros(5, dtype=bool)

    assert list(preorder(g, 0, visited)) == [0, 1, 2, 3]
    assert visited.tolist() == [True, True, True, True, False]
    # already visited root yields nothing
    assert list(preorder(g, 1, visited)) == []
    assert list(preorder(g, 4, visited)) == [4]
