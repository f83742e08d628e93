from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np
import graphblas as gb
from graphblas import Matrix

from ..errors import InvalidGraphSize


class Graph:
    """
    Immutable undirected graph backed by python-graphblas.

    Structure:
      - Vertices are 0..num_vertices-1.
      - adjacency: symmetric Matrix[BOOL] of shape (num_vertices, num_vertices);
        True at (u, v) and (v, u) for every undirected edge u-v.
      - Ordered adjacency lists are derived from the matrix once, at
        construction. Neighbours of a vertex are listed in ascending id order,
        which fixes the DFS visiting order of every analysis.
    """

    __slots__ = (
        "_matrix",
        "_adjacency",   # tuple[tuple[int, ...], ...]
        "_num_edges",
        "_num_vertices",
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(self, matrix: Matrix, num_vertices: Optional[int] = None) -> None:
        """
        Wrap a symmetric Matrix[BOOL]; prefer from_edges / from_matrix.

        Raises InvalidGraphSize for N <= 0 and ValueError for a matrix that
        is not square or not symmetric.
        """
        if num_vertices is None:
            num_vertices = int(matrix.nrows)
        num_vertices = int(num_vertices)
        if num_vertices <= 0:
            raise InvalidGraphSize(num_vertices)
        if matrix.nrows != num_vertices or matrix.ncols != num_vertices:
            raise ValueError(
                f"adjacency shape ({matrix.nrows}, {matrix.ncols}) must be "
                f"({num_vertices}, {num_vertices})"
            )
        if matrix.dtype is not gb.dtypes.BOOL:
            raise TypeError(f"adjacency must have BOOL dtype, got {matrix.dtype!r}")
        if not matrix.isequal(matrix.T.new()):
            raise ValueError("adjacency matrix must be symmetric (undirected graph)")

        self._matrix = matrix
        self._num_vertices = num_vertices

        rows, cols, _ = matrix.to_coo(values=False)
        rows = np.asarray(rows, dtype=np.int64)
        cols = np.asarray(cols, dtype=np.int64)
        order = np.lexsort((cols, rows))
        rows = rows[order]
        cols = cols[order]

        # CSR-style offsets: neighbours of v are cols[indptr[v]:indptr[v + 1]]
        indptr = np.zeros(num_vertices + 1, dtype=np.int64)
        np.cumsum(np.bincount(rows, minlength=num_vertices), out=indptr[1:])
        self._adjacency: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(cols[indptr[v]:indptr[v + 1]].tolist()) for v in range(num_vertices)
        )
        self._num_edges = int(np.count_nonzero(rows <= cols))

    @classmethod
    def from_edges(
        cls,
        src: np.ndarray,
        dst: np.ndarray,
        *,
        num_vertices: int,
    ) -> Graph:
        """
        Build a Graph from undirected edge endpoint arrays.

        src, dst: equal-length integer arrays; edge k joins src[k] and dst[k].
        Each edge is mirrored so the adjacency matrix is symmetric; repeated
        edges collapse into one.
        """
        num_vertices = int(num_vertices)
        if num_vertices <= 0:
            raise InvalidGraphSize(num_vertices)

        src_arr = np.asarray(src, dtype=np.int64).ravel()
        dst_arr = np.asarray(dst, dtype=np.int64).ravel()
        if src_arr.shape != dst_arr.shape:
            raise ValueError(
                f"src ({src_arr.size}) and dst ({dst_arr.size}) must have equal length"
            )
        if src_arr.size and (
            min(src_arr.min(), dst_arr.min()) < 0
            or max(src_arr.max(), dst_arr.max()) >= num_vertices
        ):
            raise ValueError(f"vertex ids must lie in [0, {num_vertices})")

        mat = gb.Matrix.from_coo(
            np.concatenate([src_arr, dst_arr]),
            np.concatenate([dst_arr, src_arr]),
            np.ones(2 * src_arr.size, dtype=bool),
            dtype=gb.dtypes.BOOL,
            nrows=num_vertices,
            ncols=num_vertices,
            dup_op=gb.binary.lor,
        )
        return cls(mat, num_vertices)

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> Graph:
        """
        Build a Graph from a square adjacency matrix.

        Only the strict upper triangle is consulted: a nonzero entry at (i, j)
        with i < j denotes the edge i-j. Symmetry of the input is assumed,
        not verified.
        """
        arr = np.asarray(matrix)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"adjacency matrix must be square, got shape {arr.shape}")
        if arr.shape[0] == 0:
            raise InvalidGraphSize(0)
        src, dst = np.nonzero(np.triu(arr != 0, k=1))
        return cls.from_edges(src, dst, num_vertices=arr.shape[0])

    # ------------------------------------------------------------------ #
    # Structural accessors
    # ------------------------------------------------------------------ #
    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    def vertex_count(self) -> int:
        return self.num_vertices

    def edge_count(self) -> int:
        """Number of undirected edges (each counted once)."""
        return self._num_edges

    def neighbors(self, v: int) -> Tuple[int, ...]:
        """Neighbours of v in ascending id order."""
        return self._adjacency[v]

    def degree(self, v: int) -> int:
        return len(self._adjacency[v])

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield every undirected edge once as (u, v) with u <= v."""
        for u, nbrs in enumerate(self._adjacency):
            for v in nbrs:
                if u <= v:
                    yield (u, v)

    @property
    def matrix(self) -> Matrix:
        """The symmetric boolean adjacency matrix."""
        return self._matrix

    @property
    def adjacency(self) -> Tuple[Tuple[int, ...], ...]:
        return self._adjacency

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        return (
            f"Graph(num_vertices={self._num_vertices}, "
            f"num_edges={self._num_edges})"
        )
