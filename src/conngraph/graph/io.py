from __future__ import annotations

"""
Binary adjacency-matrix file format.

Layout (little-endian):

- int16 N                       number of vertices, must be > 0
- int16[N][N]                   row-major adjacency matrix

Only the strict upper triangle is consulted when building the graph; a
nonzero entry at (i, j), i < j, is the undirected edge i-j. Bytes after the
matrix are ignored.
"""

import logging
import os
from typing import BinaryIO, Union

import numpy as np

from ..errors import InputOpenError, InvalidGraphSize, ReadError
from .core import Graph

logger = logging.getLogger(__name__)

CELL_DTYPE = np.dtype("<i2")
HEADER_DTYPE = np.dtype("<i2")

Source = Union[str, "os.PathLike[str]", BinaryIO]


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, stopping early only at end of stream."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_matrix(stream: BinaryIO) -> np.ndarray:
    try:
        header = _read_exact(stream, HEADER_DTYPE.itemsize)
    except OSError as exc:
        raise ReadError(reason=exc) from exc
    if len(header) < HEADER_DTYPE.itemsize:
        raise ReadError(reason="unexpected end of file")
    size = int(np.frombuffer(header, dtype=HEADER_DTYPE)[0])
    if size <= 0:
        raise InvalidGraphSize(size)

    row_bytes = size * CELL_DTYPE.itemsize
    matrix = np.empty((size, size), dtype=CELL_DTYPE)
    for row in range(size):
        try:
            data = _read_exact(stream, row_bytes)
        except OSError as exc:
            # position of the first cell of the row being read
            raise ReadError(row, 0, reason=exc) from exc
        if len(data) < row_bytes:
            # first cell that could not be read completely
            raise ReadError(row, len(data) // CELL_DTYPE.itemsize, reason="unexpected end of file")
        matrix[row] = np.frombuffer(data, dtype=CELL_DTYPE)
    return matrix


def read_matrix(source: Source) -> np.ndarray:
    """
    Read the raw N x N int16 matrix from a path or binary stream.

    Raises InputOpenError, ReadError or InvalidGraphSize. I/O failures while
    reading are reported as ReadError for streams and paths alike.
    """
    if hasattr(source, "read"):
        return _read_matrix(source)  # type: ignore[arg-type]

    path = os.fspath(source)  # type: ignore[arg-type]
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise InputOpenError(path, exc.strerror or exc) from exc
    with stream:
        return _read_matrix(stream)


def load_graph(source: Source) -> Graph:
    """
    Load a Graph from a binary adjacency-matrix file or stream.

    The whole matrix is read and validated before the Graph is built; no
    partial graph is ever returned.
    """
    matrix = read_matrix(source)
    graph = Graph.from_matrix(matrix)
    logger.info(
        "Loaded graph with %d vertices and %d edges",
        graph.num_vertices,
        graph.edge_count(),
    )
    return graph


def save_matrix(target: Source, matrix: np.ndarray) -> None:
    """Write a square matrix in the binary adjacency-matrix format."""
    arr = np.asarray(matrix)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"adjacency matrix must be square, got shape {arr.shape}")
    size = arr.shape[0]
    if not 0 < size <= np.iinfo(HEADER_DTYPE).max:
        raise InvalidGraphSize(size)

    data = np.asarray(size, dtype=HEADER_DTYPE).tobytes()
    data += np.ascontiguousarray(arr, dtype=CELL_DTYPE).tobytes()

    if hasattr(target, "write"):
        target.write(data)  # type: ignore[union-attr]
        return
    with open(os.fspath(target), "wb") as fh:  # type: ignore[arg-type]
        fh.write(data)


def save_graph(target: Source, graph: Graph) -> None:
    """Write ``graph`` as a symmetric 0/1 adjacency matrix."""
    dense = np.zeros((graph.num_vertices, graph.num_vertices), dtype=CELL_DTYPE)
    for u, v in graph.edges():
        dense[u, v] = 1
        dense[v, u] = 1
    save_matrix(target, dense)


__all__ = ["read_matrix", "load_graph", "save_matrix", "save_graph"]
