from __future__ import annotations

"""Exception taxonomy for loading graphs and writing reports."""

from typing import Optional


class ConnectivityError(RuntimeError):
    """Base exception for all conngraph input/output failures."""
    pass


class InputOpenError(ConnectivityError):
    """The input file is missing or unreadable."""

    def __init__(self, path: str, reason: object = None) -> None:
        self.path = path
        msg = f"cannot open input file {path!r}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


class InvalidGraphSize(ConnectivityError):
    """The declared vertex count is not a positive integer."""

    def __init__(self, size: int) -> None:
        self.size = int(size)
        super().__init__(f"invalid graph size: {self.size}")


class ReadError(ConnectivityError):
    """
    The input stream ended before the full matrix could be read.

    ``row``/``col`` identify the matrix element being read; both are None
    when the failure happened while reading the size header.
    """

    def __init__(
        self,
        row: Optional[int] = None,
        col: Optional[int] = None,
        reason: object = None,
    ) -> None:
        self.row = row
        self.col = col
        if row is None:
            msg = "error reading graph size"
        else:
            msg = f"error reading adjacency matrix at position ({row},{col})"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)

    @property
    def position(self) -> Optional[tuple[int, int]]:
        if self.row is None or self.col is None:
            return None
        return (self.row, self.col)


class OutputCreateError(ConnectivityError):
    """The output file could not be created."""

    def __init__(self, path: str, reason: object = None) -> None:
        self.path = path
        msg = f"cannot create output file {path!r}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


class OutputWriteError(ConnectivityError):
    """Writing to an already opened output file failed."""

    def __init__(self, path: str, reason: object = None) -> None:
        self.path = path
        msg = f"error writing output file {path!r}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


__all__ = [
    "ConnectivityError",
    "InputOpenError",
    "InvalidGraphSize",
    "ReadError",
    "OutputCreateError",
    "OutputWriteError",
]
