try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .errors import (
    ConnectivityError,
    InputOpenError,
    InvalidGraphSize,
    ReadError,
    OutputCreateError,
    OutputWriteError,
)
from .graph import Graph, load_graph, analyze, ConnectivityReport

__all__ = [
    "__version__",
    "ConnectivityError",
    "InputOpenError",
    "InvalidGraphSize",
    "ReadError",
    "OutputCreateError",
    "OutputWriteError",
    "Graph",
    "load_graph",
    "analyze",
    "ConnectivityReport",
]
