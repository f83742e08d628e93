from __future__ import annotations

"""Plain-text connectivity report."""

import logging
import os
from typing import Iterable, List, Union

from .errors import OutputCreateError, OutputWriteError
from .graph.analysis import ConnectivityReport, Edge

logger = logging.getLogger(__name__)

NONE_MARKER = "None"


def _edges(edges: Iterable[Edge]) -> str:
    return " ".join(f"({u}, {v})" for u, v in edges)


def _ids(ids: Iterable[int]) -> str:
    return " ".join(str(v) for v in ids)


def format_report(report: ConnectivityReport) -> str:
    """
    Render ``report`` in the fixed section order:

    a) articulation points and bridges, b) biconnected components,
    c) connected components. Components are numbered from 1.
    """
    lines: List[str] = ["a) Bridges and articulation points:"]

    lines.append("Articulation points:")
    lines.append(_ids(report.articulation_points) or NONE_MARKER)
    lines.append("Bridges:")
    lines.append(_edges(report.bridges) or NONE_MARKER)

    lines.append("")
    lines.append("b) Biconnected components:")
    for i, component in enumerate(report.biconnected_components, start=1):
        lines.append(f"Component {i}:")
        lines.append(_edges(component))

    lines.append("")
    lines.append("c) Connected components:")
    for i, members in enumerate(report.connected_components, start=1):
        lines.append(f"Component {i}: {_ids(members)}")

    return "\n".join(lines) + "\n"


def write_report(
    report: ConnectivityReport,
    path: Union[str, "os.PathLike[str]"],
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Write the formatted report to ``path``, replacing any existing file.

    Raises OutputCreateError if the file cannot be opened for writing and
    OutputWriteError if writing fails afterwards.
    """
    text = format_report(report)
    target = os.fspath(path)
    try:
        fh = open(target, "w", encoding=encoding)
    except OSError as exc:
        raise OutputCreateError(target, exc.strerror or exc) from exc

    with fh:
        try:
            fh.write(text)
            fh.flush()
        except OSError as exc:
            raise OutputWriteError(target, exc.strerror or exc) from exc

    logger.info("Report written to %s (%d bytes)", target, len(text.encode(encoding)))


__all__ = ["format_report", "write_report"]
