from __future__ import annotations

from pathlib import Path

import pytest

from conngraph.errors import OutputCreateError
from conngraph.graph import Graph, analyze
from conngraph.report import format_report, write_report


@pytest.fixture
def path_report():
    g = Graph.from_edges([0, 1, 2], [1, 2, 3], num_vertices=4)
    return analyze(g)


def test_format_path_graph(path_report) -> None:
    assert format_report(path_report) == (
        "a) Bridges and articulation points:\n"
        "Articulation points:\n"
        "1 2\n"
        "Bridges:\n"
        "(2, 3) (1, 2) (0, 1)\n"
        "\n"
        "b) Biconnected components:\n"
        "Component 1:\n"
        "(2, 3)\n"
        "Component 2:\n"
        "(1, 2)\n"
        "Component 3:\n"
        "(0, 1)\n"
        "\n"
        "c) Connected components:\n"
        "Component 1: 0 1 2 3\n"
    )


def test_format_empty_sections_say_none() -> None:
    report = analyze(Graph.from_edges([], [], num_vertices=2))
    text = format_report(report)

    assert "Articulation points:\nNone\n" in text
    assert "Bridges:\nNone\n" in text
    assert "b) Biconnected components:\n\nc)" in text
    assert text.endswith("Component 1: 0\nComponent 2: 1\n")


def test_write_report(tmp_path: Path, path_report) -> None:
    out = tmp_path / "report.txt"
    out.write_text("stale")
    write_report(path_report, out)
    assert out.read_text(encoding="utf-8") == format_report(path_report)


def test_write_report_into_missing_directory(tmp_path: Path, path_report) -> None:
    out = tmp_path / "missing" / "report.txt"
    with pytest.raises(OutputCreateError) as excinfo:
        write_report(path_report, out)
    assert excinfo.value.path == str(out)
