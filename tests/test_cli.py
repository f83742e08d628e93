from __future__ import annotations

import struct
from pathlib import Path

import pytest

from conngraph.cli import EXIT_FAILURE, EXIT_OK, main
from conngraph.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def triangle_file(tmp_path: Path) -> Path:
    path = tmp_path / "triangle.bin"
    path.write_bytes(struct.pack("<h9h", 3, 0, 1, 1, 1, 0, 1, 1, 1, 0))
    return path


def test_writes_report_to_explicit_output(tmp_path: Path, triangle_file: Path, capsys) -> None:
    out = tmp_path / "result.txt"
    assert main([str(triangle_file), "-o", str(out)]) == EXIT_OK

    text = out.read_text(encoding="utf-8")
    assert text.startswith("a) Bridges and articulation points:\nArticulation points:\nNone\n")
    assert "Component 1:\n(2, 0) (1, 2) (0, 1)\n" in text
    assert text.endswith("Component 1: 0 1 2\n")
    assert f"Results written to {out}" in capsys.readouterr().out


def test_default_output_file(tmp_path: Path, triangle_file: Path) -> None:
    assert main([str(triangle_file)]) == EXIT_OK
    assert (tmp_path / "output.txt").exists()


def test_default_output_from_environment(tmp_path: Path, triangle_file: Path, monkeypatch) -> None:
    monkeypatch.setenv("CONNGRAPH_REPORT__OUTPUT", "env.txt")
    assert main([str(triangle_file)]) == EXIT_OK
    assert (tmp_path / "env.txt").exists()


def test_missing_positional_is_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0
    assert "inputfile" in capsys.readouterr().err


def test_missing_input_file(tmp_path: Path, caplog) -> None:
    out = tmp_path / "result.txt"
    assert main([str(tmp_path / "missing.bin"), "-o", str(out)]) == EXIT_FAILURE
    assert not out.exists()
    assert "Failed to load graph" in caplog.text


def test_truncated_input_writes_nothing(tmp_path: Path) -> None:
    bad = tmp_path / "bad.bin"
    bad.write_bytes(struct.pack("<h3h", 2, 0, 1, 1))
    out = tmp_path / "result.txt"
    assert main([str(bad), "-o", str(out)]) == EXIT_FAILURE
    assert not out.exists()


def test_invalid_size(tmp_path: Path, caplog) -> None:
    bad = tmp_path / "zero.bin"
    bad.write_bytes(struct.pack("<h", 0))
    assert main([str(bad)]) == EXIT_FAILURE
    assert "invalid graph size: 0" in caplog.text


def test_unwritable_output(tmp_path: Path, triangle_file: Path, caplog) -> None:
    out = tmp_path / "no-such-dir" / "result.txt"
    assert main([str(triangle_file), "-o", str(out)]) == EXIT_FAILURE
    assert "Failed to write report" in caplog.text


def test_invalid_log_level_in_environment(
    tmp_path: Path, triangle_file: Path, monkeypatch, capsys
) -> None:
    monkeypatch.setenv("CONNGRAPH_LOGGING__LEVEL", "bogus")
    assert main([str(triangle_file)]) == EXIT_FAILURE
    assert "Invalid configuration" in capsys.readouterr().err
    assert not (tmp_path / "output.txt").exists()
