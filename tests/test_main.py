"""
Tests for the command line entry point.
"""

from pathlib import Path

import pytest

from initree.__main__ import main


@pytest.fixture
def inheritance_path(tmp_path: Path, inheritance_source: str) -> Path:
    path = tmp_path / "inherit.ini"
    path.write_text(inheritance_source, encoding="utf-8")
    return path


def test_summary(example_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(example_config_path), "--no-color"]) == 0

    out = capsys.readouterr().out
    assert "Sections: 2" in out
    assert "[section 1] 3 keys" in out
    assert "Document is valid!" in out


def test_get_value(inheritance_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(inheritance_path), "--get", "foo.name2"]) == 0

    assert capsys.readouterr().out == "value2\n"


def test_get_without_lookups(inheritance_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(inheritance_path), "--no-lookups", "--get", "foo.name1"]) == 0

    assert capsys.readouterr().out.strip().endswith("%name2%")


def test_get_root_key(example_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(example_config_path), "--get", ".test"]) == 0

    assert capsys.readouterr().out == "bar ; comment\n"


def test_get_missing_path(inheritance_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(inheritance_path), "--get", "foo.nope"]) == 1

    assert "Lookup error" in capsys.readouterr().err


def test_dump(inheritance_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(inheritance_path), "--dump"]) == 0

    out = capsys.readouterr().out
    assert "[def]\nname1 = value1\nname2 = value2\n" in out
    assert "[foo]\n" in out


def test_syntax_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.ini"
    path.write_text("[bad\n", encoding="utf-8")

    assert main([str(path)]) == 1

    assert "Syntax error" in capsys.readouterr().err


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.ini")]) == 1

    assert "File error" in capsys.readouterr().err


def test_no_escapes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "esc.ini"
    path.write_text('v = "a\\nb"\n', encoding="utf-8")

    assert main([str(path), "--no-escapes", "--get", "v"]) == 0

    assert capsys.readouterr().out == "a\\nb\n"


def test_log_file(inheritance_path: Path, tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "initree.log"

    assert main([str(inheritance_path), "--log-file", str(log_path), "--get", "foo.name2"]) == 0

    text = log_path.read_text(encoding="utf-8")
    assert f"Parsed {inheritance_path}" in text
    assert "initree.parser" in text


def test_dump_without_escapes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "raw.ini"
    path.write_text('path = "C:\\dir\\"\n', encoding="utf-8")

    assert main([str(path), "--no-escapes", "--dump"]) == 0

    assert capsys.readouterr().out == 'path = "C:\\dir\\"\n'
