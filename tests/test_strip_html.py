"""Tests for the strip-html command line interface."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from strip_html import __version__, main


class _TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_file_to_stdout(tmp_path: Path, capsys) -> None:
    html_path = tmp_path / "page.html"
    html_path.write_text(
        '<div class="x">\n  <p>Hi <a href="/a" rel="r">there</a></p>\n  <script>x()</script>\n</div>\n',
        encoding="utf-8",
    )
    assert main([str(html_path)]) == 0
    out = capsys.readouterr().out
    assert out == '<div><p>Hi <a href="/a">there</a></p></div>'


def test_output_file(tmp_path: Path, capsys) -> None:
    html_path = tmp_path / "page.html"
    html_path.write_text("<p>café</p><img src='x'>", encoding="utf-8")
    out_path = tmp_path / "clean.html"
    assert main([str(html_path), "--output", str(out_path)]) == 0
    assert out_path.read_text(encoding="utf-8") == "<p>café</p>"
    assert capsys.readouterr().out == ""


def test_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("<p>  a\n\n  b  </p>"))
    assert main([]) == 0
    assert capsys.readouterr().out == "<p> a b </p>"


def test_keep_whitespace_flag(monkeypatch, capsys) -> None:
    html = "<ul>\n  <li>one</li>\n</ul>\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(html))
    assert main(["-k"]) == 0
    assert capsys.readouterr().out == html


def test_interactive_stdin_prints_usage(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", _TTY(""))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "usage: strip-html" in out
    assert "--keep-whitespace" in out


def test_missing_file_reports_error(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing.html")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert len(captured.err.strip().splitlines()) == 1


def test_undecodable_file_reports_error(tmp_path: Path, capsys) -> None:
    html_path = tmp_path / "latin1.html"
    html_path.write_bytes(b"<p>\xff\xfe</p>")
    assert main([str(html_path)]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"strip-html {__version__}"
