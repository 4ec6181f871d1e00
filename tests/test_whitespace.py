"""Tests for the whitespace normalizer."""

from __future__ import annotations

import pytest

from whitespace import normalize_whitespace


def test_keep_whitespace_returns_input_unchanged() -> None:
    html = "<p>  a\n\n  b  </p>\n<p>c</p>\n"
    assert normalize_whitespace(html, keep_whitespace=True) == html


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ("<p>  a\n\n  b  </p>", "<p> a b </p>"),
        ("a \t b", "a b"),
        ("a\t\tb", "a b"),
        ("<p>x</p>\n<p>y</p>", "<p>x</p><p>y</p>"),
        ("<i>a</i> <b>b</b>", "<i>a</i><b>b</b>"),
        ("<ul>\n  <li>x</li>\n</ul>", "<ul><li>x</li></ul>"),
        ("a\nb", "ab"),
        ("line one\n", "line one"),
        ("a b", "a b"),
        ("", ""),
    ],
)
def test_collapses_whitespace(html: str, expected: str) -> None:
    assert normalize_whitespace(html) == expected


def test_single_space_inside_text_is_kept() -> None:
    assert normalize_whitespace("<p>hello world</p>") == "<p>hello world</p>"


def test_result_is_stable() -> None:
    once = normalize_whitespace("<div>\n  <p> a  b </p>\n</div>\n")
    assert normalize_whitespace(once) == once
