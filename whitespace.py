"""Whitespace collapsing for serialized HTML."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s{2,}")
_INTER_TAG_WHITESPACE = re.compile(r">\s+<")


def normalize_whitespace(html: str, keep_whitespace: bool = False) -> str:
    """Collapse whitespace in ``html`` unless ``keep_whitespace`` is set.

    Runs of whitespace become a single space, whitespace between a ``>`` and
    the next ``<`` is dropped, and any newline left over is removed. The steps
    are applied in that order on the text, without regard to tag structure.
    """
    if keep_whitespace:
        return html
    html = _WHITESPACE_RUN.sub(" ", html)
    html = _INTER_TAG_WHITESPACE.sub("><", html)
    return html.replace("\n", "")
