"""Parse, filter and re-serialize HTML for strip-html."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Doctype
from bs4.formatter import HTMLFormatter

from tree_filter import filter_document
from whitespace import normalize_whitespace

_P_CLOSERS = frozenset({"p"})
_FORM_CLOSERS = frozenset(
    {"input", "option", "optgroup", "select", "button", "datalist", "textarea"}
)

# opening tag -> open tags it implicitly ends
IMPLIED_END_TAGS: Dict[str, FrozenSet[str]] = {
    "tr": frozenset({"tr", "th", "td"}),
    "th": frozenset({"th"}),
    "td": frozenset({"thead", "th", "td"}),
    "li": frozenset({"li"}),
    "option": frozenset({"option"}),
    "optgroup": frozenset({"optgroup", "option"}),
    "dd": frozenset({"dd", "dt"}),
    "dt": frozenset({"dd", "dt"}),
    "rt": frozenset({"rt", "rp"}),
    "rp": frozenset({"rt", "rp"}),
    "tbody": frozenset({"thead", "tbody"}),
    "tfoot": frozenset({"thead", "tbody"}),
    **{name: _FORM_CLOSERS for name in ("select", "input", "output", "button", "datalist", "textarea")},
    **{
        name: _P_CLOSERS
        for name in (
            "p", "h1", "h2", "h3", "h4", "h5", "h6", "address", "article",
            "aside", "blockquote", "details", "div", "dl", "fieldset",
            "figcaption", "figure", "footer", "form", "header", "hr", "main",
            "nav", "ol", "pre", "section", "table", "ul",
        )
    },
}


def _substitute_entities(value: str) -> str:
    # keep non-breaking spaces out of reach of the whitespace regexes
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


# minimal escaping, void elements written as <br> rather than <br/>
_FORMATTER = HTMLFormatter(
    entity_substitution=_substitute_entities,
    void_element_close_prefix=None,
)


class _Doctype(Doctype):
    SUFFIX = ">"


class HTMLDocument(BeautifulSoup):
    """``html.parser`` document that keeps the input's whitespace verbatim.

    Whitespace-only strings are stored as written instead of being shrunk to
    a single space or newline, and the end tags HTML allows to be omitted
    (``</p>``, ``</li>``, ``</td>`` ...) are inferred from the next start tag.
    """

    def __init__(self, markup: str = "") -> None:
        super().__init__(markup, "html.parser", element_classes={Doctype: _Doctype})

    def endData(self, *args, **kwargs):
        self.preserve_whitespace_tag_stack.append(self)
        try:
            return super().endData(*args, **kwargs)
        finally:
            self.preserve_whitespace_tag_stack.pop()

    def handle_starttag(self, name, *args, **kwargs):
        closes = IMPLIED_END_TAGS.get(name)
        if closes:
            while self.currentTag.name in closes:
                self.handle_endtag(self.currentTag.name)
        return super().handle_starttag(name, *args, **kwargs)


@dataclass
class ProcessingOptions:
    """Options controlling :func:`process_html`."""

    keep_whitespace: bool = False


def parse_html(text: str) -> HTMLDocument:
    """Return a document tree for ``text``.

    ``html.parser`` does not synthesize ``<html>``/``<head>``/``<body>``, so
    the top level of the tree mirrors the input.
    """
    return HTMLDocument(text)


def serialize_html(document: BeautifulSoup) -> str:
    return document.decode(formatter=_FORMATTER)


def process_html(text: str, options: Optional[ProcessingOptions] = None) -> str:
    """Return ``text`` reduced to the allowed subset of HTML."""
    options = options or ProcessingOptions()
    document = parse_html(text)
    logging.debug("Parsed %d top-level nodes", len(document.contents))
    filter_document(document)
    result = serialize_html(document)
    return normalize_whitespace(result, keep_whitespace=options.keep_whitespace)
