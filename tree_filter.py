"""Tree filtering for strip-html.

Walks a parsed BeautifulSoup tree, drops disallowed nodes together with their
subtrees and strips attributes from the elements that survive.
"""

from __future__ import annotations

import enum
import logging
from typing import Dict, Iterable, List

from bs4 import BeautifulSoup, Comment
from bs4.element import (
    CData,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)


class NodeKind(enum.Enum):
    """Kinds of node the filter distinguishes."""

    TEXT = "text"
    COMMENT = "comment"
    SCRIPT = "script"
    STYLE = "style"
    ELEMENT = "element"
    OTHER = "other"


DISALLOWED_TAGS: Dict[str, tuple[str, ...]] = {
    "SECURITY": ("iframe", "object", "embed", "applet"),
    "META": ("meta", "link", "head", "title", "base"),
    "FRAMES": ("frame", "frameset", "noframes"),
    "MEDIA": ("img", "picture", "source", "video", "audio", "track"),
    "GRAPHICS": ("svg", "canvas", "map", "area"),
}

DENYLIST = frozenset(tag for tags in DISALLOWED_TAGS.values() for tag in tags)


def node_kind(node: PageElement) -> NodeKind:
    """Return the :class:`NodeKind` of a bs4 ``node``."""
    if isinstance(node, Tag):
        name = node.name.lower()
        if name == "script":
            return NodeKind.SCRIPT
        if name == "style":
            return NodeKind.STYLE
        return NodeKind.ELEMENT
    # Comment and the other preformatted strings subclass NavigableString
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, (CData, Declaration, Doctype, ProcessingInstruction)):
        return NodeKind.OTHER
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def is_node_allowed(node: PageElement) -> bool:
    """Return ``True`` if ``node`` survives filtering."""
    kind = node_kind(node)
    if kind in (NodeKind.SCRIPT, NodeKind.STYLE, NodeKind.COMMENT):
        return False
    if kind is NodeKind.TEXT:
        return True
    if kind is NodeKind.ELEMENT:
        return node.name.lower() not in DENYLIST
    return True


def clean_node_attributes(node: PageElement) -> None:
    """Drop every attribute of ``node`` except a non-empty ``href`` on ``<a>``."""
    if node_kind(node) is not NodeKind.ELEMENT:
        return
    if node.name.lower() == "a":
        href = node.attrs.get("href")
        node.attrs = {"href": href} if href else {}
    else:
        node.attrs = {}


def _filter_siblings(nodes: Iterable[PageElement]) -> List[PageElement]:
    kept: List[PageElement] = []
    for node in list(nodes):
        if not is_node_allowed(node):
            logging.debug(
                "Removing %s node %s",
                node_kind(node).value,
                getattr(node, "name", None) or "",
            )
            node.extract()
            continue
        clean_node_attributes(node)
        kept.append(node)
    return kept


def strip_and_clean(nodes: Iterable[PageElement]) -> List[PageElement]:
    """Filter ``nodes`` and all of their descendants in place.

    Disallowed nodes are detached from their parent along with their whole
    subtree. Allowed elements have their attributes sanitized before their
    children are visited. Relative order of the survivors is preserved.

    Returns
    -------
    list
        The allowed members of ``nodes``, in their original order.
    """
    kept = _filter_siblings(nodes)
    pending = [node for node in kept if isinstance(node, Tag)]
    while pending:
        tag = pending.pop()
        children = _filter_siblings(tag.contents)
        pending.extend(child for child in children if isinstance(child, Tag))
    return kept


def filter_document(document: BeautifulSoup) -> BeautifulSoup:
    """Filter the top-level forest of ``document`` and return it."""
    kept = strip_and_clean(document.contents)
    logging.debug("Kept %d top-level nodes", len(kept))
    return document
