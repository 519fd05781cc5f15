"""Outgoing link extraction from parsed notes."""

from __future__ import annotations

from markdown_it.tree import SyntaxTreeNode

from ..models import LinkEntry
from .markdown import WIKILINK_TOKEN

# Inline node types whose content is visible text
_TEXT_TYPES = frozenset({"text", "code_inline"})


def _link_text(link: SyntaxTreeNode) -> str:
    return "".join(
        node.content for node in link.walk(include_self=False) if node.type in _TEXT_TYPES
    )


def _links_in_inline(inline: SyntaxTreeNode) -> list[LinkEntry]:
    """Collect links from one inline container (paragraph, heading, table cell)."""
    line = inline.map[0] if inline.map else None
    context = inline.content

    links: list[LinkEntry] = []
    for node in inline.walk(include_self=False):
        if node.type == "link":
            links.append(
                LinkEntry(
                    target=str(node.attrs.get("href") or ""),
                    text=_link_text(node),
                    kind="markdown",
                    line=line,
                    context=context,
                )
            )
        elif node.type == WIKILINK_TOKEN:
            target = node.meta["target"]
            links.append(
                LinkEntry(
                    target=target,
                    text=node.meta.get("alias") or target,
                    kind="wikilink",
                    line=line,
                    context=context,
                )
            )
    return links


def extract_links(tree: SyntaxTreeNode) -> list[LinkEntry]:
    """Extract outgoing links from a parsed note.

    Markdown links (including autolinks) and [[wiki links]] are returned in
    document order. Images are not links. Duplicates are kept: every
    occurrence is its own entry.

    Args:
        tree: Root of a parsed document.

    Returns:
        List of LinkEntry, empty if the note links nowhere.
    """
    links: list[LinkEntry] = []
    for node in tree.walk():
        if node.type == "inline":
            links.extend(_links_in_inline(node))
    return links
