"""Markdown parsing into markdown-it syntax trees.

The rest of the package only talks to markdown-it through this module and
``links.py``, so the parser can be swapped without touching the loader.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline
from markdown_it.tree import SyntaxTreeNode

from ..config import TITLE_HEADING_DEPTH

# Token type emitted for [[target]] and [[target|alias]]
WIKILINK_TOKEN = "wikilink"


def _wikilink_rule(state: StateInline, silent: bool) -> bool:
    """Inline rule matching [[target]] and [[target|alias]]."""
    # Silent mode is link label scanning, which must step over "[[" one
    # bracket at a time or the enclosing [text](href) link is rejected
    if silent:
        return False

    pos = state.pos
    src = state.src

    if not src.startswith("[[", pos):
        return False

    end = src.find("]]", pos + 2)
    if end < 0:
        return False

    inner = src[pos + 2 : end]
    if "\n" in inner or "[" in inner or "]" in inner:
        return False

    target, _, alias = inner.partition("|")
    target = target.strip()
    if not target:
        return False

    token = state.push(WIKILINK_TOKEN, "", 0)
    token.markup = "[["
    token.content = inner
    token.meta = {"target": target, "alias": alias.strip() or None}

    state.pos = end + 2
    return True


def _create_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark")
    # Must run before "link", otherwise [[x]] can be read as a reference link
    md.inline.ruler.before("link", WIKILINK_TOKEN, _wikilink_rule)
    return md


_parser = _create_parser()


def parse(text: str) -> SyntaxTreeNode:
    """Parse markdown text into a syntax tree.

    Parsing never fails: malformed markdown degrades to a best-effort tree.

    Args:
        text: Markdown source.

    Returns:
        Root node of the syntax tree.
    """
    return SyntaxTreeNode(_parser.parse(text))


def find_first(
    tree: SyntaxTreeNode, predicate: Callable[[SyntaxTreeNode], bool]
) -> SyntaxTreeNode | None:
    """Return the first node in document (pre-)order matching predicate, or None."""
    for node in tree.walk():
        if predicate(node):
            return node
    return None


def find_first_heading(
    tree: SyntaxTreeNode, depth: int = TITLE_HEADING_DEPTH
) -> SyntaxTreeNode | None:
    """Find the first heading of the given level anywhere in the tree.

    Args:
        tree: Root of a parsed document.
        depth: Heading level (1 for "# Title").

    Returns:
        The heading node, or None if the document has no such heading.
    """
    tag = f"h{depth}"
    return find_first(tree, lambda node: node.type == "heading" and node.tag == tag)


def _render_node(node: SyntaxTreeNode) -> str:
    kind = node.type
    if kind == "text":
        return node.content
    if kind in ("softbreak", "hardbreak"):
        return "\n"
    if kind == "code_inline":
        return f"{node.markup}{node.content}{node.markup}"
    if kind == WIKILINK_TOKEN:
        return f"[[{node.content}]]"
    if kind == "html_inline":
        return node.content

    inner = "".join(_render_node(child) for child in node.children)
    if kind in ("strong", "em"):
        return f"{node.markup}{inner}{node.markup}"
    if kind == "link":
        href = node.attrs.get("href", "")
        if node.markup == "autolink":
            return f"<{href}>"
        title = node.attrs.get("title")
        return f'[{inner}]({href} "{title}")' if title else f"[{inner}]({href})"
    if kind == "image":
        return f"![{inner}]({node.attrs.get('src', '')})"
    # "inline" containers and anything unknown render as their children
    return inner


def render_inline(nodes: Iterable[SyntaxTreeNode]) -> str:
    """Serialize inline nodes back to markdown text.

    Emphasis, code spans, links and wiki links keep their markup; entities
    and backslash escapes come out decoded (``A &amp; B`` renders as
    ``A & B``). Trailing whitespace and newlines are stripped.

    Args:
        nodes: Inline nodes, or the ``inline`` container of a block.

    Returns:
        The rendered text.
    """
    return "".join(_render_node(node) for node in nodes).rstrip()
