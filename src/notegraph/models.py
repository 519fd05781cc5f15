"""Pydantic models for the note graph."""

from collections.abc import Mapping
from typing import Any, Literal

from markdown_it.tree import SyntaxTreeNode
from pydantic import BaseModel, ConfigDict, Field


class LinkEntry(BaseModel):
    """An outgoing link found in a note's content."""

    model_config = ConfigDict(frozen=True)

    target: str  # href for markdown links, target title/path for wiki links
    text: str = ""  # Visible link text (alias for [[target|alias]])
    kind: Literal["markdown", "wikilink"] = "markdown"
    line: int | None = None  # 0-based first line of the enclosing block
    context: str | None = None  # Source text of the enclosing block


class Note(BaseModel):
    """The parsed representation of one markdown file.

    Notes are immutable once built. ``syntax_tree`` is the markdown-it tree
    the title and links were extracted from; nothing else holds a reference to it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str = Field(min_length=1)
    links: tuple[LinkEntry, ...] = ()
    raw_text: str
    syntax_tree: SyntaxTreeNode = Field(repr=False)

    def to_summary(self) -> dict[str, Any]:
        """JSON-ready view of the note without the syntax tree."""
        return {
            "title": self.title,
            "links": [link.model_dump() for link in self.links],
        }


# Mapping from note path to Note, the output of one graph build.
# build_graph returns a read-only view, so the snapshot cannot be mutated.
NoteGraph = Mapping[str, Note]
