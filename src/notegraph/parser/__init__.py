"""Markdown parsing, title lookup and link extraction."""

from .links import extract_links
from .markdown import find_first, find_first_heading, parse, render_inline

__all__ = [
    "parse",
    "find_first",
    "find_first_heading",
    "render_inline",
    "extract_links",
]
