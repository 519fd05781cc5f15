"""Loading a single markdown file into a Note."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from .config import TITLE_HEADING_DEPTH
from .exceptions import MissingTitleError, NoteIOError
from .models import Note
from .parser import extract_links, find_first_heading, parse, render_inline

log = logging.getLogger(__name__)


async def read_text(path: str | os.PathLike) -> str:
    """Read a file as UTF-8 without blocking the event loop.

    Raises:
        NoteIOError: If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except UnicodeDecodeError as e:
        raise NoteIOError(path, f"Not valid UTF-8: {e}") from e
    except OSError as e:
        raise NoteIOError(path, f"Failed to read file: {e.strerror or e}") from e


async def load_note(path: str | os.PathLike) -> Note:
    """Load and parse one markdown note.

    The title is the first top-level heading, wherever it appears in the
    document. A note without one is a data error, not something to skip.

    Args:
        path: Path to the markdown file.

    Returns:
        The parsed Note.

    Raises:
        NoteIOError: If the file cannot be read as UTF-8 text.
        MissingTitleError: If the note has no (non-empty) top-level heading.
    """
    raw_text = await read_text(path)
    tree = parse(raw_text)

    heading = find_first_heading(tree, TITLE_HEADING_DEPTH)
    if heading is None:
        raise MissingTitleError(path)

    title = render_inline(heading.children)
    if not title:
        raise MissingTitleError(path, "has an empty title heading")

    links = extract_links(tree)
    log.debug("Loaded %s (%r, %d links)", path, title, len(links))

    return Note(title=title, links=links, raw_text=raw_text, syntax_tree=tree)
