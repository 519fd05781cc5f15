"""Note graph construction from a directory tree of markdown files.

The builder walks the tree from a root directory (depth 0), loads every
eligible note concurrently and merges the results into one flat mapping:

    graph = await build_graph("notes", max_depth=1)
    graph["notes/a.md"].title

A build is all-or-nothing. If any note or directory fails to load, the whole
build raises that error and no partial graph is returned.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple

from .config import HIDDEN_PREFIX, NOTE_SUFFIX, UNBOUNDED
from .exceptions import NoteIOError
from .loader import load_note
from .models import Note, NoteGraph

log = logging.getLogger(__name__)

NotePair = tuple[str, Note]


class DirectoryEntry(NamedTuple):
    """Name and type of one directory entry, captured at listing time."""

    name: str
    is_file: bool
    is_dir: bool

    @property
    def is_note(self) -> bool:
        return (
            self.is_file
            and not self.name.startswith(HIDDEN_PREFIX)
            and self.name.endswith(NOTE_SUFFIX)
        )


def _scan(directory: Path) -> list[DirectoryEntry]:
    # Symlinks are reported as neither file nor directory, so they get skipped
    with os.scandir(directory) as it:
        return [
            DirectoryEntry(
                name=entry.name,
                is_file=entry.is_file(follow_symlinks=False),
                is_dir=entry.is_dir(follow_symlinks=False),
            )
            for entry in it
        ]


async def list_directory(directory: Path) -> list[DirectoryEntry]:
    """List a directory without blocking the event loop.

    Raises:
        NoteIOError: If the directory cannot be listed.
    """
    try:
        return await asyncio.to_thread(_scan, directory)
    except OSError as e:
        raise NoteIOError(directory, f"Failed to list directory: {e.strerror or e}") from e


async def _load_pair(path: Path) -> list[NotePair]:
    return [(str(path), await load_note(path))]


async def _read_directory(
    directory: Path, depth: int, max_depth: int | None
) -> list[NotePair]:
    if max_depth is not UNBOUNDED and depth > max_depth:
        return []

    branches = []
    for entry in await list_directory(directory):
        path = directory / entry.name
        if entry.is_note:
            branches.append(_load_pair(path))
        elif entry.is_dir:
            branches.append(_read_directory(path, depth + 1, max_depth))
        else:
            log.debug("Skipping %s", path)

    # Wait for every branch before failing, so no load is left running
    results = await asyncio.gather(*branches, return_exceptions=True)

    pairs: list[NotePair] = []
    for result in results:
        if isinstance(result, BaseException):
            raise result
        pairs.extend(result)
    return pairs


async def build_graph(
    root: str | os.PathLike, max_depth: int | None = UNBOUNDED
) -> NoteGraph:
    """Build the note graph for every markdown note under root.

    Args:
        root: Directory to walk. It is depth 0.
        max_depth: Deepest directory level whose entries are read; 0 reads
            only the root directory. UNBOUNDED (None) walks the whole tree.

    Returns:
        Read-only mapping from note path (root joined with the relative
        path, as a string) to Note.

    Raises:
        ValueError: If max_depth is negative.
        NoteIOError: If a directory or note cannot be read.
        MissingTitleError: If any note lacks a top-level heading.
    """
    if max_depth is not UNBOUNDED and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    root_path = Path(root)
    pairs = await _read_directory(root_path, 0, max_depth)
    log.info("Built note graph for %s: %d notes", root_path, len(pairs))

    return MappingProxyType(dict(pairs))


def build_graph_sync(
    root: str | os.PathLike, max_depth: int | None = UNBOUNDED
) -> NoteGraph:
    """Run build_graph synchronously (for callers without an event loop)."""
    return asyncio.run(build_graph(root, max_depth))
