#!/usr/bin/env python3
"""
notegraph: CLI for inspecting a note graph

Usage:
    notegraph build path/to/notes          # List every note with its title
    notegraph build notes --max-depth=1    # Only the root and one level down
    notegraph build notes --json           # Titles and links as JSON
    notegraph links path/to/note.md        # Show one note's outgoing links
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click
from click.exceptions import ClickException

from . import __version__ as NOTEGRAPH_VERSION
from .config import ConfigurationError, get_max_depth, get_notes_root
from .exceptions import NoteGraphError


def run_async(coro):
    """Run async function synchronously."""
    return asyncio.run(coro)


def output(data, as_json: bool = False) -> None:
    if as_json:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        click.echo(data)


@click.group()
@click.version_option(version=NOTEGRAPH_VERSION, prog_name="notegraph")
def cli():
    """notegraph: titles and links of a directory of markdown notes.

    \b
    Quick start:
      notegraph build notes/              # One line per note
      notegraph build notes/ --json       # Full graph as JSON
      notegraph links notes/a.md          # Links of a single note

    \b
    Environment:
      NOTEGRAPH_ROOT       Default notes directory for 'build'
      NOTEGRAPH_MAX_DEPTH  Default recursion depth (unset = unbounded)
      NOTEGRAPH_LOG_LEVEL  DEBUG, INFO, WARNING or ERROR
    """


@cli.command()
@click.argument("root", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Deepest directory level to read (root is 0). Default: unbounded",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def build(root: Path | None, max_depth: int | None, as_json: bool):
    """Build the note graph for a directory and list its notes.

    \b
    Examples:
      notegraph build notes/
      notegraph build notes/ --max-depth=0
    """
    from .graph import build_graph

    try:
        if root is None:
            root = get_notes_root()
        if max_depth is None:
            max_depth = get_max_depth()
        graph = run_async(build_graph(root, max_depth))
    except (ConfigurationError, NoteGraphError) as exc:
        raise ClickException(str(exc)) from exc

    paths = sorted(graph)
    if as_json:
        output({path: graph[path].to_summary() for path in paths}, as_json=True)
        return

    for path in paths:
        note = graph[path]
        count = len(note.links)
        output(f"{path}\t{note.title}\t{count} link{'' if count == 1 else 's'}")


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def links(path: Path, as_json: bool):
    """Show the title and outgoing links of a single note."""
    from .loader import load_note

    try:
        note = run_async(load_note(path))
    except NoteGraphError as exc:
        raise ClickException(str(exc)) from exc

    if as_json:
        output(note.to_summary(), as_json=True)
        return

    output(f"# {note.title}")
    for link in note.links:
        target = f"[[{link.target}]]" if link.kind == "wikilink" else link.target
        output(f"  -> {target}  ({link.text})" if link.text != link.target else f"  -> {target}")


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def main():
    """Entry point for notegraph CLI."""
    from ._logging import configure_logging

    configure_logging()
    cli()


if __name__ == "__main__":
    main()
