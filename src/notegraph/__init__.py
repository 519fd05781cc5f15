"""notegraph: build an in-memory graph of a directory of markdown notes."""

from .exceptions import MissingTitleError, NoteGraphError, NoteIOError
from .graph import build_graph, build_graph_sync
from .loader import load_note
from .models import LinkEntry, Note, NoteGraph

__version__ = "0.1.0"

__all__ = [
    "build_graph",
    "build_graph_sync",
    "load_note",
    "Note",
    "LinkEntry",
    "NoteGraph",
    "NoteGraphError",
    "NoteIOError",
    "MissingTitleError",
]
