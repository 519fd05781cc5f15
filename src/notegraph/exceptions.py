"""Custom exceptions for note graph operations."""

import os


class NoteGraphError(Exception):
    """Base exception for note graph operations."""

    def __init__(self, path: str | os.PathLike, message: str):
        self.path = os.fspath(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class NoteIOError(NoteGraphError):
    """Raised when a note or a notes directory cannot be read."""

    pass


class MissingTitleError(NoteGraphError):
    """Raised when a note has no top-level heading to use as its title."""

    def __init__(self, path: str | os.PathLike, message: str = "has no title (no '# ' heading found)"):
        super().__init__(path, message)
