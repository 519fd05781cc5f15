"""Configuration management for notegraph.

This module contains all configurable constants for note discovery.
Magic values are documented here rather than scattered throughout the codebase.
"""

import os
from pathlib import Path


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


# =============================================================================
# Note discovery
# =============================================================================

# Only files with this suffix are loaded as notes
NOTE_SUFFIX = ".md"

# Files whose name starts with this prefix are hidden and never loaded
HIDDEN_PREFIX = "."

# Explicit "no limit" sentinel for the recursion depth of a graph build.
# The root directory is depth 0.
UNBOUNDED: int | None = None

# Heading level used as the note title (a single leading "#")
TITLE_HEADING_DEPTH = 1


# =============================================================================
# Environment overrides
# =============================================================================

ROOT_ENV_VAR = "NOTEGRAPH_ROOT"
MAX_DEPTH_ENV_VAR = "NOTEGRAPH_MAX_DEPTH"
LOG_LEVEL_ENV_VAR = "NOTEGRAPH_LOG_LEVEL"


def get_notes_root() -> Path:
    """Get the notes root directory from the environment.

    Raises:
        ConfigurationError: If NOTEGRAPH_ROOT is not set.
    """
    root = os.environ.get(ROOT_ENV_VAR)
    if root:
        return Path(root)

    raise ConfigurationError(
        "No notes directory given. Options:\n"
        "  1. Pass the directory as an argument: 'notegraph build path/to/notes'\n"
        f"  2. Set {ROOT_ENV_VAR} to an existing notes directory"
    )


def get_max_depth() -> int | None:
    """Get the maximum recursion depth from the environment.

    An unset or empty NOTEGRAPH_MAX_DEPTH means unbounded.

    Returns:
        Non-negative depth limit, or UNBOUNDED.

    Raises:
        ConfigurationError: If the value is not a non-negative integer.
    """
    raw = os.environ.get(MAX_DEPTH_ENV_VAR, "").strip()
    if not raw:
        return UNBOUNDED

    try:
        depth = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{MAX_DEPTH_ENV_VAR} must be an integer, got {raw!r}"
        ) from e

    if depth < 0:
        raise ConfigurationError(f"{MAX_DEPTH_ENV_VAR} must be >= 0, got {depth}")
    return depth
