"""Shared test fixtures for notegraph test suite.

Design:
- notes_root: isolated notes directory in a temp dir
- write_note: helper fixture that writes a note (creating parent dirs)
- runner: CliRunner for CLI tests
- Async tests use pytest-asyncio (@pytest.mark.asyncio)
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner


# ─────────────────────────────────────────────────────────────────────────────
# Core Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def runner() -> CliRunner:
    """CLI runner with isolated environment."""
    return CliRunner()


@pytest.fixture
def notes_root(tmp_path: Path) -> Path:
    """Create an empty notes directory."""
    root = tmp_path / "notes"
    root.mkdir()
    return root


@pytest.fixture
def write_note(notes_root: Path) -> Callable[[str, str], Path]:
    """Write a note relative to notes_root and return its path.

    Usage:
        def test_something(write_note):
            path = write_note("sub/a.md", "# Alpha")
    """

    def _write(rel_path: str, content: str) -> Path:
        path = notes_root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep NOTEGRAPH_* settings from the outer environment out of tests."""
    for name in ("NOTEGRAPH_ROOT", "NOTEGRAPH_MAX_DEPTH", "NOTEGRAPH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
