"""Tests for the notegraph CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from notegraph.cli import cli


class TestBuildCommand:
    """Tests for `notegraph build`."""

    def test_lists_notes_sorted(self, runner: CliRunner, notes_root: Path, write_note):
        write_note("b.md", "# Beta")
        write_note("a.md", "# Alpha\n\nSee [b](b.md).")

        result = runner.invoke(cli, ["build", str(notes_root)])

        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines == [
            f"{notes_root / 'a.md'}\tAlpha\t1 link",
            f"{notes_root / 'b.md'}\tBeta\t0 links",
        ]

    def test_json_output(self, runner: CliRunner, notes_root: Path, write_note):
        write_note("a.md", "# Alpha\n\n[[Beta]]")

        result = runner.invoke(cli, ["build", str(notes_root), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        entry = data[str(notes_root / "a.md")]
        assert entry["title"] == "Alpha"
        assert entry["links"][0]["target"] == "Beta"
        assert entry["links"][0]["kind"] == "wikilink"

    def test_max_depth_option(self, runner: CliRunner, notes_root: Path, write_note):
        write_note("a.md", "# A")
        write_note("sub/b.md", "# B")

        result = runner.invoke(cli, ["build", str(notes_root), "--max-depth", "0", "--json"])

        assert result.exit_code == 0, result.output
        assert list(json.loads(result.output)) == [str(notes_root / "a.md")]

    def test_negative_max_depth_is_usage_error(self, runner: CliRunner, notes_root: Path):
        result = runner.invoke(cli, ["build", str(notes_root), "--max-depth", "-1"])
        assert result.exit_code == 2

    def test_root_and_depth_from_environment(self, runner: CliRunner, notes_root: Path, write_note):
        write_note("a.md", "# A")
        write_note("sub/b.md", "# B")

        result = runner.invoke(
            cli,
            ["build", "--json"],
            env={"NOTEGRAPH_ROOT": str(notes_root), "NOTEGRAPH_MAX_DEPTH": "0"},
        )

        assert result.exit_code == 0, result.output
        assert list(json.loads(result.output)) == [str(notes_root / "a.md")]

    def test_no_root_configured(self, runner: CliRunner):
        result = runner.invoke(cli, ["build"])

        assert result.exit_code == 1
        assert "No notes directory given" in result.output

    def test_missing_title_reports_path(self, runner: CliRunner, notes_root: Path, write_note):
        bad = write_note("bad.md", "untitled")

        result = runner.invoke(cli, ["build", str(notes_root)])

        assert result.exit_code == 1
        assert str(bad) in result.output
        assert "has no title" in result.output


class TestLinksCommand:
    """Tests for `notegraph links`."""

    def test_shows_title_and_links(self, runner: CliRunner, write_note):
        path = write_note("a.md", "# Alpha\n\nSee [b](b.md) and [[Gamma]].")

        result = runner.invoke(cli, ["links", str(path)])

        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines[0] == "# Alpha"
        assert lines[1] == "  -> b.md  (b)"
        assert lines[2] == "  -> [[Gamma]]"

    def test_json_output(self, runner: CliRunner, write_note):
        path = write_note("a.md", "# Alpha")

        result = runner.invoke(cli, ["links", str(path), "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"title": "Alpha", "links": []}

    def test_missing_file(self, runner: CliRunner, notes_root: Path):
        result = runner.invoke(cli, ["links", str(notes_root / "nope.md")])

        assert result.exit_code == 1
        assert "nope.md" in result.output


def test_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "notegraph" in result.output
