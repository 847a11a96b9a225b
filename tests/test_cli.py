"""Tests for the SVCS command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from svcs.cli import MAN_PAGE, cli


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def run(workdir: Path):
    runner = CliRunner()

    def _run(*args: str, input: str | None = None):
        return runner.invoke(cli, list(args), input=input, catch_exceptions=False)

    return _run


def _last_commit_id(workdir: Path) -> str:
    lines = (workdir / "vcs" / "log.txt").read_text().splitlines()
    return lines[-1].removeprefix("commit ")


# ── Help and dispatch ────────────────────────────────────────────────────────

class TestHelp:

    def test_no_arguments_prints_man_page(self, run):
        result = run()
        assert result.exit_code == 0
        assert result.output == MAN_PAGE + "\n"

    def test_help_flag_prints_man_page(self, run):
        result = run("--help")
        assert result.exit_code == 0
        assert result.output == MAN_PAGE + "\n"

    def test_help_does_not_create_repository(self, run, workdir: Path):
        run("--help")
        run()
        assert not (workdir / "vcs").exists()

    def test_unknown_command(self, run):
        result = run("wrong")
        assert result.exit_code == 0
        assert result.output == "'wrong' is not a SVCS command.\n"

    def test_unknown_command_ignores_extra_args(self, run):
        result = run("push", "origin", "--force")
        assert result.exit_code == 0
        assert result.output == "'push' is not a SVCS command.\n"

    def test_repo_dir_option(self, run, workdir: Path):
        run("--repo-dir", "store", "config", "Alice")
        assert (workdir / "store" / "config.txt").read_text() == "Alice"


# ── config ───────────────────────────────────────────────────────────────────

class TestConfigCommand:

    def test_set_username(self, run, workdir: Path):
        result = run("config", "Alice")
        assert result.exit_code == 0
        assert result.output == "The username is Alice.\n"
        assert (workdir / "vcs" / "config.txt").read_text() == "Alice"

    def test_show_username(self, run):
        run("config", "Alice")
        result = run("config")
        assert result.output == "The username is Alice.\n"

    def test_prompts_when_unset(self, run):
        result = run("config", input="Bob\n")
        assert result.exit_code == 0
        assert "Please, tell me who you are." in result.output
        assert result.output.endswith("The username is Bob.\n")

    def test_empty_prompt_answer(self, run, workdir: Path):
        result = run("config", input="\n")
        assert result.exit_code == 0
        assert result.output.endswith("No username given.\n")
        assert (workdir / "vcs" / "config.txt").read_text() == ""

    def test_multiline_username(self, run, workdir: Path):
        run("config", "Alice")
        result = run("config", "Ali\nce")
        assert result.exit_code == 0
        assert result.output == "Username must be a single line.\n"
        assert (workdir / "vcs" / "config.txt").read_text() == "Alice"


# ── add ──────────────────────────────────────────────────────────────────────

class TestAddCommand:

    def test_empty_index_prompts(self, run):
        result = run("add")
        assert result.output == "Add a file to the index.\n"

    def test_track_and_list(self, run, workdir: Path):
        (workdir / "a.txt").write_text("a")
        (workdir / "b.txt").write_text("b")

        assert run("add", "a.txt").output == "The file 'a.txt' is tracked.\n"
        assert run("add", "b.txt").output == "The file 'b.txt' is tracked.\n"

        result = run("add")
        assert result.output == "Tracked files:\na.txt\nb.txt\n"

    def test_readd_is_silent(self, run, workdir: Path):
        (workdir / "a.txt").write_text("a")
        run("add", "a.txt")
        result = run("add", "a.txt")
        assert result.exit_code == 0
        assert result.output == ""

    def test_missing_file(self, run):
        result = run("add", "missing.txt")
        assert result.exit_code == 0
        assert result.output == "Can't find 'missing.txt'.\n"


# ── commit / log / checkout ──────────────────────────────────────────────────

class TestCommitCommand:

    def test_message_required(self, run):
        assert run("commit").output == "Message was not passed.\n"

    def test_username_required(self, run, workdir: Path):
        (workdir / "a.txt").write_text("a")
        run("add", "a.txt")
        assert run("commit", "first").output == "No username given.\n"

    def test_tracked_files_required(self, run):
        run("config", "Alice")
        assert run("commit", "first").output == "No tracked files.\n"

    def test_commit_then_nothing_to_commit(self, run, workdir: Path):
        (workdir / "a.txt").write_text("hello")
        run("config", "Alice")
        run("add", "a.txt")

        assert run("commit", "first").output == "Changes are committed.\n"
        assert run("commit", "again").output == "Nothing to commit.\n"

        log_text = (workdir / "vcs" / "log.txt").read_text()
        assert log_text.count("\ncommit ") == 1


class TestLogCommand:

    def test_no_commits(self, run):
        result = run("log")
        assert result.exit_code == 0
        assert result.output == "No commits yet.\n"

    def test_newest_first(self, run, workdir: Path):
        (workdir / "a.txt").write_text("hello")
        run("config", "Alice")
        run("add", "a.txt")
        run("commit", "first")
        first_id = _last_commit_id(workdir)
        (workdir / "a.txt").write_text("world")
        run("commit", "second")
        second_id = _last_commit_id(workdir)

        result = run("log")
        assert result.output.splitlines() == [
            f"commit {second_id}",
            "Author: Alice",
            "second",
            "",
            f"commit {first_id}",
            "Author: Alice",
            "first",
            "",
        ]


class TestCheckoutCommand:

    def test_id_required(self, run):
        assert run("checkout").output == "Commit id was not passed.\n"

    def test_unknown_commit(self, run):
        assert run("checkout", "abc").output == "Commit does not exist.\n"

    def test_scenario(self, run, workdir: Path):
        a = workdir / "a.txt"
        a.write_text("hello")
        run("add", "a.txt")
        run("config", "Alice")
        run("commit", "first")
        first_id = _last_commit_id(workdir)

        a.write_text("world")
        run("commit", "second")
        assert _last_commit_id(workdir) != first_id

        result = run("checkout", first_id)
        assert result.exit_code == 0
        assert result.output == f"Switched to commit {first_id}.\n"
        assert a.read_text() == "hello"
