"""Integration tests for 'gitstage add' command."""

from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from gitstage.cli import main
from gitstage.cli.main import app
from gitstage.constants import CONFIG_FILE
from gitstage.messages import Messages

runner = CliRunner()
MESSAGES = Messages()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep rich from wrapping long temporary paths."""
    monkeypatch.setattr(main, "console", Console(width=400))


@pytest.fixture
def project(git_repo: Path, monkeypatch) -> Path:
    """Run commands from inside the repository."""
    monkeypatch.chdir(git_repo)
    return git_repo


class TestAddCommand:
    """Test suite for 'gitstage add' command."""

    def test_confirm_and_stage(self, project: Path, staged_files) -> None:
        """Test staging a modified file after confirming."""
        (project / "readme.md").write_text("# Changed\n")

        result = runner.invoke(app, ["add", "readme.md"], input="y\n")

        assert result.exit_code == 0
        assert MESSAGES.file("readme.md") in result.output
        assert MESSAGES.add_success in result.output
        assert staged_files(project) == ["readme.md"]

    def test_file_name_with_markup(self, project: Path, staged_files) -> None:
        """Test a file name that looks like rich markup is shown and staged as is."""
        (project / "[bold]notes.md").write_text("notes\n")

        result = runner.invoke(app, ["add", "[bold]notes.md"], input="y\n")

        assert result.exit_code == 0
        assert MESSAGES.file("[bold]notes.md") in result.output
        assert staged_files(project) == ["[bold]notes.md"]

    def test_cancel(self, project: Path, staged_files) -> None:
        """Test that declining the prompt stages nothing."""
        (project / "readme.md").write_text("# Changed\n")

        result = runner.invoke(app, ["add", "readme.md"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert MESSAGES.add_success not in result.output
        assert staged_files(project) == []

    def test_nothing_to_add(self, project: Path, staged_files) -> None:
        """Test an unchanged file is reported without prompting."""
        result = runner.invoke(app, ["add", "readme.md"])

        assert result.exit_code == 0
        assert MESSAGES.nothing_add_to_index in result.output
        assert "Add to index?" not in result.output
        assert staged_files(project) == []

    def test_nothing_to_add_multi_select(self, project: Path) -> None:
        """Test the multi-select wording when no selected path changed."""
        (project / "docs").mkdir()
        (project / "docs" / "notes.md").write_text("notes\n")

        result = runner.invoke(app, ["add", "readme.md", "other.md"])

        assert result.exit_code == 0
        assert MESSAGES.nothing_add_to_index_multi_select in result.output

    def test_folder(self, project: Path, staged_files) -> None:
        """Test staging a folder with an untracked file inside."""
        (project / "src").mkdir()
        (project / "src" / "main.go").write_text("package main\n")

        result = runner.invoke(app, ["add", "src"], input="y\n")

        assert result.exit_code == 0
        assert MESSAGES.folder("src") in result.output
        assert staged_files(project) == ["src/main.go"]

    def test_multiple(self, project: Path, staged_files) -> None:
        (project / "a.txt").write_text("a\n")
        (project / "b.txt").write_text("b\n")

        result = runner.invoke(app, ["add", "a.txt", "b.txt", "readme.md"], input="y\n")

        assert result.exit_code == 0
        assert MESSAGES.add_to_index_multiple in result.output
        assert staged_files(project) == ["a.txt", "b.txt"]

    def test_update_only(self, project: Path, staged_files) -> None:
        """Test --update leaves untracked files alone."""
        (project / "readme.md").write_text("# Changed\n")
        (project / "new.txt").write_text("new\n")

        result = runner.invoke(app, ["add", ".", "--update"], input="y\n")

        assert result.exit_code == 0
        assert staged_files(project) == ["readme.md"]

    def test_yes_skips_status(self, project: Path, staged_files) -> None:
        """Test --yes stages directly without prompting."""
        (project / "new.txt").write_text("new\n")

        result = runner.invoke(app, ["add", "--yes", "new.txt"])

        assert result.exit_code == 0
        assert "Add to index?" not in result.output
        assert MESSAGES.add_success in result.output
        assert staged_files(project) == ["new.txt"]

    def test_stage_failure(self, project: Path) -> None:
        """Test a failing git add exits with 1."""
        result = runner.invoke(app, ["add", "--yes", "missing.txt"])

        assert result.exit_code == 1
        assert MESSAGES.add_failed in result.output

    def test_status_failure(self, tmp_path: Path, monkeypatch) -> None:
        """Test running outside a git repository."""
        plain = tmp_path / "plain"
        plain.mkdir()
        (plain / "a.txt").write_text("a\n")
        monkeypatch.chdir(plain)

        result = runner.invoke(app, ["add", "a.txt"])

        assert result.exit_code == 1
        assert MESSAGES.status_failed in result.output

    def test_path_outside_project(self, project: Path, tmp_path: Path) -> None:
        outside = tmp_path / "elsewhere.txt"
        outside.write_text("x")

        result = runner.invoke(app, ["add", str(outside)])

        assert result.exit_code == 1
        assert "outside project root" in result.output

    def test_project_option(self, git_repo: Path, tmp_path: Path, staged_files, monkeypatch) -> None:
        (git_repo / "readme.md").write_text("# Changed\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(
            app,
            ["add", "--project", str(git_repo), str(git_repo / "readme.md")],
            input="y\n",
        )

        assert result.exit_code == 0
        assert staged_files(git_repo) == ["readme.md"]

    def test_show_output(self, project: Path) -> None:
        (project / "readme.md").write_text("# Changed\n")

        result = runner.invoke(app, ["add", "--yes", "--show-output", "readme.md"])

        assert result.exit_code == 0
        assert "Git add to index" in result.output
        assert result.output.count(MESSAGES.add_success) == 2

    def test_config_messages(self, project: Path) -> None:
        (project / CONFIG_FILE).write_text(
            '[messages]\nadd_success = "All staged"\n', encoding="utf-8"
        )
        (project / "readme.md").write_text("# Changed\n")

        result = runner.invoke(app, ["add", "--yes", "readme.md"])

        assert result.exit_code == 0
        assert "All staged" in result.output

    def test_bad_config(self, project: Path) -> None:
        (project / CONFIG_FILE).write_text("unknown = 1\n", encoding="utf-8")

        result = runner.invoke(app, ["add", "readme.md"])

        assert result.exit_code == 1
        assert "Unknown configuration key" in result.output


class TestVersionCommand:
    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "gitstage version 0.1.0" in result.output
