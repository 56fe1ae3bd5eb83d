"""Tests for the command line interface."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from project_picker import __version__
from project_picker.cli import app

runner = CliRunner()


class TestListCommand:
    """Tests for `project-picker list`."""

    def test_prints_projects(self, projects_root: Path):
        result = runner.invoke(app, ["list", "--root", str(projects_root)])

        assert result.exit_code == 0
        assert result.stdout.split() == ["alpha", "beta"]

    def test_root_from_environment(self, projects_root: Path):
        result = runner.invoke(app, ["list"], env={"PROJECT_PICKER_ROOT": str(projects_root)})

        assert result.exit_code == 0
        assert "alpha" in result.stdout

    def test_root_given_before_subcommand(self, projects_root: Path, tmp_path: Path):
        """--root on the main command applies to `list` and beats the environment."""
        result = runner.invoke(
            app,
            ["--root", str(projects_root), "list"],
            env={"PROJECT_PICKER_ROOT": str(tmp_path / "missing")},
        )

        assert result.exit_code == 0
        assert result.stdout.split() == ["alpha", "beta"]

    def test_subcommand_root_wins(self, projects_root: Path, tmp_path: Path):
        result = runner.invoke(
            app, ["--root", str(tmp_path / "missing"), "list", "--root", str(projects_root)]
        )

        assert result.exit_code == 0
        assert result.stdout.split() == ["alpha", "beta"]

    def test_missing_root_exits_with_error(self, tmp_path: Path):
        result = runner.invoke(app, ["list", "--root", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Error:" in result.stdout


class TestPickerCommand:
    """Tests for running the picker itself."""

    @patch("project_picker.tui.run_tui")
    def test_starts_tui_with_projects(self, mock_run_tui, projects_root: Path):
        result = runner.invoke(app, ["--root", str(projects_root)])

        assert result.exit_code == 0
        config, projects = mock_run_tui.call_args.args
        assert config.root == projects_root
        assert projects == ("alpha", "beta")

    @patch("project_picker.tui.run_tui")
    def test_missing_root_never_starts_tui(self, mock_run_tui, tmp_path: Path):
        result = runner.invoke(app, ["--root", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Error:" in result.stdout
        mock_run_tui.assert_not_called()

    @patch("project_picker.tui.run_tui")
    def test_default_root_failure_shows_hint(self, mock_run_tui, tmp_path: Path):
        with patch("project_picker.config.DEFAULT_ROOT", tmp_path / "missing"):
            result = runner.invoke(app, [], env={"PROJECT_PICKER_ROOT": ""})

        assert result.exit_code == 1
        assert "PROJECT_PICKER_ROOT" in result.stdout
        mock_run_tui.assert_not_called()

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

