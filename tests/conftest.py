"""Shared fixtures for the picker tests."""

from pathlib import Path
from typing import Optional

import pytest

from project_picker.config import PickerConfig
from project_picker.launcher import LaunchError


class FakeLauncher:
    """Records launches instead of running tmux."""

    def __init__(self, fail_with: Optional[str] = None):
        self.fail_with = fail_with
        self.calls: list[str] = []

    def launch(self, project: str) -> None:
        self.calls.append(project)
        if self.fail_with:
            raise LaunchError(project, self.fail_with)


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """A projects root with two projects, a hidden dir and a file."""
    root = tmp_path / "repo"
    root.mkdir()
    (root / ".git").mkdir()
    (root / "alpha").mkdir()
    (root / "notes.txt").write_text("not a project")
    (root / "beta").mkdir()
    return root


@pytest.fixture
def config(projects_root: Path) -> PickerConfig:
    return PickerConfig(root=projects_root, tick_interval=0.01)


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def failing_launcher() -> FakeLauncher:
    return FakeLauncher(fail_with="tmux exited with status 1")
