"""Open a project in tmux.

Inside an existing tmux client (``$TMUX`` set) a new window is created in
the project directory. Outside tmux a session named after the project is
created, or attached to if it already exists (``new-session -A``).
"""

import os
import subprocess
from pathlib import Path
from typing import Callable, Mapping, Optional, Protocol

TMUX_ENV = "TMUX"


class LaunchError(Exception):
    """Raised when tmux could not be started or exited with an error."""

    def __init__(self, project: str, message: str, returncode: Optional[int] = None):
        self.project = project
        self.returncode = returncode
        super().__init__(message)


class Launcher(Protocol):
    """Anything that can open a project by name."""

    def launch(self, project: str) -> None: ...


def in_multiplexer(env: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether we are running inside a tmux client."""
    env = os.environ if env is None else env
    return bool(env.get(TMUX_ENV))


def build_command(
    project: str,
    root: Path,
    env: Optional[Mapping[str, str]] = None,
    binary: str = "tmux",
) -> list[str]:
    """Build the tmux argv that opens ``project``.

    Args:
        project: Directory name of the project (also the window/session name).
        root: Projects root containing ``project``.
        env: Environment used to detect an enclosing tmux client.
        binary: tmux executable.

    Returns:
        Argument list suitable for ``subprocess.run``.
    """
    project_path = str(Path(root) / project)

    if in_multiplexer(env):
        return [binary, "new-window", "-c", project_path, "-n", project]

    return [binary, "new-session", "-A", "-s", project, "-c", project_path]


class TmuxLauncher:
    """Runs tmux in the foreground, sharing this process's terminal."""

    def __init__(
        self,
        root: Path,
        binary: str = "tmux",
        env: Optional[Mapping[str, str]] = None,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
    ):
        self.root = Path(root)
        self.binary = binary
        self.env = env
        self._runner = runner or subprocess.run

    def command_for(self, project: str) -> list[str]:
        return build_command(project, self.root, env=self.env, binary=self.binary)

    def launch(self, project: str) -> None:
        """Run tmux for ``project`` and wait for it to return.

        stdin, stdout and stderr are inherited so tmux owns the terminal
        until the user detaches or the command finishes.

        Raises:
            LaunchError: If tmux cannot be executed or exits non-zero.
        """
        command = self.command_for(project)
        try:
            result = self._runner(command, check=False)
        except OSError as e:
            raise LaunchError(
                project, f"could not run {self.binary}: {e.strerror or e}"
            ) from e

        if result.returncode != 0:
            raise LaunchError(
                project,
                f"{self.binary} exited with status {result.returncode} opening {project}",
                returncode=result.returncode,
            )
