"""Discover projects: the visible subdirectories of the projects root."""

from pathlib import Path


class ProjectListError(OSError):
    """Raised when the projects root cannot be read."""

    def __init__(self, root: Path, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot read projects root {root}: {reason}")

    def __str__(self) -> str:
        return self.args[0]


def list_projects(root: Path) -> tuple[str, ...]:
    """List the project names under ``root``.

    Only direct children that are directories are returned, and names
    starting with ``.`` are skipped. Names are sorted so repeated calls
    on an unchanged directory give the same order.

    Args:
        root: Directory whose subdirectories are projects.

    Returns:
        Sorted tuple of directory names.

    Raises:
        ProjectListError: If ``root`` is missing, not a directory or unreadable.
    """
    root = Path(root)
    try:
        entries = list(root.iterdir())
    except FileNotFoundError:
        raise ProjectListError(root, "no such directory") from None
    except NotADirectoryError:
        raise ProjectListError(root, "not a directory") from None
    except OSError as e:
        raise ProjectListError(root, e.strerror or str(e)) from e

    names = [
        entry.name
        for entry in entries
        if not entry.name.startswith(".") and entry.is_dir()
    ]
    return tuple(sorted(names))
