"""Runtime configuration for the picker.

There is no config file. Values come from, in order:

1. Explicit arguments (the ``--root`` CLI option)
2. Environment variables (``PROJECT_PICKER_ROOT``, ``PROJECT_PICKER_TMUX``)
3. Built-in defaults
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ROOT_ENV = "PROJECT_PICKER_ROOT"
TMUX_BINARY_ENV = "PROJECT_PICKER_TMUX"

DEFAULT_ROOT = Path("~/repo")
DEFAULT_TMUX_BINARY = "tmux"
DEFAULT_TICK_INTERVAL = 0.2  # seconds between animation frames


@dataclass(frozen=True)
class PickerConfig:
    """Resolved settings for one run of the picker."""

    root: Path
    tmux_binary: str = DEFAULT_TMUX_BINARY
    tick_interval: float = DEFAULT_TICK_INTERVAL
    root_source: str = "default"  # "option", "env", "default"


def resolve_config(
    root: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> PickerConfig:
    """Build a PickerConfig from arguments and the environment.

    Args:
        root: Projects root given on the command line, if any.
        env: Environment mapping to read. Defaults to ``os.environ``.

    Returns:
        PickerConfig with ``~`` expanded in the root path.
    """
    env = os.environ if env is None else env

    if root is not None:
        resolved_root, source = Path(root), "option"
    elif env.get(ROOT_ENV):
        resolved_root, source = Path(env[ROOT_ENV]), "env"
    else:
        resolved_root, source = DEFAULT_ROOT, "default"

    return PickerConfig(
        root=resolved_root.expanduser(),
        tmux_binary=env.get(TMUX_BINARY_ENV) or DEFAULT_TMUX_BINARY,
        root_source=source,
    )
