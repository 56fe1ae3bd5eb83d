"""Project Picker terminal user interface.

A single screen listing the projects with a small cat animation beside
it. Selecting a project suspends the UI while tmux runs.
"""

from .app import ProjectPickerApp, run_tui

__all__ = ["ProjectPickerApp", "run_tui"]
