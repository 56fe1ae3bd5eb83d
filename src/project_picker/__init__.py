"""Project Picker: open a tmux session for one of your projects."""

__version__ = "0.1.0"

__all__ = ["__version__"]
