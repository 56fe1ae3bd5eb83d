"""Picker state and the reducer that drives it.

All state changes go through ``reduce``: it takes the current state and
one event and returns the next state plus the effects the app has to
carry out (launch tmux, arm the animation timer, quit). It performs no
I/O, so the whole interaction can be tested without a terminal.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Union


class Phase(str, Enum):
    BROWSING = "browsing"
    LAUNCHING = "launching"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class UIState:
    """Everything the picker renders."""

    projects: tuple[str, ...] = ()
    cursor: int = 0
    frame: int = 0
    selection: Optional[str] = None
    last_error: Optional[str] = None
    phase: Phase = Phase.BROWSING

    @classmethod
    def initial(cls, projects: Sequence[str]) -> "UIState":
        return cls(projects=tuple(projects))

    @property
    def current_project(self) -> Optional[str]:
        """Project under the cursor, or None when the list is empty."""
        if not self.projects:
            return None
        return self.projects[self.cursor]


# Events

KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_QUIT = "quit"


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class LaunchResult:
    error: Optional[str] = None


Event = Union[KeyPress, Tick, LaunchResult]


# Effects

@dataclass(frozen=True)
class LaunchProject:
    project: str


@dataclass(frozen=True)
class ScheduleTick:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Effect = Union[LaunchProject, ScheduleTick, Quit]

Transition = tuple[UIState, tuple[Effect, ...]]


def initial_effects() -> tuple[Effect, ...]:
    """Effects to run once when the picker starts."""
    return (ScheduleTick(),)


def _on_key(state: UIState, key: str) -> Transition:
    if key == KEY_QUIT:
        return replace(state, phase=Phase.TERMINATED), (Quit(),)

    if state.phase is not Phase.BROWSING:
        return state, ()

    if key == KEY_UP:
        if state.cursor > 0:
            return replace(state, cursor=state.cursor - 1), ()
    elif key == KEY_DOWN:
        if state.cursor < len(state.projects) - 1:
            return replace(state, cursor=state.cursor + 1), ()
    elif key == KEY_ENTER:
        project = state.current_project
        if project is not None:
            launching = replace(
                state,
                phase=Phase.LAUNCHING,
                selection=project,
                last_error=None,
            )
            return launching, (LaunchProject(project),)

    return state, ()


def reduce(state: UIState, event: Event) -> Transition:
    """Apply one event to the state.

    Args:
        state: Current state.
        event: KeyPress, Tick or LaunchResult.

    Returns:
        Tuple of (next state, effects to perform in order).
    """
    if state.phase is Phase.TERMINATED:
        return state, ()

    if isinstance(event, KeyPress):
        return _on_key(state, event.key)

    if isinstance(event, Tick):
        return replace(state, frame=state.frame + 1), (ScheduleTick(),)

    if isinstance(event, LaunchResult):
        if state.phase is not Phase.LAUNCHING:
            return state, ()
        return replace(state, phase=Phase.BROWSING, last_error=event.error), ()

    raise TypeError(f"Unknown event: {event!r}")
