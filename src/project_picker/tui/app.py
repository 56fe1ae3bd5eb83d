"""Main TUI application."""

from typing import Optional, Sequence

from textual.app import App, ComposeResult, SuspendNotSupported
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Static

from ..config import PickerConfig
from ..launcher import LaunchError, Launcher, TmuxLauncher
from .frames import CAT_FRAMES
from .render import DEFAULT_THEME, Theme, render_cat, render_menu
from .state import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_QUIT,
    KEY_UP,
    Effect,
    Event,
    KeyPress,
    LaunchProject,
    LaunchResult,
    Phase,
    Quit,
    ScheduleTick,
    Tick,
    UIState,
    initial_effects,
    reduce,
)


class ProjectPickerApp(App):
    """Pick a project and open it in tmux."""

    TITLE = "Project Picker"

    CSS = """
    #picker {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }

    #menu {
        width: auto;
        height: auto;
    }

    #cat {
        width: auto;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("up,k", "picker_key('up')", "Up", show=False),
        Binding("down,j", "picker_key('down')", "Down", show=False),
        Binding("enter", "picker_key('enter')", "Open", show=False),
        Binding("q,ctrl+c", "picker_key('quit')", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: PickerConfig,
        projects: Sequence[str],
        launcher: Optional[Launcher] = None,
        picker_theme: Theme = DEFAULT_THEME,
        frames: Sequence[str] = CAT_FRAMES,
    ):
        """Initialize the picker.

        Args:
            config: Resolved picker settings.
            projects: Project names to offer, in display order.
            launcher: Opens the chosen project. Defaults to a TmuxLauncher
                      rooted at ``config.root``.
            picker_theme: Visual constants for rendering.
            frames: Animation frame table.
        """
        super().__init__()
        self.picker_config = config
        self.picker_theme = picker_theme
        self.frames = tuple(frames)
        self.launcher = launcher or TmuxLauncher(
            config.root, binary=config.tmux_binary
        )
        self.state = UIState.initial(projects)
        self._tick_timer: Optional[Timer] = None
        self._picker_closing = False

    def compose(self) -> ComposeResult:
        with Horizontal(id="picker"):
            yield Static(id="menu")
            yield Static(id="cat")

    def on_mount(self) -> None:
        self._show_state()
        self._run_effects(initial_effects())

    def action_picker_key(self, key: str) -> None:
        """Translate a bound key into a picker event."""
        if key not in (KEY_UP, KEY_DOWN, KEY_ENTER, KEY_QUIT):
            return
        self.apply_event(KeyPress(key))

    def apply_event(self, event: Event) -> None:
        """Run one event through the reducer and carry out its effects."""
        self.state, effects = reduce(self.state, event)
        self._show_state()
        self._run_effects(effects)

    def _show_state(self) -> None:
        if self._picker_closing or self.state.phase is Phase.TERMINATED:
            return
        try:
            menu = self.query_one("#menu", Static)
            cat = self.query_one("#cat", Static)
        except NoMatches:
            # Screen already torn down during shutdown.
            return
        menu.update(render_menu(self.state, self.picker_theme))
        cat.update(render_cat(self.state, self.picker_theme, self.frames))

    def _run_effects(self, effects: Sequence[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, ScheduleTick):
                if not self._picker_closing:
                    self._tick_timer = self.set_timer(
                        self.picker_config.tick_interval, self._animation_tick
                    )
            elif isinstance(effect, LaunchProject):
                # Let the confirmation line paint before tmux takes the terminal.
                self.call_after_refresh(self._launch, effect.project)
            elif isinstance(effect, Quit):
                self._stop_ticks()
                self.exit()

    def _stop_ticks(self) -> None:
        self._picker_closing = True
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None

    def _animation_tick(self) -> None:
        self._tick_timer = None
        if self._picker_closing:
            return
        self.apply_event(Tick())

    def on_unmount(self) -> None:
        self._stop_ticks()

    def _launch(self, project: str) -> None:
        """Hand the terminal to the launcher, then resume browsing."""
        if self.state.phase is not Phase.LAUNCHING:
            return
        error: Optional[str] = None
        try:
            with self.suspend():
                self.launcher.launch(project)
        except LaunchError as e:
            error = str(e)
        except SuspendNotSupported:
            error = "this terminal cannot be handed over to tmux"
        self.apply_event(LaunchResult(error))


def run_tui(
    config: PickerConfig,
    projects: Sequence[str],
    launcher: Optional[Launcher] = None,
) -> None:
    """Launch the picker and block until the user quits."""
    app = ProjectPickerApp(config, projects, launcher=launcher)
    app.run()
