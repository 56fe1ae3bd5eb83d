"""Pure rendering of UIState into rich renderables."""

from dataclasses import dataclass
from typing import Sequence

from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from .frames import CAT_FRAMES, frame_for
from .state import Phase, UIState


@dataclass(frozen=True)
class Theme:
    """Fixed visual constants for the picker."""

    title: str = "📂 Project Picker"
    marker: str = "👉"
    indent: str = "  "
    hint: str = "(use ↑/↓ or j/k to move, enter to open, q to quit)"
    empty_message: str = "No projects found."
    title_style: str = "bold #FAFAFA on #7D56F4"
    item_style: str = ""
    selected_style: str = "bold color(205)"
    hint_style: str = "color(241)"
    cat_style: str = "#FFB6C1"
    error_style: str = "#FF0000"
    cat_margin: int = 4


DEFAULT_THEME = Theme()


def render_menu(state: UIState, theme: Theme = DEFAULT_THEME) -> Text:
    """Render the left column: title, project list, hint and error line."""
    text = Text()
    text.append(f" {theme.title} ", style=theme.title_style)
    text.append("\n\n")

    if state.phase is Phase.LAUNCHING and state.selection is not None:
        text.append(f"Opening {state.selection}...", style=theme.selected_style)
        text.append("\n")
    elif not state.projects:
        text.append(theme.indent + theme.empty_message, style=theme.hint_style)
        text.append("\n")
    else:
        for index, project in enumerate(state.projects):
            if index == state.cursor:
                text.append(f"{theme.marker} {project}", style=theme.selected_style)
            else:
                text.append(theme.indent + project, style=theme.item_style)
            text.append("\n")

    text.append("\n")
    text.append(theme.hint, style=theme.hint_style)

    if state.last_error:
        text.append("\n\n")
        text.append(f"Error: {state.last_error}", style=theme.error_style)

    return text


def render_cat(
    state: UIState,
    theme: Theme = DEFAULT_THEME,
    frames: Sequence[str] = CAT_FRAMES,
) -> Text:
    """Render the right column: the current animation frame."""
    return Text(frame_for(frames, state.frame), style=theme.cat_style)


def render_view(
    state: UIState,
    theme: Theme = DEFAULT_THEME,
    frames: Sequence[str] = CAT_FRAMES,
) -> Table:
    """Both columns side by side, top aligned."""
    grid = Table.grid()
    grid.add_column(vertical="top")
    grid.add_column(vertical="top")
    grid.add_row(
        render_menu(state, theme),
        Padding(render_cat(state, theme, frames), (0, 0, 0, theme.cat_margin)),
    )
    return grid
