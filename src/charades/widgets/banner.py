"""Custom ASCII art banner widget replacing the default Textual Header."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static


def _build_banner() -> Text:
    """Build the banner as a Rich Text object with title and card art side by side."""
    # Letters and their column spans in the 3-row font
    #           C        H        A        R        A        D        E        S
    colors = [
        "bright_magenta",
        "bright_cyan",
        "bright_yellow",
        "bright_green",
        "bright_red",
        "bright_magenta",
        "bright_cyan",
        "bright_yellow",
    ]
    title_rows = [
        ["╔═╗", "╦ ╦", "╔═╗", "╦═╗", "╔═╗", "╔╦╗", "╔═╗", "╔═╗"],
        ["║  ", "╠═╣", "╠═╣", "╠╦╝", "╠═╣", " ║║", "║╣ ", "╚═╗"],
        ["╚═╝", "╩ ╩", "╩ ╩", "╩╚═", "╩ ╩", "═╩╝", "╚═╝", "╚═╝"],
    ]

    # ASCII art: a fanned pair of cards with a question mark
    art_rows = [
        " ┌──┐┌──┐ ",
        " │??││★ │ ",
        " └──┘└──┘ ",
    ]

    card_color = "bright_white"
    mark_color = "bright_yellow"

    def _colorize_art(txt: Text, line: str) -> None:
        """Append a single art line with per-character coloring."""
        for ch in line:
            if ch in "?★":
                txt.append(ch, style=f"bold {mark_color}")
            elif ch in "┌┐└┘│─":
                txt.append(ch, style=f"bold {card_color}")
            else:
                txt.append(ch, style="default")

    text = Text()

    max_rows = max(len(title_rows), len(art_rows))
    gap = " " * 4

    for i in range(max_rows):
        for part, color in zip(title_rows[i], colors):
            text.append(part, style=f"bold {color}")
        text.append(gap, style="default")
        _colorize_art(text, art_rows[i])
        text.append("\n")

    text.append("Act it out", style="bright_white")
    text.append("  │  ", style="dim")
    text.append("← → to flip cards", style="italic cyan")
    return text


class Banner(Vertical):
    """Application banner with ASCII art title."""

    DEFAULT_CSS = """
    Banner {
        width: 100%;
        height: 5;
        background: $primary-background;
        padding: 0 1;
    }

    Banner > #banner-art {
        width: 100%;
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(_build_banner(), id="banner-art")
