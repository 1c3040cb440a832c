"""Card widget showing the current charade."""

from rich.text import Text

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Static

from ..gestures import MIN_SWIPE_DISTANCE, Swipe, classify_swipe


class CardView(Vertical):
    """Widget displaying one card, with mouse swipes for navigation."""

    can_focus = True

    class Swiped(Message):
        """Message emitted when a drag across the card counts as a swipe."""

        def __init__(self, direction: Swipe) -> None:
            super().__init__()
            self.direction = direction

    DEFAULT_CSS = """
    CardView {
        width: 1fr;
        height: 1fr;
    }

    CardView > #card-header {
        background: $primary-background;
        color: $success;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    CardView > #card-body {
        height: 1fr;
        content-align: center middle;
        text-align: center;
        padding: 1 2;
    }

    CardView > #card-image {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, swipe_threshold: int = MIN_SWIPE_DISTANCE, **kwargs) -> None:
        super().__init__(**kwargs)
        self.swipe_threshold = swipe_threshold
        self._drag_start: tuple[int, int] | None = None

    def compose(self) -> ComposeResult:
        yield Static("CARD", id="card-header")
        yield Static("", id="card-body")
        yield Static("", id="card-image")

    def _set(self, header: str, body: Text | str, image: str = "") -> None:
        self.query_one("#card-header", Static).update(header)
        self.query_one("#card-body", Static).update(body)
        self.query_one("#card-image", Static).update(image)

    def show_loading(self) -> None:
        self._set("CARD", Text("Loading cards...", style="italic"))

    def show_empty(self, set_name: str) -> None:
        """Show the no-card state for an empty set."""
        self._set(f"CARD - {set_name}", Text("No cards in this set", style="dim italic"))

    def show_card(
        self,
        set_name: str,
        position: tuple[int, int],
        total: int,
        text: str,
        flavor_text: str = "",
        image_url: str = "",
    ) -> None:
        """Display a card.

        Args:
            set_name: Name of the active set
            position: (1-based cursor, number of cards shown so far)
            total: Number of cards in the set
            text: Card text in the active language
            flavor_text: Secondary text, empty to hide it
            image_url: Image locator shown under the card
        """
        cursor, shown = position
        body = Text(text, style="bold")
        if flavor_text:
            body.append("\n\n")
            body.append(flavor_text, style="italic")
        self._set(
            f"CARD {cursor}/{shown} · {total} in {set_name}",
            body,
            image_url,
        )

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self._drag_start = (event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
        start = self._drag_start
        self._drag_start = None
        if start is None:
            return

        direction = classify_swipe(
            start, (event.screen_x, event.screen_y), self.swipe_threshold
        )
        if direction is not None:
            self.post_message(self.Swiped(direction))
