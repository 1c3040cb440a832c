"""Set list widget for choosing the active card set."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static

from ..catalog import ItemSet


class SetItem(ListItem):
    """A list item representing a card set."""

    def __init__(self, item_set: ItemSet) -> None:
        super().__init__()
        self.item_set = item_set

    def compose(self) -> ComposeResult:
        yield Label(f"{self.item_set.name} ({len(self.item_set)})")


class SetList(Vertical):
    """Widget displaying the sets of the loaded catalog."""

    DEFAULT_CSS = """
    SetList {
        width: 1fr;
        height: 1fr;
    }

    SetList > #set-header {
        background: $primary-background;
        color: $warning;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    SetList > #set-list-view {
        height: 1fr;
    }

    SetList > #set-status {
        padding: 1 2;
        color: $text-muted;
    }

    SetList ListItem {
        padding: 0 1;
    }

    SetList ListItem:hover {
        background: $boost;
    }

    SetList ListItem.--highlight {
        background: $accent;
    }
    """

    class SetSelected(Message):
        """Message emitted when a set is chosen."""

        def __init__(self, set_id: str) -> None:
            super().__init__()
            self.set_id = set_id

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._sets: tuple[ItemSet, ...] = ()

    def compose(self) -> ComposeResult:
        yield Static("SETS", id="set-header")
        yield ListView(id="set-list-view")
        yield Static("Loading...", id="set-status")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#set-list-view", ListView)

    @property
    def status_label(self) -> Static:
        return self.query_one("#set-status", Static)

    def update_sets(self, sets: tuple[ItemSet, ...], active_id: str | None = None) -> None:
        """Replace the listed sets and highlight the active one."""
        self._sets = sets
        list_view = self.list_view

        list_view.clear()

        if not sets:
            self.status_label.update("No sets")
            return

        self.status_label.update("")
        for item_set in sets:
            list_view.append(SetItem(item_set))

        ids = [s.id for s in sets]
        list_view.index = ids.index(active_id) if active_id in ids else 0

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle set selection (enter or click)."""
        if isinstance(event.item, SetItem):
            event.stop()
            self.post_message(self.SetSelected(event.item.item_set.id))
