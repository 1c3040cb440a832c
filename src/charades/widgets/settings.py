"""Settings modal for the display language and flavor text."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList, Static
from textual.widgets.option_list import Option


class SettingsModal(ModalScreen):
    """Modal screen for choosing the display language and flavor text.

    Dismisses with the chosen language code, TOGGLE_FLAVOR when flavor text
    should be flipped, or None when cancelled.
    """

    TOGGLE_FLAVOR = "toggle-flavor"

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
        Binding("f", "toggle_flavor", "Flavor text", show=False),
    ]

    CSS = """
    SettingsModal {
        align: center middle;
    }

    #settings-container {
        width: 50;
        height: auto;
        max-height: 24;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #settings-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    .info-label {
        margin-top: 1;
        color: $text-muted;
    }

    #language-list {
        height: auto;
        max-height: 10;
        background: $surface-darken-1;
    }

    #display-list {
        height: auto;
        background: $surface-darken-1;
    }

    #settings-hint {
        color: $text-muted;
        text-style: italic;
        margin-top: 1;
    }
    """

    def __init__(
        self,
        languages: tuple[str, ...],
        current_language: str,
        show_flavor_text: bool,
    ) -> None:
        super().__init__()
        self.languages = languages
        self.current_language = current_language
        self.show_flavor_text = show_flavor_text

    def compose(self) -> ComposeResult:
        flavor_state = "on" if self.show_flavor_text else "off"
        with Vertical(id="settings-container"):
            yield Static("SETTINGS", id="settings-title")
            yield Label("Language:", classes="info-label")
            yield OptionList(
                *(
                    Option(
                        f"{lang} (current)" if lang == self.current_language else lang,
                        id=lang,
                    )
                    for lang in self.languages
                ),
                id="language-list",
            )
            yield Label("Display:", classes="info-label")
            yield OptionList(
                Option(f"Flavor text: {flavor_state}", id=self.TOGGLE_FLAVOR),
                id="display-list",
            )
            yield Static("enter to choose, f to toggle flavor text", id="settings-hint")

    def on_mount(self) -> None:
        option_list = self.query_one("#language-list", OptionList)
        if self.current_language in self.languages:
            option_list.highlighted = self.languages.index(self.current_language)
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id == "display-list":
            self.dismiss(self.TOGGLE_FLAVOR)
        else:
            self.dismiss(event.option.id)

    def action_toggle_flavor(self) -> None:
        self.dismiss(self.TOGGLE_FLAVOR)

    def action_cancel(self) -> None:
        self.dismiss(None)
