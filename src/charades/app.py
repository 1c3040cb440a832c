"""Main Textual application for Charades."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer

from .actions import CatalogActionsMixin, NavigationActionsMixin
from .config import Config
from .loader import CatalogLoader
from .navigation import SessionNavigator
from .watcher import CatalogWatcher
from .widgets import Banner, CardView, SetList


class CharadesApp(CatalogActionsMixin, NavigationActionsMixin, App):
    """Charades - Random Card Deck TUI."""

    TITLE = "Charades"
    SUB_TITLE = "Random Card Deck"

    CSS = """
    #main-container {
        width: 100%;
        height: 1fr;
    }

    #set-list {
        width: 25%;
        height: 100%;
        border: solid $accent;
    }

    #set-list:focus-within {
        border: solid cyan;
    }

    #card {
        width: 75%;
        height: 100%;
        border: solid $success;
    }

    #card:focus {
        border: solid green;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("right", "next_card", "Next"),
        Binding("left", "previous_card", "Previous"),
        Binding("space", "next_card", "Next", show=False),
        Binding("n", "next_card", "Next", show=False),
        Binding("p", "previous_card", "Previous", show=False),
        Binding("l", "settings", "Language"),
        Binding("f", "toggle_flavor", "Flavor"),
        Binding("r", "reload", "Reload"),
        Binding("?", "help", "Help"),
    ]

    def __init__(
        self,
        config: Config,
        loader: CatalogLoader | None = None,
        navigator: SessionNavigator | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self._catalog_loader = loader or CatalogLoader(
            config.catalog.source, timeout=config.catalog.timeout
        )
        self.navigator = navigator or SessionNavigator()
        self._watcher: CatalogWatcher | None = None
        # Navigation is ignored until the first load settles
        self._catalog_pending = True

    def compose(self) -> ComposeResult:
        yield Banner()
        with Horizontal(id="main-container"):
            yield SetList(id="set-list", classes="panel")
            yield CardView(
                swipe_threshold=self.config.display.swipe_threshold,
                id="card",
                classes="panel",
            )
        yield Footer()

    async def on_mount(self) -> None:
        """Initialize the app after mounting."""
        self.query_one("#card", CardView).focus()
        self._start_watcher()
        self._start_catalog_load()

    async def on_unmount(self) -> None:
        """Clean up when app closes."""
        if self._watcher:
            self._watcher.stop()
        self._catalog_loader.close()


def run_app(config: Config) -> None:
    """Run the Charades application."""
    app = CharadesApp(config)
    app.run()
