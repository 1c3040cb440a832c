"""Catalog loading handlers for CharadesApp."""

from __future__ import annotations

import logging

from textual.worker import Worker

from ..catalog import Catalog, demo_catalog
from ..watcher import CatalogWatcher
from ..widgets import CardView, SetList

logger = logging.getLogger(__name__)


class CatalogActionsMixin:
    """Mixin providing catalog load, reload and file watching."""

    def _start_catalog_load(self) -> None:
        """Load the catalog in a background worker, gating navigation meanwhile."""
        self._catalog_pending = True
        self.query_one("#card", CardView).show_loading()
        # exclusive: a newer load cancels a pending one.
        # A failed worker falls back to the demo catalog instead of exiting.
        self.run_worker(
            self._catalog_loader.load(),
            name="_load_catalog",
            group="catalog",
            exclusive=True,
            exit_on_error=False,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Handle background worker completion."""
        if event.worker.name != "_load_catalog":
            return

        if event.state.name == "ERROR":
            # load() recovers from load problems itself; this is a bug
            logger.error("Catalog worker failed: %s", event.worker.error)
            self._apply_catalog(demo_catalog(), error=event.worker.error)
            return

        if event.state.name != "SUCCESS":
            return

        catalog = event.worker.result
        if catalog is not None:
            self._apply_catalog(catalog)

    def _apply_catalog(
        self, catalog: Catalog, error: BaseException | None = None
    ) -> None:
        """Hand a freshly loaded catalog to the navigator and refresh the UI."""
        self._catalog_pending = False
        self.navigator.load_catalog(catalog)

        active = self.navigator.active_set
        set_list = self.query_one("#set-list", SetList)
        set_list.update_sets(catalog.sets, active.id if active is not None else None)
        self._render_card()

        error = error or self._catalog_loader.last_error
        if error is not None:
            self.notify(
                f"Could not load cards ({error}); showing demo set",
                severity="warning",
                timeout=5,
            )
        else:
            self.notify(f"Loaded {len(catalog.sets)} set(s)")

    def action_reload(self) -> None:
        """Reload the catalog from its source."""
        self.notify("Reloading cards...")
        self._start_catalog_load()

    def _start_watcher(self) -> None:
        """Watch a local catalog file, if configured."""
        path = self._catalog_loader.local_path
        if path is None or not self.config.catalog.watch:
            return
        self._watcher = CatalogWatcher(path, self._on_catalog_file_change)
        self._watcher.start()

    def _on_catalog_file_change(self) -> None:
        """Handle catalog file changes (called from watcher thread)."""
        self.call_from_thread(self._start_catalog_load)
