"""File system watcher for reloading a local catalog file."""

import logging
import threading
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

from watchdog.events import FileSystemEventHandler, FileSystemEvent
from watchdog.observers import Observer


class CatalogEventHandler(FileSystemEventHandler):
    """Handler for changes to one catalog file with debouncing."""

    def __init__(
        self,
        catalog_path: Path,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5,
    ):
        super().__init__()
        self.catalog_path = catalog_path.resolve()
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def _is_catalog(self, path: str | bytes) -> bool:
        """Check if the path is the watched catalog file."""
        if isinstance(path, bytes):
            path = path.decode()
        return Path(path).resolve() == self.catalog_path

    def _schedule_update(self) -> None:
        """Schedule a debounced reload."""
        logger.debug("Catalog change detected: %s", self.catalog_path)
        with self._lock:
            # Editors often write several events per save
            if self._timer:
                self._timer.cancel()

            self._timer = threading.Timer(
                self.debounce_seconds,
                self._process_pending,
            )
            self._timer.daemon = True
            self._timer.start()

    def _process_pending(self) -> None:
        with self._lock:
            self._timer = None
        logger.info("Catalog file changed: %s", self.catalog_path)
        self.on_change()

    def cancel(self) -> None:
        """Drop any pending reload."""
        with self._lock:
            if self._timer:
                self._timer.cancel()
                self._timer = None

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_catalog(event.src_path):
            self._schedule_update()

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_catalog(event.src_path):
            self._schedule_update()

    def on_deleted(self, event: FileSystemEvent) -> None:
        """Handle catalog deletion; the reload falls back to the demo set."""
        if not event.is_directory and self._is_catalog(event.src_path):
            self._schedule_update()

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle atomic saves that rename a temp file over the catalog."""
        if not event.is_directory:
            dest = getattr(event, "dest_path", "")
            if dest and self._is_catalog(dest):
                self._schedule_update()


class CatalogWatcher:
    """Watches a local catalog file for changes."""

    def __init__(
        self,
        catalog_path: Path,
        on_change: Callable[[], None],
    ):
        self.catalog_path = catalog_path
        self.on_change = on_change
        self._observer: Observer | None = None
        self._handler: CatalogEventHandler | None = None

    def start(self) -> bool:
        """Start watching the catalog's directory.

        Returns:
            False if the directory does not exist, True otherwise.
        """
        if self._observer is not None:
            return True  # Already running

        directory = self.catalog_path.parent
        if not directory.is_dir():
            logger.warning("Not watching catalog, missing directory: %s", directory)
            return False

        self._handler = CatalogEventHandler(self.catalog_path, self.on_change)

        self._observer = Observer()
        self._observer.schedule(self._handler, str(directory), recursive=False)
        self._observer.daemon = True
        self._observer.start()
        logger.info("Catalog watcher started: %s", self.catalog_path)
        return True

    def stop(self) -> None:
        """Stop watching."""
        if self._handler is not None:
            self._handler.cancel()
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=1.0)
            self._observer = None
            self._handler = None

    def __enter__(self) -> "CatalogWatcher":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()
