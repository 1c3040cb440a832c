"""Catalog loading from a URL or local file, with a built-in fallback."""

import asyncio
import json
import logging
from pathlib import Path

import requests

from .catalog import Catalog, CatalogError, demo_catalog, parse_catalog

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def is_remote_source(source: str) -> bool:
    """Check whether a catalog source is an HTTP(S) URL."""
    return source.startswith(("http://", "https://"))


class CatalogLoader:
    """Loads the card catalog, substituting the demo catalog on failure."""

    def __init__(
        self,
        source: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.source = source
        self.timeout = timeout
        self._session = session or requests.Session()
        # Cause of the most recent fallback, None after a successful load
        self.last_error: Exception | None = None

    @property
    def local_path(self) -> Path | None:
        """Path of a local catalog file, or None for remote sources."""
        if is_remote_source(self.source):
            return None
        return Path(self.source).expanduser()

    def _fetch(self):
        """Fetch and decode the raw catalog document."""
        path = self.local_path
        if path is not None:
            return json.loads(path.read_text(encoding="utf-8"))

        resp = self._session.get(self.source, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def load_sync(self) -> Catalog:
        """Load the catalog, blocking until the fetch settles.

        Never raises for load problems: transport errors, unreadable files,
        invalid or too deeply nested JSON and schema violations all yield
        the demo catalog.
        """
        try:
            catalog = parse_catalog(self._fetch())
        except (requests.RequestException, OSError, ValueError, RecursionError) as e:
            # CatalogError and json.JSONDecodeError are both ValueErrors.
            # Deeply nested JSON exhausts the decoder with RecursionError.
            kind = "invalid catalog" if isinstance(e, CatalogError) else "load failed"
            logger.warning(
                "Catalog %s (%s): %s; using demo catalog", kind, self.source, e
            )
            self.last_error = e
            return demo_catalog()

        self.last_error = None
        logger.info("Loaded %d set(s) from %s", len(catalog.sets), self.source)
        return catalog

    async def load(self) -> Catalog:
        """Load the catalog without blocking the event loop."""
        return await asyncio.to_thread(self.load_sync)

    def close(self) -> None:
        """Release the HTTP session."""
        self._session.close()
