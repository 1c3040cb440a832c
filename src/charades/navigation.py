"""Card navigation: non-repeating random draws with replayable history."""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence

from .catalog import Catalog, Item, ItemSet, resolve_text

logger = logging.getLogger(__name__)

# Picks one pool-index from the currently available ones
Chooser = Callable[[Sequence[int]], int]


class NavigatorPhase(str, Enum):
    """Where the cursor sits within the draw history."""

    EMPTY = "empty"
    AT_START = "at_start"
    MID = "mid"
    AT_FRONT = "at_front"


@dataclass
class NavigatorState:
    """Draw history, replay cursor and used pool for one active set."""

    history: list[int] = field(default_factory=list)
    cursor: int = -1
    used_pool: set[int] = field(default_factory=set)

    @property
    def phase(self) -> NavigatorPhase:
        # A single-entry history counts as the front.
        if not self.history:
            return NavigatorPhase.EMPTY
        if self.cursor == len(self.history) - 1:
            return NavigatorPhase.AT_FRONT
        if self.cursor == 0:
            return NavigatorPhase.AT_START
        return NavigatorPhase.MID

    @property
    def current_index(self) -> int | None:
        """Pool-index under the cursor, or None if nothing was drawn."""
        if self.cursor < 0:
            return None
        return self.history[self.cursor]


class SessionNavigator:
    """
    Step through the cards of one set in random, non-repeating order.

    Every pool-index is drawn once per exhaustion cycle; when all have been
    used the pool is renewed. Stepping back and then forward replays the
    recorded history instead of drawing again.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        choose: Chooser = random.choice,
    ) -> None:
        """
        Initialize navigator.

        Args:
            catalog: Catalog to navigate; its first set becomes active
            choose: Picks one index from a non-empty sequence of candidates
        """
        self._choose = choose
        self._catalog: Catalog | None = None
        self._active_set: ItemSet | None = None
        self._state = NavigatorState()
        self.language = "en"
        if catalog is not None:
            self.load_catalog(catalog)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def state(self) -> NavigatorState:
        return self._state

    @property
    def sets(self) -> tuple[ItemSet, ...]:
        return self._catalog.sets if self._catalog else ()

    @property
    def active_set(self) -> ItemSet | None:
        return self._active_set

    @property
    def item_count(self) -> int:
        """Number of cards in the active set."""
        return len(self._active_set) if self._active_set is not None else 0

    @property
    def available_languages(self) -> tuple[str, ...]:
        return self._active_set.languages if self._active_set is not None else ()

    @property
    def position(self) -> tuple[int, int]:
        """Cursor position as (1-based cursor, history length)."""
        return (self._state.cursor + 1, len(self._state.history))

    def current_item(self) -> Item | None:
        """The card under the cursor, or None when nothing is shown."""
        index = self._state.current_index
        if index is None or self._active_set is None:
            return None
        return self._active_set.items[index]

    def current_text(self) -> str:
        item = self.current_item()
        return resolve_text(item.text, self.language) if item else ""

    def current_flavor_text(self) -> str:
        item = self.current_item()
        return resolve_text(item.flavor_text, self.language) if item else ""

    # -------------------------------------------------------------------------
    # Set selection
    # -------------------------------------------------------------------------

    def load_catalog(self, catalog: Catalog) -> None:
        """Install a new catalog and activate its first set."""
        self._catalog = catalog
        self._active_set = None
        self._state = NavigatorState()
        default = catalog.default_set
        if default is not None:
            self.select_set(default.id)

    def select_set(self, set_id: str) -> bool:
        """
        Make a set active and draw its first card.

        Unknown ids leave the current set and state untouched.

        Returns:
            True if the set was found and activated.
        """
        item_set = self._catalog.get_set(set_id) if self._catalog else None
        if item_set is None:
            logger.warning("Unknown set id: %s", set_id)
            return False

        self._active_set = item_set
        self._state = NavigatorState()
        self.language = item_set.default_language
        self.select_next()
        return True

    def set_language(self, language: str) -> bool:
        """Switch display language to one supported by the active set."""
        if language not in self.available_languages:
            return False
        self.language = language
        return True

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def select_next(self) -> Item | None:
        """Replay the next recorded card, or draw a new one at the front."""
        state = self._state
        if state.cursor < len(state.history) - 1:
            state.cursor += 1
            return self.current_item()

        n = self.item_count
        if n == 0:
            return None

        available = [i for i in range(n) if i not in state.used_pool]
        if not available:
            logger.debug("Pool of %d exhausted, starting a new cycle", n)
            state.used_pool.clear()
            available = list(range(n))

        index = self._choose(available)
        state.history.append(index)
        state.cursor = len(state.history) - 1
        state.used_pool.add(index)
        logger.debug("Drew index %d (history length %d)", index, len(state.history))
        return self.current_item()

    def select_previous(self) -> Item | None:
        """Step back one card; no-op at the start of history."""
        if self._state.cursor <= 0:
            return self.current_item()
        self._state.cursor -= 1
        return self.current_item()
