"""Navigation action handlers for CharadesApp."""

from __future__ import annotations

from ..gestures import Swipe
from ..widgets import CardView, SetList, SettingsModal


class NavigationActionsMixin:
    """Mixin providing card navigation, set selection and display settings."""

    def _render_card(self) -> None:
        """Show the navigator's current card."""
        card = self.query_one("#card", CardView)
        active = self.navigator.active_set
        if active is None:
            card.show_loading()
            return

        item = self.navigator.current_item()
        if item is None:
            card.show_empty(active.name)
            return

        flavor = (
            self.navigator.current_flavor_text()
            if self.config.display.show_flavor_text
            else ""
        )
        card.show_card(
            set_name=active.name,
            position=self.navigator.position,
            total=self.navigator.item_count,
            text=self.navigator.current_text(),
            flavor_text=flavor,
            image_url=item.image_url,
        )

    def action_next_card(self) -> None:
        """Show the next card."""
        if self._catalog_pending:
            return
        self.navigator.select_next()
        self._render_card()

    def action_previous_card(self) -> None:
        """Show the previous card."""
        if self._catalog_pending:
            return
        self.navigator.select_previous()
        self._render_card()

    def on_card_view_swiped(self, event: CardView.Swiped) -> None:
        """Handle swipes across the card."""
        if event.direction is Swipe.NEXT:
            self.action_next_card()
        else:
            self.action_previous_card()

    def on_set_list_set_selected(self, event: SetList.SetSelected) -> None:
        """Handle set selection."""
        if self._catalog_pending:
            return
        if not self.navigator.select_set(event.set_id):
            self.notify(f"Unknown set: {event.set_id}", severity="warning")
            return
        self._render_card()
        self.query_one("#card", CardView).focus()

    def action_settings(self) -> None:
        """Open the language picker for the active set."""
        if self._catalog_pending or self.navigator.active_set is None:
            return
        self.push_screen(
            SettingsModal(
                self.navigator.available_languages,
                self.navigator.language,
                self.config.display.show_flavor_text,
            ),
            self._on_settings_dismissed,
        )

    def _on_settings_dismissed(self, result) -> None:
        """Handle settings modal dismissal."""
        if result is None:
            return
        if result == SettingsModal.TOGGLE_FLAVOR:
            self.action_toggle_flavor()
        elif self.navigator.set_language(result):
            self._render_card()

    def action_toggle_flavor(self) -> None:
        """Show or hide the flavor text."""
        display = self.config.display
        display.show_flavor_text = not display.show_flavor_text
        self.notify(f"Flavor text {'on' if display.show_flavor_text else 'off'}")
        self._render_card()

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "→/space/n=Next, ←/p=Previous, l=Language, f=Flavor text, r=Reload, q=Quit. Drag the card to swipe.",
            timeout=5,
        )
