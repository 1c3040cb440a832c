"""Headless tests for the Charades TUI."""

import asyncio
import json
from unittest.mock import patch

from textual.worker import WorkerFailed

from charades.app import CharadesApp
from charades.config import CatalogConfig, Config
from charades.gestures import Swipe
from charades.loader import CatalogLoader
from charades.navigation import SessionNavigator
from charades.widgets import CardView, SetList, SettingsModal

from conftest import ScriptedChooser


class BrokenLoader(CatalogLoader):
    """Loader whose load() fails outright instead of falling back."""

    async def load(self):
        raise RuntimeError("boom")


def make_app(tmp_path, source, loader=None) -> CharadesApp:
    config = Config(
        catalog=CatalogConfig(source=str(source), watch=False),
        data_directory=tmp_path / "data",
    )
    return CharadesApp(
        config,
        loader=loader or CatalogLoader(config.catalog.source),
        navigator=SessionNavigator(choose=ScriptedChooser()),
    )


async def _settle(app, pilot) -> None:
    """Wait for the catalog worker and its state message."""
    try:
        await app.workers.wait_for_complete()
    except WorkerFailed:
        pass
    await pilot.pause()
    await pilot.pause()


class TestCharadesApp:
    def test_fallback_to_demo_catalog(self, tmp_path):
        app = make_app(tmp_path, tmp_path / "missing.json")

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                assert app.navigator.active_set.id == "demo"
                assert app.navigator.current_text() == "Superhero"

        asyncio.run(run())

    def test_worker_failure_falls_back_to_demo(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file, loader=BrokenLoader(str(catalog_file)))

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                assert app.is_running
                assert app._catalog_pending is False
                assert app.navigator.active_set.id == "demo"
                assert app.navigator.state.history == [0]

                await pilot.press("right")
                assert app.navigator.state.history == [0, 1]

        asyncio.run(run())

    def test_keys_drive_navigator(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                assert app.navigator.active_set.id == "animals"
                assert app.navigator.state.history == [0]

                await pilot.press("right")
                assert app.navigator.state.history == [0, 1]
                assert app.navigator.state.cursor == 1

                await pilot.press("left")
                assert app.navigator.state.cursor == 0

                await pilot.press("left")
                assert app.navigator.state.cursor == 0
                assert len(app.navigator.state.history) == 2

        asyncio.run(run())

    def test_swipes_drive_navigator(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                card = app.query_one("#card", CardView)

                card.post_message(CardView.Swiped(Swipe.NEXT))
                await pilot.pause()
                assert app.navigator.state.history == [0, 1]
                assert app.navigator.state.cursor == 1

                card.post_message(CardView.Swiped(Swipe.PREVIOUS))
                await pilot.pause()
                assert app.navigator.state.cursor == 0
                assert app.navigator.state.history == [0, 1]

        asyncio.run(run())

    def test_set_selection_resets_navigator(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                await pilot.press("right")
                set_list = app.query_one("#set-list", SetList)

                set_list.post_message(SetList.SetSelected("jobs"))
                await pilot.pause()
                assert app.navigator.active_set.id == "jobs"
                assert app.navigator.state.history == []
                assert app.navigator.state.cursor == -1

                set_list.post_message(SetList.SetSelected("animals"))
                await pilot.pause()
                assert app.navigator.active_set.id == "animals"
                assert app.navigator.state.history == [0]
                assert app.navigator.state.used_pool == {0}

        asyncio.run(run())

    def test_unknown_set_warns_and_keeps_state(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                await pilot.press("right")

                with patch.object(app, "notify") as notify:
                    app.query_one("#set-list", SetList).post_message(
                        SetList.SetSelected("missing")
                    )
                    await pilot.pause()

                notify.assert_called_once_with("Unknown set: missing", severity="warning")
                assert app.navigator.active_set.id == "animals"
                assert app.navigator.state.history == [0, 1]
                assert app.navigator.state.cursor == 1

        asyncio.run(run())

    def test_reload_picks_up_new_catalog(self, tmp_path, catalog_file, catalog_document):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                await pilot.press("right")
                assert app.navigator.active_set.id == "animals"

                catalog_document["sets"].reverse()
                catalog_file.write_text(json.dumps(catalog_document))

                await pilot.press("r")
                await _settle(app, pilot)
                assert app.navigator.active_set.id == "jobs"
                assert [s.id for s in app.navigator.sets] == ["jobs", "animals"]
                assert app.navigator.state.history == []

        asyncio.run(run())

    def test_toggle_flavor_text(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                await pilot.press("f")
                assert app.config.display.show_flavor_text is False

        asyncio.run(run())

    def test_settings_toggles_flavor_text(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                await pilot.press("l")
                await pilot.pause()
                assert isinstance(app.screen, SettingsModal)

                await pilot.press("f")
                await pilot.pause()
                assert not isinstance(app.screen, SettingsModal)
                assert app.config.display.show_flavor_text is False

        asyncio.run(run())

    def test_settings_selects_language(self, tmp_path, catalog_file):
        app = make_app(tmp_path, catalog_file)

        async def run():
            async with app.run_test() as pilot:
                await _settle(app, pilot)
                await pilot.press("l")
                await pilot.pause()
                await pilot.press("down", "enter")
                await pilot.pause()
                assert app.navigator.language == "es"
                assert app.navigator.current_text() == "Gato"

        asyncio.run(run())
