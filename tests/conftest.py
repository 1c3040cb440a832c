"""Shared fixtures for charades tests."""

import json

import pytest

from charades.catalog import Catalog, Item, ItemSet


def make_set(set_id: str, count: int, languages: tuple[str, ...] = ("en",)) -> ItemSet:
    """Build a set of `count` numbered cards."""
    items = tuple(
        Item(
            id=i + 1,
            text={"en": f"card-{i}", "de": f"karte-{i}"},
            image_url=f"https://example.com/{i}.png",
            flavor_text={"en": f"flavor-{i}"},
        )
        for i in range(count)
    )
    return ItemSet(id=set_id, name=set_id.title(), languages=languages, items=items)


class ScriptedChooser:
    """Deterministic chooser: picks the given positions from the available list.

    Falls back to the first available index once the script runs out.
    Records every candidate list it was offered.
    """

    def __init__(self, picks=()):
        self._picks = list(picks)
        self.offered: list[list[int]] = []

    def __call__(self, available):
        self.offered.append(list(available))
        if self._picks:
            wanted = self._picks.pop(0)
            assert wanted in available
            return wanted
        return available[0]


@pytest.fixture
def abc_catalog():
    """Catalog with a three-card set, a one-card set and an empty set."""
    return Catalog(sets=(
        make_set("abc", 3, languages=("en", "de")),
        make_set("solo", 1),
        make_set("empty", 0),
    ))


@pytest.fixture
def catalog_document():
    """A valid raw catalog document as served over the wire."""
    return {
        "sets": [
            {
                "id": "animals",
                "name": "Animals",
                "languages": ["en", "es"],
                "items": [
                    {
                        "id": 1,
                        "text": {"en": "Cat", "es": "Gato"},
                        "imageUrl": "https://example.com/cat.png",
                        "flavorText": {"en": "Meow!"},
                    },
                    {
                        "id": 2,
                        "text": {"en": "Dog"},
                        "imageUrl": "https://example.com/dog.png",
                    },
                ],
            },
            {
                "id": "jobs",
                "name": "Jobs",
                "languages": ["en"],
                "items": [],
            },
        ]
    }


@pytest.fixture
def catalog_file(tmp_path, catalog_document):
    """Write the sample document to a temp charades.json."""
    path = tmp_path / "charades.json"
    path.write_text(json.dumps(catalog_document))
    return path
