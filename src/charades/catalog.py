"""Catalog data model, schema parsing and the built-in demo catalog."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


class CatalogError(ValueError):
    """Raised when a catalog document does not match the expected schema."""


@dataclass(frozen=True)
class Item:
    """A single card.

    Text mappings are stored read-only; hashing uses id and image_url only.
    """

    id: int
    text: Mapping[str, str] = field(hash=False)
    image_url: str
    flavor_text: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", MappingProxyType(dict(self.text)))
        object.__setattr__(
            self, "flavor_text", MappingProxyType(dict(self.flavor_text))
        )


@dataclass(frozen=True)
class ItemSet:
    """A named deck of cards sharing a language list."""

    id: str
    name: str
    languages: tuple[str, ...]
    items: tuple[Item, ...]

    @property
    def default_language(self) -> str:
        return self.languages[0] if self.languages else "en"

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Catalog:
    """All sets available for a session."""

    sets: tuple[ItemSet, ...]

    @property
    def default_set(self) -> ItemSet | None:
        """The first set, or None for an empty catalog."""
        return self.sets[0] if self.sets else None

    def get_set(self, set_id: str) -> ItemSet | None:
        """Look up a set by id (first match wins)."""
        for item_set in self.sets:
            if item_set.id == set_id:
                return item_set
        return None


def resolve_text(mapping: Mapping[str, str], language: str) -> str:
    """Resolve display text for a language.

    Falls back to English, then to an empty string.
    """
    return mapping.get(language) or mapping.get("en") or ""


# Placeholder images for the built-in demo deck
DEMO_IMAGE_URLS = (
    "https://images.unsplash.com/photo-1578926078328-123456789012?w=400&h=400&fit=crop",
    "https://images.unsplash.com/photo-1511379938547-c1f69b13d835?w=400&h=400&fit=crop",
)


def demo_catalog() -> Catalog:
    """Build the fixed catalog used whenever loading fails."""
    return Catalog(
        sets=(
            ItemSet(
                id="demo",
                name="Demo",
                languages=("en",),
                items=(
                    Item(
                        id=1,
                        text={"en": "Superhero"},
                        image_url=DEMO_IMAGE_URLS[0],
                        flavor_text={"en": "Act it out!"},
                    ),
                    Item(
                        id=2,
                        text={"en": "Dancing"},
                        image_url=DEMO_IMAGE_URLS[1],
                        flavor_text={"en": "Move and groove!"},
                    ),
                ),
            ),
        )
    )


def _require(raw: dict, key: str, kind: type, where: str) -> Any:
    """Fetch a required key and check its type."""
    if key not in raw:
        raise CatalogError(f"{where}: missing '{key}'")
    value = raw[key]
    # bool is an int subclass; ids must be real numbers
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise CatalogError(f"{where}.{key}: expected {kind.__name__}")
    return value


def _parse_text_map(value: Any, where: str) -> dict[str, str]:
    """Validate a language code -> text mapping."""
    if not isinstance(value, dict):
        raise CatalogError(f"{where}: expected an object")
    for lang, text in value.items():
        if not isinstance(lang, str) or not isinstance(text, str):
            raise CatalogError(f"{where}: language keys and texts must be strings")
    return dict(value)


def _parse_item(raw: Any, where: str) -> Item:
    if not isinstance(raw, dict):
        raise CatalogError(f"{where}: expected an object")

    item_id = _require(raw, "id", int, where)
    text = _parse_text_map(_require(raw, "text", dict, where), f"{where}.text")
    image_url = _require(raw, "imageUrl", str, where)

    flavor_raw = raw.get("flavorText")
    flavor_text = (
        _parse_text_map(flavor_raw, f"{where}.flavorText")
        if flavor_raw is not None
        else {}
    )

    return Item(id=item_id, text=text, image_url=image_url, flavor_text=flavor_text)


def _parse_set(raw: Any, where: str) -> ItemSet:
    if not isinstance(raw, dict):
        raise CatalogError(f"{where}: expected an object")

    set_id = _require(raw, "id", str, where)
    name = _require(raw, "name", str, where)

    languages = _require(raw, "languages", list, where)
    if not languages or not all(isinstance(lang, str) for lang in languages):
        raise CatalogError(f"{where}.languages: expected a non-empty list of strings")

    # Older documents call the item list "charades"
    items_key = "items" if "items" in raw else "charades"
    items_raw = _require(raw, items_key, list, where)
    items = tuple(
        _parse_item(item, f"{where}.{items_key}[{i}]")
        for i, item in enumerate(items_raw)
    )

    return ItemSet(id=set_id, name=name, languages=tuple(languages), items=items)


def parse_catalog(data: Any) -> Catalog:
    """Parse a decoded catalog document.

    Args:
        data: The decoded JSON document.

    Returns:
        The parsed Catalog.

    Raises:
        CatalogError: If the document does not match the schema or has no sets.
    """
    if not isinstance(data, dict):
        raise CatalogError("catalog: expected an object")

    sets_raw = _require(data, "sets", list, "catalog")
    sets = tuple(_parse_set(raw, f"sets[{i}]") for i, raw in enumerate(sets_raw))
    if not sets:
        raise CatalogError("catalog: no sets")

    return Catalog(sets=sets)
