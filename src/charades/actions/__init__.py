"""Action handler mixins for CharadesApp."""

from .catalog_actions import CatalogActionsMixin
from .navigation_actions import NavigationActionsMixin

__all__ = [
    "CatalogActionsMixin",
    "NavigationActionsMixin",
]
