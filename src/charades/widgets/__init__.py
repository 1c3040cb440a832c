"""Charades widgets."""

from .banner import Banner
from .card import CardView
from .set_list import SetList
from .settings import SettingsModal

__all__ = [
    "Banner",
    "CardView",
    "SetList",
    "SettingsModal",
]
