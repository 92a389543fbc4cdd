"""Order pricing module entry point."""

from .menu import ItemNotFoundError, ItemType, MenuCatalog, MenuItem, default_catalog
from .repository import MenuRepository
from .state import SLOTS, OrderState

__all__ = [
    "ItemNotFoundError",
    "ItemType",
    "MenuCatalog",
    "MenuItem",
    "MenuRepository",
    "OrderState",
    "SLOTS",
    "default_catalog",
]
