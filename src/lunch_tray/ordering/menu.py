"""Menu items and the read-only catalog orders are priced against."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional


class ItemNotFoundError(LookupError):
    """Raised when a name is not present in the menu catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Menu item '{name}' not found")
        self.name = name


class ItemType(str, Enum):
    ENTREE = "entree"
    SIDE_DISH = "side"
    ACCOMPANIMENT = "accompaniment"


@dataclass(frozen=True)
class MenuItem:
    """A named, priced catalog entry."""

    name: str
    price: float
    label: str = ""
    description: str = ""
    type: Optional[ItemType] = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Price of '{self.name}' must be non-negative, got {self.price}")

    @property
    def display_name(self) -> str:
        return self.label or self.name


class MenuCatalog(Mapping):
    """Read-only mapping from item name to MenuItem."""

    def __init__(self, items: Optional[Dict[str, MenuItem]] = None) -> None:
        self._items: Dict[str, MenuItem] = dict(items or {})

    @classmethod
    def from_items(cls, items: Iterable[MenuItem]) -> "MenuCatalog":
        """Build a catalog keyed by each item's name.

        Raises:
            ValueError: if two items share a name
        """
        by_name: Dict[str, MenuItem] = {}
        for item in items:
            if item.name in by_name:
                raise ValueError(f"Duplicate menu item name: '{item.name}'")
            by_name[item.name] = item
        return cls(by_name)

    def __getitem__(self, name: str) -> MenuItem:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get_item(self, name: str) -> MenuItem:
        """Look up an item, raising ItemNotFoundError on a miss."""
        try:
            return self._items[name]
        except KeyError:
            raise ItemNotFoundError(name) from None

    def items_of_type(self, item_type: ItemType) -> List[MenuItem]:
        return [item for item in self._items.values() if item.type == item_type]

    def __repr__(self) -> str:
        return f"MenuCatalog({len(self._items)} items)"


# Lunch menu served when no external menu source is configured.
DEFAULT_MENU_ITEMS = (
    MenuItem(
        name="cauliflower",
        label="Cauliflower",
        description="Whole cauliflower, brined, roasted, and deep fried",
        price=7.00,
        type=ItemType.ENTREE,
    ),
    MenuItem(
        name="chili",
        label="Three Bean Chili",
        description="Black beans, red beans, kidney beans, slow cooked, topped with onion",
        price=4.00,
        type=ItemType.ENTREE,
    ),
    MenuItem(
        name="pasta",
        label="Mushroom Pasta",
        description="Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil",
        price=5.50,
        type=ItemType.ENTREE,
    ),
    MenuItem(
        name="skillet",
        label="Spicy Black Bean Skillet",
        description="Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
        price=5.50,
        type=ItemType.ENTREE,
    ),
    MenuItem(
        name="salad",
        label="Summer Salad",
        description="Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        price=2.50,
        type=ItemType.SIDE_DISH,
    ),
    MenuItem(
        name="soup",
        label="Butternut Squash Soup",
        description="Roasted butternut squash, roasted peppers, chili oil",
        price=3.00,
        type=ItemType.SIDE_DISH,
    ),
    MenuItem(
        name="potatoes",
        label="Spicy Potatoes",
        description="Marble potatoes, roasted, and fried in house spice blend",
        price=2.00,
        type=ItemType.SIDE_DISH,
    ),
    MenuItem(
        name="rice",
        label="Coconut Rice",
        description="Rice, coconut milk, lime, and sugar",
        price=1.50,
        type=ItemType.SIDE_DISH,
    ),
    MenuItem(
        name="bread",
        label="Lunch Roll",
        description="Fresh baked roll made in house",
        price=0.50,
        type=ItemType.ACCOMPANIMENT,
    ),
    MenuItem(
        name="berries",
        label="Mixed Berries",
        description="Strawberries, blueberries, raspberries, and huckleberries",
        price=1.00,
        type=ItemType.ACCOMPANIMENT,
    ),
    MenuItem(
        name="pickles",
        label="Pickled Veggies",
        description="Pickled cucumbers and carrots, made in house",
        price=0.50,
        type=ItemType.ACCOMPANIMENT,
    ),
)


def default_catalog() -> MenuCatalog:
    """Return the built-in lunch menu."""
    return MenuCatalog.from_items(DEFAULT_MENU_ITEMS)
