"""Running price state of a single lunch order."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..utils.logging import get_logger
from .menu import MenuCatalog, MenuItem

logger = get_logger(__name__)

DEFAULT_TAX_RATE = 0.08

SLOTS = ("entree", "side", "accompaniment")

OrderObserver = Callable[["OrderState"], Any]


class OrderState:
    """
    Selections and derived prices of one in-progress order.

    Each slot holds a MenuItem or None. The subtotal always equals the sum
    of the selected prices, tax is subtotal * tax_rate and total is
    subtotal + tax. The state changes only through the select_* methods
    and reset(); a failed lookup leaves every field untouched.

    Instances are not thread-safe. Use one per order and serialize access
    if the caller is concurrent.
    """

    def __init__(self, catalog: MenuCatalog, tax_rate: float = DEFAULT_TAX_RATE) -> None:
        if tax_rate < 0:
            raise ValueError(f"Tax rate must be non-negative, got {tax_rate}")
        self._catalog = catalog
        self._tax_rate = tax_rate
        self._observers: List[OrderObserver] = []
        self._slots: Dict[str, Optional[MenuItem]] = {}
        self._subtotal = 0.0
        self._tax = 0.0
        self._total = 0.0
        self.reset()

    @property
    def catalog(self) -> MenuCatalog:
        return self._catalog

    @property
    def tax_rate(self) -> float:
        return self._tax_rate

    @property
    def entree(self) -> Optional[MenuItem]:
        return self._slots["entree"]

    @property
    def side(self) -> Optional[MenuItem]:
        return self._slots["side"]

    @property
    def accompaniment(self) -> Optional[MenuItem]:
        return self._slots["accompaniment"]

    @property
    def subtotal(self) -> float:
        return self._subtotal

    @property
    def tax(self) -> float:
        return self._tax

    @property
    def total(self) -> float:
        return self._total

    def selections(self) -> Dict[str, Optional[MenuItem]]:
        """Return a copy of the slot name to item mapping."""
        return dict(self._slots)

    def reset(self) -> None:
        """Clear every slot and zero the derived prices."""
        self._slots = {slot: None for slot in SLOTS}
        self._subtotal = 0.0
        self._tax = 0.0
        self._total = 0.0
        logger.debug("Order reset")
        self._notify()

    def select_entree(self, name: str) -> MenuItem:
        return self._select("entree", name)

    def select_side(self, name: str) -> MenuItem:
        return self._select("side", name)

    def select_accompaniment(self, name: str) -> MenuItem:
        return self._select("accompaniment", name)

    def _select(self, slot: str, name: str) -> MenuItem:
        """
        Replace the item in `slot` with the catalog item called `name`.

        Raises:
            ItemNotFoundError: if `name` is not in the catalog
        """
        try:
            item = self._catalog.get_item(name)
        except LookupError:
            logger.warning(f"Cannot select {slot}: '{name}' is not on the menu")
            raise

        previous = self._slots[slot]
        previous_price = previous.price if previous is not None else 0.0
        self._slots[slot] = item
        # Same item selected again leaves the subtotal exactly as it was
        if item.price != previous_price:
            self._subtotal = self._subtotal - previous_price + item.price
        self.calculate_tax_and_total()

        logger.debug(
            f"Selected {slot} '{item.name}' ({item.price:.2f}); "
            f"subtotal={self._subtotal:.2f} tax={self._tax:.2f} total={self._total:.2f}"
        )
        self._notify()
        return item

    def calculate_tax_and_total(self) -> None:
        """Recompute tax and total from the current subtotal."""
        self._tax = self._subtotal * self._tax_rate
        self._total = self._subtotal + self._tax

    def subscribe(self, callback: OrderObserver) -> Callable[[], None]:
        """
        Call `callback(state)` after every change to this order.

        Returns:
            A function that removes the callback again
        """
        self._observers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: OrderObserver) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self) -> None:
        # The change is already committed; an observer failure must not undo or mask it
        for callback in list(self._observers):
            try:
                callback(self)
            except Exception as e:
                logger.exception(f"Order observer {callback!r} failed: {e}")

    def summary(self) -> Dict[str, Any]:
        """Selections by name plus the raw numeric prices."""
        return {
            "selections": {
                slot: (item.name if item is not None else None)
                for slot, item in self._slots.items()
            },
            "subtotal": self._subtotal,
            "tax": self._tax,
            "total": self._total,
            "tax_rate": self._tax_rate,
        }

    def __repr__(self) -> str:
        chosen = ", ".join(
            f"{slot}={item.name if item is not None else None}"
            for slot, item in self._slots.items()
        )
        return f"OrderState({chosen}, subtotal={self._subtotal:.2f}, total={self._total:.2f})"
