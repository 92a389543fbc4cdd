"""
Lunch Tray - Order Pricing Core

Keeps the running price state of a lunch order made of an entree, a side
and an accompaniment, and recomputes subtotal, tax and total as the
selections change.
"""

__version__ = "0.1.0"

from . import ordering
from . import utils

__all__ = ["ordering", "utils"]
