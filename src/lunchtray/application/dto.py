"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the order aggregate or its observables to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItemDTO:
    """Output: a menu entry as displayed to the user."""

    key: str
    name: str
    description: str
    price: str  # formatted, e.g. "$7.00"
    type: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: the checkout summary of an order."""

    entree: str | None
    side: str | None
    accompaniment: str | None
    subtotal: str
    tax: str
    total: str
