"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from decimal import Decimal

from lunchtray.domain.model.order import OrderState
from lunchtray.domain.repository.menu_catalog import MenuCatalog
from lunchtray.infrastructure.config import get_tax_rate
from lunchtray.infrastructure.persistence.static_menu_catalog import (
    LUNCH_MENU,
    StaticMenuCatalog,
)


def menu_catalog() -> StaticMenuCatalog:
    return StaticMenuCatalog(LUNCH_MENU)


def new_order(
    tax_rate: Decimal | None = None,
    catalog: MenuCatalog | None = None,
) -> OrderState:
    """Start a fresh order.

    The configured tax rate and the lunch menu apply unless overridden.
    """
    if tax_rate is None:
        tax_rate = get_tax_rate()
    if catalog is None:
        catalog = menu_catalog()
    return OrderState(catalog, tax_rate=tax_rate)
