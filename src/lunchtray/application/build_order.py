"""Application service: Build Order use case.

Starts a fresh OrderState, applies the requested selections in course
order and hands back the checkout summary.
"""

from __future__ import annotations

from decimal import Decimal

from lunchtray.application.dto import OrderSummaryDTO
from lunchtray.domain.model.menu_item import MenuItem
from lunchtray.domain.model.order import DEFAULT_TAX_RATE, Course, OrderState
from lunchtray.domain.repository.menu_catalog import MenuCatalog


class BuildOrderHandler:

    def __init__(self, catalog: MenuCatalog, tax_rate: Decimal = DEFAULT_TAX_RATE) -> None:
        self._catalog = catalog
        self._tax_rate = tax_rate

    def handle(
        self,
        entree: str | None = None,
        side: str | None = None,
        accompaniment: str | None = None,
    ) -> OrderSummaryDTO:
        """Build an order from menu keys.

        Courses left as None stay unselected. An unknown key raises
        UnknownItemError and no summary is produced.
        """
        order = OrderState(self._catalog, tax_rate=self._tax_rate)

        requested = {
            Course.ENTREE: entree,
            Course.SIDE: side,
            Course.ACCOMPANIMENT: accompaniment,
        }
        for course, key in requested.items():
            if key is not None:
                order.select(course, key)

        return summarize(order)


# --- Mapping ------------------------------------------------------------------


def summarize(order: OrderState) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        entree=_name(order.entree.value),
        side=_name(order.side.value),
        accompaniment=_name(order.accompaniment.value),
        subtotal=order.formatted_subtotal.value,
        tax=order.formatted_tax.value,
        total=order.formatted_total.value,
    )


def _name(item: MenuItem | None) -> str | None:
    return item.name if item is not None else None
