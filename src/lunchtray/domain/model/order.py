"""OrderState aggregate — the in-progress lunch order.

The order owns three course slots and the derived money values. All
invariants (``tax == subtotal * tax_rate`` and ``total == subtotal + tax``)
are re-established inside every mutation before anything is published.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from lunchtray.domain.exceptions import UnknownItemError, ValidationError
from lunchtray.domain.model.menu_item import ItemType, MenuItem
from lunchtray.domain.model.observable import Observable, publish
from lunchtray.domain.model.value_objects import Money
from lunchtray.domain.repository.menu_catalog import MenuCatalog

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.08")


class Course(Enum):
    ENTREE = "entree"
    SIDE = "side"
    ACCOMPANIMENT = "accompaniment"

    @property
    def item_type(self) -> ItemType:
        return _ITEM_TYPES[self]


_ITEM_TYPES = {
    Course.ENTREE: ItemType.ENTREE,
    Course.SIDE: ItemType.SIDE_DISH,
    Course.ACCOMPANIMENT: ItemType.ACCOMPANIMENT,
}


@dataclass
class CourseSlot:
    """The current selection for one course.

    ``previous_price`` is the price last charged for this slot, kept so
    that replacing the selection can take it back out of the subtotal.
    """

    key: str | None = None
    item: MenuItem | None = None
    previous_price: Money = field(default_factory=Money.zero)

    @property
    def is_empty(self) -> bool:
        return self.item is None


class OrderState:
    """Aggregate root for a single lunch order.

    Create one instance per active order. Selections go through the
    course setters; ``reset_order()`` clears the instance for reuse.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        tax_rate: Decimal | int | float | str = DEFAULT_TAX_RATE,
    ) -> None:
        self._catalog = catalog
        self._tax_rate = _coerce_tax_rate(tax_rate)
        self._slots = {course: CourseSlot() for course in Course}

        self._selections: dict[Course, Observable[MenuItem | None]] = {
            course: Observable(None) for course in Course
        }
        self.subtotal: Observable[Money] = Observable(Money.zero())
        self.tax: Observable[Money] = Observable(Money.zero())
        self.total: Observable[Money] = Observable(Money.zero())

        self.formatted_subtotal: Observable[str] = self.subtotal.map(str)
        self.formatted_tax: Observable[str] = self.tax.map(str)
        self.formatted_total: Observable[str] = self.total.map(str)

    # --- Observable selections ------------------------------------------------

    @property
    def entree(self) -> Observable[MenuItem | None]:
        return self._selections[Course.ENTREE]

    @property
    def side(self) -> Observable[MenuItem | None]:
        return self._selections[Course.SIDE]

    @property
    def accompaniment(self) -> Observable[MenuItem | None]:
        return self._selections[Course.ACCOMPANIMENT]

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @property
    def is_complete(self) -> bool:
        return all(not slot.is_empty for slot in self._slots.values())

    def selection(self, course: Course) -> MenuItem | None:
        return self._slots[course].item

    # --- Commands -------------------------------------------------------------

    def set_entree(self, key: str) -> None:
        self.select(Course.ENTREE, key)

    def set_side(self, key: str) -> None:
        self.select(Course.SIDE, key)

    def set_accompaniment(self, key: str) -> None:
        self.select(Course.ACCOMPANIMENT, key)

    def select(self, course: Course, key: str) -> None:
        """Replace the selection for *course* with the item stored under *key*.

        The previous selection's price is taken out of the subtotal and the
        new price added. Re-selecting the current key changes nothing.
        Raises UnknownItemError, leaving the order untouched, if the key is
        not on the menu.
        """
        item = self._catalog.get(key)
        if item is None:
            logger.warning("Rejected %s selection: unknown key %r", course.value, key)
            raise UnknownItemError(key)

        slot = self._slots[course]
        if slot.key == key:
            logger.debug("%s '%s' already selected", course.value, key)
            return

        subtotal = self.subtotal.value
        if not slot.is_empty:
            logger.debug(
                "Replacing %s '%s' (%s) with '%s'",
                course.value, slot.key, slot.previous_price, key,
            )
            subtotal = subtotal - slot.previous_price

        updates = [(self._selections[course], item)] + self._money_updates(
            subtotal + item.price
        )

        slot.previous_price = item.price
        slot.key = key
        slot.item = item

        logger.debug("Selected %s '%s' at %s", course.value, key, item.price)
        publish(updates)

    def calculate_tax_and_total(self) -> None:
        """Recompute tax and total from the current subtotal and publish them."""
        publish(self._money_updates(self.subtotal.value))

    def reset_order(self) -> None:
        """Clear every selection and zero all money values."""
        for slot in self._slots.values():
            slot.key = None
            slot.item = None
            slot.previous_price = Money.zero()

        logger.debug("Order reset")
        publish(
            [(observable, None) for observable in self._selections.values()]
            + [
                (self.subtotal, Money.zero()),
                (self.tax, Money.zero()),
                (self.total, Money.zero()),
            ]
        )

    # --- Internal helpers -----------------------------------------------------

    def _money_updates(self, subtotal: Money) -> list[tuple[Observable[Any], Any]]:
        tax = subtotal * self._tax_rate
        return [
            (self.subtotal, subtotal),
            (self.tax, tax),
            (self.total, subtotal + tax),
        ]


def _coerce_tax_rate(rate: Decimal | int | float | str) -> Decimal:
    """Turn *rate* into a finite, non-negative Decimal.

    Floats go through ``str()`` so that ``0.08`` becomes ``Decimal("0.08")``
    rather than its binary approximation.
    """
    if isinstance(rate, bool) or not isinstance(rate, (Decimal, int, float, str)):
        raise ValidationError(f"Tax rate must be a number, got {type(rate).__name__}")
    try:
        value = rate if isinstance(rate, Decimal) else Decimal(str(rate).strip())
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid tax rate: {rate!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid tax rate: {rate!r}")
    if value < 0:
        raise ValidationError(f"Tax rate cannot be negative, got {value}")
    return value
