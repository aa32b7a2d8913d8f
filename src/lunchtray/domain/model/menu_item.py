"""Menu items offered by the lunch counter.

Items are owned by the catalog. An order only keeps references to the
items it has selected, never copies or mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lunchtray.domain.model.value_objects import Money


class ItemType(Enum):
    ENTREE = "ENTREE"
    SIDE_DISH = "SIDE_DISH"
    ACCOMPANIMENT = "ACCOMPANIMENT"


@dataclass(frozen=True)
class MenuItem:
    """A single dish on the menu, looked up by its ``key``."""

    key: str
    name: str
    description: str
    price: Money
    type: ItemType

    @property
    def formatted_price(self) -> str:
        return str(self.price)
