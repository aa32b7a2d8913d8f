"""Abstract catalog of menu items.

Defined in the domain layer so the order never depends on where the
menu comes from. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lunchtray.domain.model.menu_item import ItemType, MenuItem


class MenuCatalog(ABC):

    @abstractmethod
    def get(self, key: str) -> MenuItem | None:
        """Return the item stored under *key*, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[MenuItem]:
        """Return every item on the menu."""

    def list_by_type(self, item_type: ItemType) -> list[MenuItem]:
        """Return the items of one course type, in catalog order."""
        return [item for item in self.list_all() if item.type == item_type]
