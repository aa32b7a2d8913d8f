"""Application service: List Menu use case (query)."""

from __future__ import annotations

from lunchtray.application.dto import MenuItemDTO
from lunchtray.domain.model.menu_item import ItemType, MenuItem
from lunchtray.domain.repository.menu_catalog import MenuCatalog


class ListMenuHandler:

    def __init__(self, catalog: MenuCatalog) -> None:
        self._catalog = catalog

    def handle(self, item_type: ItemType | None = None) -> list[MenuItemDTO]:
        if item_type is None:
            items = self._catalog.list_all()
        else:
            items = self._catalog.list_by_type(item_type)
        return [self._to_dto(item) for item in items]

    @staticmethod
    def _to_dto(item: MenuItem) -> MenuItemDTO:
        return MenuItemDTO(
            key=item.key,
            name=item.name,
            description=item.description,
            price=item.formatted_price,
            type=item.type.value,
        )
