"""In-memory implementation of MenuCatalog seeded with the lunch menu."""

from __future__ import annotations

from lunchtray.domain.model.menu_item import ItemType, MenuItem
from lunchtray.domain.model.value_objects import Money
from lunchtray.domain.repository.menu_catalog import MenuCatalog


class StaticMenuCatalog(MenuCatalog):

    def __init__(self, items: list[MenuItem]) -> None:
        self._store: dict[str, MenuItem] = {}
        for item in items:
            self._store[item.key] = item

    # --- MenuCatalog interface ------------------------------------------------

    def get(self, key: str) -> MenuItem | None:
        return self._store.get(key)

    def list_all(self) -> list[MenuItem]:
        return list(self._store.values())


def _item(key: str, name: str, description: str, price: str, item_type: ItemType) -> MenuItem:
    return MenuItem(
        key=key,
        name=name,
        description=description,
        price=Money.of(price),
        type=item_type,
    )


LUNCH_MENU: list[MenuItem] = [
    _item(
        "cauliflower", "Cauliflower",
        "Whole cauliflower, brined, roasted, and deep fried",
        "7.00", ItemType.ENTREE,
    ),
    _item(
        "chili", "Three Bean Chili",
        "Black beans, red beans, kidney beans, slow cooked, topped with onion",
        "4.00", ItemType.ENTREE,
    ),
    _item(
        "pasta", "Mushroom Pasta",
        "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic "
        "and olive oil",
        "5.50", ItemType.ENTREE,
    ),
    _item(
        "skillet", "Spicy Black Bean Skillet",
        "Seasonal vegetables, black beans, house spice blend, served with "
        "avocado and quick pickled onions",
        "5.50", ItemType.ENTREE,
    ),
    _item(
        "salad", "Summer Salad",
        "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "2.50", ItemType.SIDE_DISH,
    ),
    _item(
        "soup", "Butternut Squash Soup",
        "Roasted butternut squash, roasted peppers, chili oil",
        "3.00", ItemType.SIDE_DISH,
    ),
    _item(
        "potatoes", "Spicy Potatoes",
        "Marble potatoes, roasted, and fried in house spice blend",
        "2.00", ItemType.SIDE_DISH,
    ),
    _item(
        "rice", "Coconut Rice",
        "Rice, coconut milk, lime, and sugar",
        "1.50", ItemType.SIDE_DISH,
    ),
    _item(
        "bread", "Lunch Roll",
        "Fresh baked roll made in house",
        "0.50", ItemType.ACCOMPANIMENT,
    ),
    _item(
        "berries", "Mixed Berries",
        "Strawberries, blueberries, raspberries, and huckleberries",
        "1.00", ItemType.ACCOMPANIMENT,
    ),
    _item(
        "pickles", "Pickled Veggies",
        "Pickled cucumbers and carrots, made in house",
        "0.50", ItemType.ACCOMPANIMENT,
    ),
]
