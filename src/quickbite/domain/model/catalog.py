"""Catalog — the fixed menu a shopper orders from.

Items are seeded at startup and never mutated. Prices are in the base
currency; conversion happens only when a price is displayed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from quickbite.domain.exceptions import EntityNotFoundError, ValidationError
from quickbite.domain.model.value_objects import Money

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class CatalogItem:
    id: int
    name: str
    category: str
    description: str
    price: Money
    image: str = ""


class Catalog:
    """Immutable, ordered collection of CatalogItems keyed by id."""

    def __init__(self, items: list[CatalogItem]) -> None:
        self._items: dict[int, CatalogItem] = {}
        for item in items:
            if item.id in self._items:
                raise ValidationError(f"Duplicate catalog item id {item.id}")
            self._items[item.id] = item

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get(self, item_id: int) -> CatalogItem | None:
        return self._items.get(item_id)

    def require(self, item_id: int) -> CatalogItem:
        item = self._items.get(item_id)
        if item is None:
            raise EntityNotFoundError(f"Catalog item #{item_id} not found")
        return item

    def list_all(self) -> list[CatalogItem]:
        return list(self._items.values())

    def categories(self) -> list[str]:
        seen: list[str] = []
        for item in self._items.values():
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def filter(self, category: str = ALL_CATEGORIES, search: str = "") -> list[CatalogItem]:
        """Items in *category* whose name or description contains *search*.

        Both filters are case-insensitive; ``"all"`` and an empty search
        match everything.
        """
        category = category.strip().lower()
        needle = search.strip().lower()
        result = []
        for item in self._items.values():
            if category and category != ALL_CATEGORIES and item.category != category:
                continue
            if needle and needle not in item.name.lower() and needle not in item.description.lower():
                continue
            result.append(item)
        return result


def _item(item_id: int, name: str, category: str, description: str, price: str, image: str) -> CatalogItem:
    return CatalogItem(
        id=item_id,
        name=name,
        category=category,
        description=description,
        price=Money(Decimal(price)),
        image=image,
    )


_IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"

DEFAULT_MENU: list[CatalogItem] = [
    _item(1, "Classic Burger", "burger",
          "Juicy beef patty with lettuce, tomato, and special sauce",
          "12.99", _IMG.format("1568901346375-23c9450c58cd")),
    _item(2, "Margherita Pizza", "pizza",
          "Fresh mozzarella, tomatoes, and basil on crispy crust",
          "18.99", _IMG.format("1546069901-ba9599a7e63c")),
    _item(3, "Sushi Roll", "sushi",
          "Fresh salmon, avocado, and cucumber roll",
          "16.99", _IMG.format("1579871494447-9811cf80d66c")),
    _item(4, "Pad Thai", "thai",
          "Stir-fried rice noodles with shrimp and peanuts",
          "14.99", _IMG.format("1551024709-8f23befc6f87")),
    _item(5, "Buddha Bowl", "healthy",
          "Healthy quinoa bowl with fresh vegetables",
          "13.99", _IMG.format("1540189549336-e6e99c3679fe")),
    _item(6, "Chocolate Cake", "dessert",
          "Rich chocolate layer cake with ganache",
          "8.99", _IMG.format("1565299585323-38d6b0865b47")),
    _item(7, "Cheeseburger", "burger",
          "Classic burger with melted cheddar cheese",
          "14.99", _IMG.format("1572802419224-296b0aeee0d9")),
    _item(8, "Pepperoni Pizza", "pizza",
          "Classic pepperoni with mozzarella cheese",
          "19.99", _IMG.format("1628840042765-356cda07504e")),
]


def default_catalog() -> Catalog:
    return Catalog(DEFAULT_MENU)
