from dataclasses import dataclass
from typing import Any

from ..canonical.entities import CategoryDefinition, Product


@dataclass(frozen=True)
class Catalog:
    categories: tuple[CategoryDefinition, ...] = ()
    products: tuple[Product, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "products", tuple(self.products))

    def product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def category(self, category_id: str) -> CategoryDefinition | None:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "categories": [category.to_dict() for category in self.categories],
            "products": [product.to_dict() for product in self.products],
        }


__all__ = ["Catalog"]
