"""Catalog store: read-only queries over the seeded product collection."""

from __future__ import annotations

from typing import Iterable

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

DEFAULT_FEATURED_LIMIT = 4


class CatalogStore:
    """Holds the immutable product collection.

    Every query builds a new list; the backing tuple is never reordered.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: tuple[Product, ...] = tuple(products)

    @classmethod
    async def load(cls, product_repo: ProductRepository) -> CatalogStore:
        return cls(await product_repo.list_all())

    def get_products(self) -> list[Product]:
        return list(self._products)

    def get_product_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def get_products_by_category(self, category: str) -> list[Product]:
        wanted = category.lower()
        return [p for p in self._products if p.category.lower() == wanted]

    def search_products(self, term: str) -> list[Product]:
        """Case-insensitive substring match on name or description."""
        lower = term.lower()
        return [
            p for p in self._products
            if lower in p.name.lower() or lower in p.description.lower()
        ]

    def get_categories(self) -> list[str]:
        """Unique category names in first-seen order."""
        return list(dict.fromkeys(p.category for p in self._products))

    def get_featured_products(self, limit: int = DEFAULT_FEATURED_LIMIT) -> list[Product]:
        """Highest-rated products first; ties keep catalog order."""
        return sorted(self._products, key=lambda p: p.rating, reverse=True)[:limit]
