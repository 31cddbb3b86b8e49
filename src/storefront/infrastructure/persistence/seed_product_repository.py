"""ProductRepository backed by the built-in demo catalog."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.seed_data import SEED_PRODUCTS


class SeedProductRepository(ProductRepository):

    def __init__(self, records: list[dict] | None = None) -> None:
        self._records = SEED_PRODUCTS if records is None else records

    async def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._records]

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            image=raw["image"],
            category=raw["category"],
            rating=raw["rating"],
            stock=raw["stock"],
        )
