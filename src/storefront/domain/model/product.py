"""Product aggregate.

Products are seeded once and never change afterwards. The catalog is the
source of truth for product attributes; carts and orders only hold copies.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MAX_RATING = 5.0


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: int
    name: str
    description: str
    price: Money
    image: str
    category: str
    rating: float
    stock: int

    def __post_init__(self) -> None:
        if not 0 <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating for {self.name} must be between 0 and {MAX_RATING:g}, "
                f"got {self.rating}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock for {self.name} cannot be negative")
