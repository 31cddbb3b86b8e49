"""Cart aggregate: line items plus the totals derived from them.

The cart never edits a line in place: every mutation builds a new tuple
of immutable CartItems, so anyone holding ``cart.items`` keeps a stable
snapshot and can compare ``version`` to notice that a newer one exists.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartItem:
    """A product copy together with how many units the shopper wants."""

    product: Product
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one CartItem per product id
    - every stored quantity is >= 1; setting a quantity <= 0 removes the line

    Quantities passed in are expected to be positive integers; the cart
    does not validate them.
    """

    def __init__(self) -> None:
        self._items: tuple[CartItem, ...] = ()
        self._version = 0

    # --- Snapshot & derived values --------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        return self._items

    @property
    def version(self) -> int:
        return self._version

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._items

    def quantity_of(self, product_id: int) -> int:
        for item in self._items:
            if item.product.id == product_id:
                return item.quantity
        return 0

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units, merging into an existing line for the product."""
        if any(item.product.id == product.id for item in self._items):
            self._set_items(
                replace(item, quantity=item.quantity + quantity)
                if item.product.id == product.id
                else item
                for item in self._items
            )
        else:
            self._set_items((*self._items, CartItem(product=product, quantity=quantity)))

    def remove_from_cart(self, product_id: int) -> None:
        self._set_items(item for item in self._items if item.product.id != product_id)

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Replace a line's quantity; zero or less drops the line."""
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return
        self._set_items(
            replace(item, quantity=quantity) if item.product.id == product_id else item
            for item in self._items
        )

    def clear_cart(self) -> None:
        self._set_items(())

    # --- Internal helpers -----------------------------------------------------

    def _set_items(self, items: Iterable[CartItem]) -> None:
        self._items = tuple(items)
        self._version += 1
