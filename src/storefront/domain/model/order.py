"""Order aggregate and its status workflow.

Orders arrive fully formed from the transport layer. Everything about an
order is fixed once placed except its status, which may only move along
the edges of the transition table below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import InvalidTransitionError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def next_statuses(self) -> tuple[OrderStatus, ...]:
        return _TRANSITIONS[self]

    def can_transition_to(self, target: OrderStatus) -> bool:
        return target in _TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]


_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}


def get_next_statuses(current: OrderStatus) -> list[OrderStatus]:
    """Return the statuses an order in *current* may move to next."""
    return list(current.next_statuses())


@dataclass(frozen=True)
class OrderLineItem:
    """Price snapshot of a product at the time the order was placed."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for a placed order.

    ``total`` is stored as charged (shipping and tax included) rather than
    recomputed from the lines.
    """

    id: int
    order_number: str
    items: list[OrderLineItem]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> None:
        """Move the order along one edge of the workflow."""
        if not self.status.can_transition_to(new_status):
            allowed = ", ".join(s.value for s in self.status.next_statuses()) or "none"
            raise InvalidTransitionError(
                f"Cannot move order {self.order_number} from {self.status.value} "
                f"to {new_status.value} (allowed: {allowed})"
            )
        self.status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def customer_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def counts_toward_revenue(self) -> bool:
        return self.status != OrderStatus.CANCELLED

    def search_fields(self) -> list[str]:
        """Text fields an admin search term is matched against."""
        return [
            value
            for value in (self.order_number, self.email, self.first_name, self.last_name)
            if value
        ]
