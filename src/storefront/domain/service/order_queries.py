"""Domain service: read-only queries over an order collection.

Every function here returns a new list or value object and leaves the
input sequence untouched, so several views can read the same backing
collection at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import Money

ALL = "all"


@dataclass(frozen=True)
class OrderStats:
    total_orders: int
    total_revenue: Money
    pending_count: int
    shipped_count: int


def compute_order_stats(orders: Iterable[Order]) -> OrderStats:
    """Aggregate counts and revenue; cancelled orders earn nothing."""
    orders = list(orders)
    revenue = Money.zero()
    for order in orders:
        if order.counts_toward_revenue:
            revenue = revenue + order.total
    return OrderStats(
        total_orders=len(orders),
        total_revenue=revenue,
        pending_count=sum(1 for o in orders if o.status == OrderStatus.PENDING),
        shipped_count=sum(1 for o in orders if o.status == OrderStatus.SHIPPED),
    )


def filter_orders(
    orders: Sequence[Order],
    status_filter: OrderStatus | str = ALL,
    search_term: str = "",
) -> list[Order]:
    """Narrow *orders* by status, then by free text.

    The text filter is a case-insensitive substring match against the
    order number, email, first name and last name; a blank term matches
    everything.
    """
    result = list(orders)

    if status_filter != ALL:
        wanted = OrderStatus(status_filter)
        result = [o for o in result if o.status == wanted]

    term = search_term.strip().lower()
    if term:
        result = [
            o for o in result
            if any(term in value.lower() for value in o.search_fields())
        ]

    return result
