"""Application service: order directory behind the admin orders panel.

Owns the loaded order collection, the active filter criteria, and the
stats and filtered view derived from them. Transport failures never
escape: they are logged and turned into ``error`` while the last-known
collection stays in place.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.domain.model.order import Order, OrderStatus, get_next_statuses
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_queries import (
    ALL,
    OrderStats,
    compute_order_stats,
    filter_orders,
)

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load orders."
UPDATE_FAILED_MESSAGE = "Failed to update order status."


class OrderDirectory:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo
        self._orders: list[Order] = []
        self._filtered: list[Order] = []
        self._stats = compute_order_stats([])
        self.status_filter: OrderStatus | str = ALL
        self.search_term = ""
        self.loading = False
        self.error = ""

    # --- Read side ------------------------------------------------------------

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    @property
    def filtered_orders(self) -> list[Order]:
        return list(self._filtered)

    @property
    def stats(self) -> OrderStats:
        return self._stats

    def get_order(self, order_id: int) -> Order:
        for order in self._orders:
            if order.id == order_id:
                return order
        raise EntityNotFoundError(f"Order #{order_id} not found")

    @staticmethod
    def get_next_statuses(current: OrderStatus) -> list[OrderStatus]:
        return get_next_statuses(current)

    # --- Filter criteria ------------------------------------------------------

    def set_status_filter(self, status_filter: OrderStatus | str) -> None:
        self.status_filter = status_filter
        self.apply_filter()

    def set_search_term(self, search_term: str) -> None:
        self.search_term = search_term
        self.apply_filter()

    def apply_filter(self) -> None:
        """Rebuild the filtered view from the current collection and criteria."""
        self._filtered = filter_orders(self._orders, self.status_filter, self.search_term)

    # --- Transport-backed operations ------------------------------------------

    async def load_orders(self) -> None:
        self.loading = True
        try:
            orders = await self._order_repo.list_all()
        except DomainException as exc:
            logger.warning("Loading orders failed: %s", exc)
            self.error = LOAD_FAILED_MESSAGE
            self.loading = False
            return

        self._orders = list(orders)
        self.error = ""
        self._refresh()
        self.loading = False
        logger.info("Loaded %d orders", len(self._orders))

    async def update_status(self, order_id: int, new_status: OrderStatus) -> Order | None:
        """Move one order to *new_status*.

        Returns the updated order, or None when the change was rejected or
        the request failed (``error`` then says so).
        """
        try:
            current = self.get_order(order_id)
            # Validate on a copy so the local record only changes once the
            # transport has accepted the move.
            replace(current).change_status(new_status)
            updated = await self._order_repo.update_status(order_id, new_status)
        except DomainException as exc:
            logger.warning("Status change for order #%s rejected: %s", order_id, exc)
            self.error = UPDATE_FAILED_MESSAGE
            return None

        for index, order in enumerate(self._orders):
            if order.id == updated.id:
                self._orders[index] = replace(order, status=updated.status)
                break
        else:
            return None

        self.error = ""
        self._refresh()
        logger.info("Order #%s is now %s", order_id, updated.status.value)
        return self._orders[index]

    # --- Internal helpers -----------------------------------------------------

    def _refresh(self) -> None:
        self._stats = compute_order_stats(self._orders)
        self.apply_filter()
