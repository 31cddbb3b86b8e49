"""Abstract transport for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[Order]:
        """Return every order.

        Raises TransportError if the request fails.
        """

    @abstractmethod
    async def update_status(self, order_id: int, status: OrderStatus) -> Order:
        """Change one order's status and return the updated order.

        Raises EntityNotFoundError for an unknown id and
        InvalidTransitionError for a move the workflow does not allow.
        """
