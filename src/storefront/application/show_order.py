"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineItemDTO
from storefront.application.order_directory import OrderDirectory
from storefront.domain.model.order import Order


class ShowOrderHandler:

    def __init__(self, directory: OrderDirectory) -> None:
        self._directory = directory

    def handle(self, order_id: int) -> OrderDTO:
        """Raises EntityNotFoundError if the order is not loaded."""
        return self.to_dto(self._directory.get_order(order_id))

    def list_filtered(self) -> list[OrderDTO]:
        return [self.to_dto(order) for order in self._directory.filtered_orders]

    @staticmethod
    def to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            order_number=order.order_number,
            customer_name=order.customer_name,
            email=order.email or "",
            status=order.status.value,
            next_statuses=[s.value for s in order.status.next_statuses()],
            items=[
                OrderLineItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
