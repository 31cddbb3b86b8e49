"""JSON-file-backed implementation of OrderRepository.

Anything wrong with the file, unreadable or holding a record that does not
decode, surfaces as TransportError.
"""

from __future__ import annotations

import copy
import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import (
    EntityNotFoundError,
    TransportError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.seed_data import SEED_ORDERS

DECODE_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError, ValidationError)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file_path = file_path
        self._seed = SEED_ORDERS if seed is None else seed
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    async def list_all(self) -> list[Order]:
        return [self._decode(raw) for raw in self._load_raw()]

    async def update_status(self, order_id: int, status: OrderStatus) -> Order:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw.get("id") == order_id:
                order = self._decode(raw)
                order.change_status(status)
                records[i] = self._to_raw(order)
                self._persist_raw(records)
                return order
        raise EntityNotFoundError(f"Order #{order_id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "order_number": order.order_number,
            "email": order.email,
            "first_name": order.first_name,
            "last_name": order.last_name,
            "status": order.status.value,
            "total": str(order.total.amount),
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            order_number=raw["order_number"],
            items=items,
            total=Money(Decimal(raw["total"])),
            status=OrderStatus(raw["status"]),
            email=raw.get("email"),
            first_name=raw.get("first_name"),
            last_name=raw.get("last_name"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _decode(self, raw: dict) -> Order:
        try:
            return self._to_domain(raw)
        except DECODE_ERRORS as exc:
            raise TransportError(
                f"Malformed order record {raw.get('id')!r} in {self._file_path}"
            ) from exc

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise TransportError(f"Cannot read orders from {self._file_path}") from exc
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise TransportError(f"{self._file_path} does not hold a list of orders")
        return records

    def _persist_raw(self, orders: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(orders, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise TransportError(f"Cannot write orders to {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw(copy.deepcopy(self._seed))
