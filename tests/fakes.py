"""In-memory fakes for the abstract collaborators.

These implement the same abstract interfaces as the JSON-backed
infrastructure but keep everything in dicts. No file I/O, no side
effects. Every returned entity is a copy, as a real transport would hand
back freshly decoded objects.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

from storefront.domain.exceptions import EntityNotFoundError, TransportError
from storefront.domain.model.account import AccountStatus, AdminUser, UserRole
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.key_value_store import KeyValueStore
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products = list(products or [])

    async def list_all(self) -> list[Product]:
        return list(self._products)


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {o.id: replace(o) for o in orders or []}
        self.fail_next = False
        self.update_calls: list[tuple[int, OrderStatus]] = []

    async def list_all(self) -> list[Order]:
        await asyncio.sleep(0)
        self._maybe_fail()
        return [replace(o) for o in self._store.values()]

    async def update_status(self, order_id: int, status: OrderStatus) -> Order:
        self._maybe_fail()
        self.update_calls.append((order_id, status))
        order = self._store.get(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        order.change_status(status)
        return replace(order)

    def _maybe_fail(self) -> None:
        if self.fail_next:
            self.fail_next = False
            raise TransportError("connection reset")


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[AdminUser] | None = None) -> None:
        self._store: dict[int, AdminUser] = {u.id: replace(u) for u in users or []}
        self.fail_next = False
        self.toggle_calls: list[int] = []

    async def list_all(self) -> list[AdminUser]:
        self._maybe_fail()
        return [replace(u) for u in self._store.values()]

    async def get_by_id(self, user_id: int) -> AdminUser:
        user = self._store.get(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return replace(user)

    async def toggle_status(self, user_id: int) -> AdminUser:
        self._maybe_fail()
        self.toggle_calls.append(user_id)
        user = self._store.get(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        user.toggle_status()
        return replace(user)

    def _maybe_fail(self) -> None:
        if self.fail_next:
            self.fail_next = False
            raise TransportError("connection reset")


class FakeKeyValueStore(KeyValueStore):

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self.entries: dict[str, str] = dict(entries or {})
        self.set_calls = 0

    def get(self, key: str) -> str | None:
        return self.entries.get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        self.entries[key] = value

    def remove(self, key: str) -> None:
        self.entries.pop(key, None)


# --- Builders -----------------------------------------------------------------


def make_product(
    id: int = 1,
    name: str = "Widget",
    price: str = "10.00",
    category: str = "Home",
    rating: float = 4.0,
    description: str = "A useful widget",
) -> Product:
    return Product(
        id=id,
        name=name,
        description=description,
        price=Money.of(price),
        image=f"https://example.com/{id}.png",
        category=category,
        rating=rating,
        stock=10,
    )


def make_order(
    id: int,
    status: OrderStatus = OrderStatus.PENDING,
    total: str = "100.00",
    email: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
) -> Order:
    return Order(
        id=id,
        order_number=f"ORD-{10000 + id}",
        items=[OrderLineItem(1, "Widget", Quantity(1), Money.of(total))],
        total=Money.of(total),
        status=status,
        email=email,
        first_name=first_name,
        last_name=last_name,
    )


def make_user(
    id: int,
    email: str | None = None,
    first_name: str = "Test",
    last_name: str = "User",
    role: UserRole = UserRole.USER,
    status: AccountStatus = AccountStatus.ACTIVE,
) -> AdminUser:
    return AdminUser(
        id=id,
        email=email or f"user{id}@example.com",
        first_name=first_name,
        last_name=last_name,
        role=role,
        status=status,
        registered_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        order_count=1,
        total_spent=Money(Decimal("50.00")),
    )
