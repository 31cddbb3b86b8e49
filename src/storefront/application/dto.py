"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry read-only projections to the CLI without exposing domain
internals. Nothing here ever carries payment details.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ShippingAddressDTO:
    """Output: where a user's orders ship to."""

    address: str
    city: str
    state: str
    zip_code: str


@dataclass(frozen=True)
class AdminUserDetailDTO:
    """Output: an account as shown in the expanded admin users row."""

    id: int
    email: str
    first_name: str
    last_name: str
    role: str
    status: str
    registered_at: str
    order_count: int
    total_spent: str  # formatted, e.g. "$221.48"
    shipping: ShippingAddressDTO | None
    is_self: bool


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the admin."""

    id: int
    order_number: str
    customer_name: str
    email: str
    status: str
    next_statuses: list[str]
    items: list[OrderLineItemDTO]
    total: str
    created_at: str
