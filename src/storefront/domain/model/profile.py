"""Per-user checkout details, keyed 1:1 by user id."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    user_id: int
    first_name: str
    last_name: str
    email: str
    shipping_address: str
    shipping_city: str
    shipping_state: str
    shipping_zip: str
    card_name: str = ""
    card_number: str = ""
    card_expiry: str = ""
    card_cvv: str = ""


# Pre-filled so admins can go through checkout without entering details.
ADMIN_DEFAULT_PROFILE = dict(
    first_name="Admin",
    last_name="User",
    email="admin@shopng.com",
    shipping_address="100 Commerce Blvd",
    shipping_city="San Francisco",
    shipping_state="CA",
    shipping_zip="94102",
    card_name="Admin User",
    card_number="4111111111111111",
    card_expiry="12/28",
    card_cvv="999",
)


def default_admin_profile(user_id: int) -> UserProfile:
    """The fixed default profile for an admin account."""
    return UserProfile(user_id=user_id, **ADMIN_DEFAULT_PROFILE)
