"""Domain service: read-only queries over the account collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from storefront.domain.model.account import AdminUser, UserRole

ALL = "all"


@dataclass(frozen=True)
class UserStats:
    total_users: int
    active_users: int
    admin_count: int


def compute_user_stats(users: Iterable[AdminUser]) -> UserStats:
    users = list(users)
    return UserStats(
        total_users=len(users),
        active_users=sum(1 for u in users if u.is_active),
        admin_count=sum(1 for u in users if u.is_admin),
    )


def filter_users(
    users: Sequence[AdminUser],
    role_filter: UserRole | str = ALL,
    search_term: str = "",
) -> list[AdminUser]:
    """Narrow *users* by role, then by email or name (case-insensitive)."""
    result = list(users)

    if role_filter != ALL:
        wanted = UserRole(role_filter)
        result = [u for u in result if u.role == wanted]

    term = search_term.strip().lower()
    if term:
        result = [
            u for u in result
            if term in u.email.lower()
            or term in u.first_name.lower()
            or term in u.last_name.lower()
        ]

    return result
