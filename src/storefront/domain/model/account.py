"""AdminUser aggregate, a customer or staff account as the admin panel sees it."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from storefront.domain.model.value_objects import Money


class UserRole(Enum):
    ADMIN = "admin"
    USER = "user"


class AccountStatus(Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


@dataclass
class AdminUser:
    """Account record.

    ``order_count`` and ``total_spent`` are precomputed when the account is
    seeded; they are not kept in sync with the order directory.
    """

    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    status: AccountStatus
    registered_at: datetime
    order_count: int = 0
    total_spent: Money = Money.zero()

    def toggle_status(self) -> None:
        """Flip between active and suspended."""
        if self.status == AccountStatus.ACTIVE:
            self.status = AccountStatus.SUSPENDED
        else:
            self.status = AccountStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
