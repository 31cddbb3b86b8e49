"""The authenticated identity as seen by the rest of the domain."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.account import UserRole


@dataclass(frozen=True)
class SessionUser:
    id: int
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
