"""Abstract transport for AdminUser accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.account import AdminUser


class UserRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[AdminUser]:
        """Return every account, most recently registered first."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> AdminUser:
        """Return one account; raises EntityNotFoundError if absent."""

    @abstractmethod
    async def toggle_status(self, user_id: int) -> AdminUser:
        """Flip one account between active and suspended.

        Raises EntityNotFoundError if no account has that id.
        """
