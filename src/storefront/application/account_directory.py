"""Application service: account directory behind the admin users panel."""

from __future__ import annotations

import logging

from storefront.application.session import Session
from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.domain.model.account import AdminUser, UserRole
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.account_queries import (
    ALL,
    UserStats,
    compute_user_stats,
    filter_users,
)

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load users."
UPDATE_FAILED_MESSAGE = "Failed to update user status."
SELF_LOCK_MESSAGE = "You cannot change the status of your own account."


class AccountDirectory:
    """Loaded accounts plus the role/search filter and stats derived from them.

    The signed-in admin is never allowed to suspend their own account;
    ``is_self`` tells the panel which row to lock.
    """

    def __init__(self, user_repo: UserRepository, session: Session) -> None:
        self._user_repo = user_repo
        self._session = session
        self._users: list[AdminUser] = []
        self._filtered: list[AdminUser] = []
        self._stats = compute_user_stats([])
        self.role_filter: UserRole | str = ALL
        self.search_term = ""
        self.loading = False
        self.error = ""

    # --- Read side ------------------------------------------------------------

    @property
    def users(self) -> list[AdminUser]:
        return list(self._users)

    @property
    def filtered_users(self) -> list[AdminUser]:
        return list(self._filtered)

    @property
    def stats(self) -> UserStats:
        return self._stats

    def get_user(self, user_id: int) -> AdminUser:
        for user in self._users:
            if user.id == user_id:
                return user
        raise EntityNotFoundError(f"User #{user_id} not found")

    def is_self(self, user_id: int) -> bool:
        current = self._session.current_user
        return current is not None and current.id == user_id

    def can_toggle(self, user_id: int) -> bool:
        return not self.is_self(user_id)

    # --- Filter criteria ------------------------------------------------------

    def set_role_filter(self, role_filter: UserRole | str) -> None:
        self.role_filter = role_filter
        self.apply_filter()

    def set_search_term(self, search_term: str) -> None:
        self.search_term = search_term
        self.apply_filter()

    def apply_filter(self) -> None:
        self._filtered = filter_users(self._users, self.role_filter, self.search_term)

    # --- Transport-backed operations ------------------------------------------

    async def load_users(self) -> None:
        self.loading = True
        try:
            users = await self._user_repo.list_all()
        except DomainException as exc:
            logger.warning("Loading users failed: %s", exc)
            self.error = LOAD_FAILED_MESSAGE
            self.loading = False
            return

        self._users = list(users)
        self.error = ""
        self._refresh()
        self.loading = False
        logger.info("Loaded %d users", len(self._users))

    async def toggle_user_status(self, user_id: int) -> AdminUser | None:
        """Suspend or reactivate one account.

        Returns the updated account, or None when the request was refused
        or failed.
        """
        if self.is_self(user_id):
            logger.warning("Refused to toggle status of signed-in user #%s", user_id)
            self.error = SELF_LOCK_MESSAGE
            return None

        try:
            updated = await self._user_repo.toggle_status(user_id)
        except DomainException as exc:
            logger.warning("Status toggle for user #%s failed: %s", user_id, exc)
            self.error = UPDATE_FAILED_MESSAGE
            return None

        for index, user in enumerate(self._users):
            if user.id == updated.id:
                self._users[index] = updated
                break
        else:
            return None

        self.error = ""
        self._refresh()
        logger.info("User #%s is now %s", user_id, updated.status.value)
        return updated

    # --- Internal helpers -----------------------------------------------------

    def _refresh(self) -> None:
        self._stats = compute_user_stats(self._users)
        self.apply_filter()
