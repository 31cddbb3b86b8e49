"""Session identity provider.

Holds the currently authenticated user (or None) and notifies
subscribers synchronously every time that value changes.
"""

from __future__ import annotations

import logging
from typing import Callable

from storefront.domain.model.session import SessionUser

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionUser | None], None]


class Session:

    def __init__(self, user: SessionUser | None = None) -> None:
        self._current_user = user
        self._listeners: list[SessionListener] = []

    @property
    def current_user(self) -> SessionUser | None:
        return self._current_user

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def login(self, user: SessionUser) -> None:
        logger.info("User %s logged in", user.id)
        self._set(user)

    def logout(self) -> None:
        if self._current_user is not None:
            logger.info("User %s logged out", self._current_user.id)
        self._set(None)

    def _set(self, user: SessionUser | None) -> None:
        if user == self._current_user:
            return
        self._current_user = user
        for listener in list(self._listeners):
            listener(user)
