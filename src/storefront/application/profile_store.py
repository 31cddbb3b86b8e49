"""Application service: the live profile of whoever is signed in.

The store follows the session: a login loads that user's profile, a
logout clears the in-memory copy. Persisted records are keyed by user id
and survive logouts, so the same user gets their profile back on the
next login.

Load policy for a signed-in user:
  1. a stored record that parses becomes the live profile;
  2. otherwise, for an admin, the fixed default profile is created and
     persisted straight away;
  3. otherwise there is no profile.

A stored record that fails to parse is deleted and treated as missing.
"""

from __future__ import annotations

import json
import logging

from storefront.application.session import Session
from storefront.domain.model.profile import UserProfile, default_admin_profile
from storefront.domain.model.session import SessionUser
from storefront.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

PROFILE_KEY_PREFIX = "user_profile_"


def profile_key(user_id: int) -> str:
    return f"{PROFILE_KEY_PREFIX}{user_id}"


class ProfileStore:

    def __init__(self, store: KeyValueStore, session: Session) -> None:
        self._store = store
        self._profile: UserProfile | None = None
        self._unsubscribe = session.subscribe(self._on_session_change)
        self._on_session_change(session.current_user)

    # --- Read side ------------------------------------------------------------

    @property
    def profile(self) -> UserProfile | None:
        return self._profile

    @property
    def has_profile(self) -> bool:
        return self._profile is not None

    def get_stored_profile(self, user_id: int) -> UserProfile | None:
        """Look up the persisted profile for any user, signed in or not."""
        key = profile_key(user_id)
        stored = self._store.get(key)
        if stored is None:
            return None
        try:
            return self._to_domain(json.loads(stored))
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Discarding unreadable profile record %s: %s", key, exc)
            self._store.remove(key)
            return None

    # --- Write side -----------------------------------------------------------

    def save_profile(self, profile: UserProfile) -> None:
        self._profile = profile
        self._persist(profile)

    def close(self) -> None:
        """Stop following the session."""
        self._unsubscribe()

    # --- Session binding ------------------------------------------------------

    def _on_session_change(self, user: SessionUser | None) -> None:
        if user is None:
            self._profile = None
        else:
            self._load_profile(user)

    def _load_profile(self, user: SessionUser) -> None:
        stored = self.get_stored_profile(user.id)
        if stored is not None:
            self._profile = stored
            return

        if user.is_admin:
            profile = default_admin_profile(user.id)
            self._profile = profile
            self._persist(profile)
            logger.info("Created default profile for admin #%s", user.id)
        else:
            self._profile = None

    def _persist(self, profile: UserProfile) -> None:
        self._store.set(profile_key(profile.user_id), json.dumps(self._to_raw(profile)))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(profile: UserProfile) -> dict:
        return {
            "userId": profile.user_id,
            "firstName": profile.first_name,
            "lastName": profile.last_name,
            "email": profile.email,
            "shippingAddress": profile.shipping_address,
            "shippingCity": profile.shipping_city,
            "shippingState": profile.shipping_state,
            "shippingZip": profile.shipping_zip,
            "cardName": profile.card_name,
            "cardNumber": profile.card_number,
            "cardExpiry": profile.card_expiry,
            "cardCvv": profile.card_cvv,
        }

    @staticmethod
    def _to_domain(raw: dict) -> UserProfile:
        return UserProfile(
            user_id=int(raw["userId"]),
            first_name=raw["firstName"],
            last_name=raw["lastName"],
            email=raw["email"],
            shipping_address=raw["shippingAddress"],
            shipping_city=raw["shippingCity"],
            shipping_state=raw["shippingState"],
            shipping_zip=raw["shippingZip"],
            card_name=raw.get("cardName", ""),
            card_number=raw.get("cardNumber", ""),
            card_expiry=raw.get("cardExpiry", ""),
            card_cvv=raw.get("cardCvv", ""),
        )
