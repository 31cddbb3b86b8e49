"""Tests for the session-bound ProfileStore."""

import json

from storefront.application.profile_store import ProfileStore, profile_key
from storefront.application.session import Session
from storefront.domain.model.account import UserRole
from storefront.domain.model.profile import UserProfile, default_admin_profile
from storefront.domain.model.session import SessionUser
from tests.fakes import FakeKeyValueStore

ADMIN = SessionUser(id=999, email="admin@shopng.com", role=UserRole.ADMIN)
SHOPPER = SessionUser(id=100, email="jane.smith@example.com")


def _profile(user_id: int = 100, **overrides) -> UserProfile:
    fields = dict(
        user_id=user_id,
        first_name="Jane",
        last_name="Smith",
        email="jane.smith@example.com",
        shipping_address="1 Main St",
        shipping_city="Springfield",
        shipping_state="IL",
        shipping_zip="62701",
        card_name="Jane Smith",
        card_number="4000000000000002",
        card_expiry="01/27",
        card_cvv="123",
    )
    fields.update(overrides)
    return UserProfile(**fields)


class TestLoadOnLogin:

    def test_shopper_without_record_has_no_profile(self):
        store = FakeKeyValueStore()
        session = Session()
        profiles = ProfileStore(store, session)

        session.login(SHOPPER)

        assert profiles.profile is None
        assert not profiles.has_profile
        assert store.entries == {}

    def test_admin_without_record_gets_persisted_default(self):
        store = FakeKeyValueStore()
        session = Session()
        profiles = ProfileStore(store, session)

        session.login(ADMIN)

        assert profiles.profile == default_admin_profile(999)
        assert profile_key(999) in store.entries
        assert json.loads(store.entries["user_profile_999"])["cardCvv"] == "999"

    def test_second_admin_load_reads_stored_default(self):
        store = FakeKeyValueStore()
        session = Session()
        profiles = ProfileStore(store, session)

        session.login(ADMIN)
        first = profiles.profile
        session.logout()
        session.login(ADMIN)

        assert profiles.profile == first
        assert store.set_calls == 1

    def test_stored_record_wins_over_default(self):
        store = FakeKeyValueStore()
        session = Session()
        profiles = ProfileStore(store, session)
        profiles.save_profile(_profile(999, first_name="Root"))
        session.login(ADMIN)
        assert profiles.profile.first_name == "Root"

    def test_current_identity_applied_at_construction(self):
        store = FakeKeyValueStore()
        profiles = ProfileStore(store, Session(ADMIN))
        assert profiles.profile == default_admin_profile(999)


class TestCorruptRecords:

    def test_corrupt_record_deleted_for_shopper(self):
        store = FakeKeyValueStore({"user_profile_100": "{not json"})
        session = Session()
        profiles = ProfileStore(store, session)

        session.login(SHOPPER)

        assert profiles.profile is None
        assert "user_profile_100" not in store.entries

    def test_corrupt_record_replaced_by_default_for_admin(self):
        store = FakeKeyValueStore({"user_profile_999": json.dumps({"userId": 999})})
        session = Session()
        profiles = ProfileStore(store, session)

        session.login(ADMIN)

        assert profiles.profile == default_admin_profile(999)
        stored = json.loads(store.entries["user_profile_999"])
        assert stored["shippingCity"] == "San Francisco"


class TestSaveAndLogout:

    def test_save_updates_live_and_persisted(self):
        store = FakeKeyValueStore()
        session = Session(SHOPPER)
        profiles = ProfileStore(store, session)

        profiles.save_profile(_profile())

        assert profiles.profile == _profile()
        assert profiles.get_stored_profile(100) == _profile()

    def test_logout_keeps_persisted_record(self):
        store = FakeKeyValueStore()
        session = Session(SHOPPER)
        profiles = ProfileStore(store, session)
        profiles.save_profile(_profile())

        session.logout()
        assert profiles.profile is None
        assert "user_profile_100" in store.entries

        session.login(SHOPPER)
        assert profiles.profile == _profile()

    def test_switching_users_loads_the_new_identity(self):
        store = FakeKeyValueStore()
        session = Session(SHOPPER)
        profiles = ProfileStore(store, session)
        profiles.save_profile(_profile())

        session.login(ADMIN)
        assert profiles.profile.user_id == 999

    def test_close_stops_following_session(self):
        session = Session()
        profiles = ProfileStore(FakeKeyValueStore(), session)
        profiles.close()
        session.login(ADMIN)
        assert profiles.profile is None
