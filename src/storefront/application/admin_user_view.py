"""Application service: combined account + address view for admins.

Joins an account from the directory with the stored profile of that same
user (not the signed-in admin's). Only the shipping fields of the profile
are copied into the result; card details stay behind this boundary.
"""

from __future__ import annotations

from storefront.application.account_directory import AccountDirectory
from storefront.application.dto import AdminUserDetailDTO, ShippingAddressDTO
from storefront.application.profile_store import ProfileStore
from storefront.domain.model.profile import UserProfile


class AdminUserView:

    def __init__(self, accounts: AccountDirectory, profiles: ProfileStore) -> None:
        self._accounts = accounts
        self._profiles = profiles

    def get_user_detail(self, user_id: int) -> AdminUserDetailDTO:
        """Raises EntityNotFoundError if the account is not loaded."""
        user = self._accounts.get_user(user_id)
        profile = self._profiles.get_stored_profile(user_id)
        return AdminUserDetailDTO(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role.value,
            status=user.status.value,
            registered_at=user.registered_at.strftime("%Y-%m-%d"),
            order_count=user.order_count,
            total_spent=str(user.total_spent),
            shipping=self._shipping_of(profile),
            is_self=self._accounts.is_self(user_id),
        )

    @staticmethod
    def _shipping_of(profile: UserProfile | None) -> ShippingAddressDTO | None:
        if profile is None:
            return None
        return ShippingAddressDTO(
            address=profile.shipping_address,
            city=profile.shipping_city,
            state=profile.shipping_state,
            zip_code=profile.shipping_zip,
        )
