"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Each store is built exactly once here and handed to its consumers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from storefront.application.account_directory import AccountDirectory
from storefront.application.admin_user_view import AdminUserView
from storefront.application.catalog_store import CatalogStore
from storefront.application.order_directory import OrderDirectory
from storefront.application.profile_store import ProfileStore
from storefront.application.session import Session
from storefront.domain.model.cart import Cart
from storefront.infrastructure.config import settings
from storefront.infrastructure.persistence.json_key_value_store import (
    JsonKeyValueStore,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.persistence.seed_product_repository import (
    SeedProductRepository,
)


@dataclass
class Container:
    session: Session
    catalog: CatalogStore
    cart: Cart
    orders: OrderDirectory
    accounts: AccountDirectory
    profiles: ProfileStore
    admin_users: AdminUserView


async def build_container(data_dir: Path | None = None) -> Container:
    data_dir = data_dir or settings.DATA_DIR
    session = Session()
    accounts = AccountDirectory(JsonUserRepository(data_dir / "users.json"), session)
    profiles = ProfileStore(JsonKeyValueStore(data_dir / "storage.json"), session)
    return Container(
        session=session,
        catalog=await CatalogStore.load(SeedProductRepository()),
        cart=Cart(),
        orders=OrderDirectory(JsonOrderRepository(data_dir / "orders.json")),
        accounts=accounts,
        profiles=profiles,
        admin_users=AdminUserView(accounts, profiles),
    )
