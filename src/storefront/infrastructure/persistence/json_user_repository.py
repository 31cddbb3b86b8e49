"""JSON-file-backed implementation of UserRepository.

Anything wrong with the file, unreadable or holding a record that does not
decode, surfaces as TransportError.
"""

from __future__ import annotations

import copy
import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import (
    EntityNotFoundError,
    TransportError,
    ValidationError,
)
from storefront.domain.model.account import AccountStatus, AdminUser, UserRole
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.seed_data import SEED_USERS

DECODE_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError, ValidationError)


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file_path = file_path
        self._seed = SEED_USERS if seed is None else seed
        self._ensure_file()

    # --- UserRepository interface ---------------------------------------------

    async def list_all(self) -> list[AdminUser]:
        users = [self._decode(raw) for raw in self._load_raw()]
        return sorted(users, key=lambda u: u.registered_at, reverse=True)

    async def get_by_id(self, user_id: int) -> AdminUser:
        for raw in self._load_raw():
            if raw.get("id") == user_id:
                return self._decode(raw)
        raise EntityNotFoundError(f"User #{user_id} not found")

    async def toggle_status(self, user_id: int) -> AdminUser:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw.get("id") == user_id:
                user = self._decode(raw)
                user.toggle_status()
                records[i] = self._to_raw(user)
                self._persist_raw(records)
                return user
        raise EntityNotFoundError(f"User #{user_id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: AdminUser) -> dict:
        return {
            "id": user.id,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "role": user.role.value,
            "status": user.status.value,
            "registered_at": user.registered_at.isoformat(),
            "order_count": user.order_count,
            "total_spent": str(user.total_spent.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> AdminUser:
        return AdminUser(
            id=raw["id"],
            email=raw["email"],
            first_name=raw["first_name"],
            last_name=raw["last_name"],
            role=UserRole(raw["role"]),
            status=AccountStatus(raw["status"]),
            registered_at=datetime.fromisoformat(raw["registered_at"]),
            order_count=raw.get("order_count", 0),
            total_spent=Money(Decimal(raw.get("total_spent", "0.00"))),
        )

    # --- File helpers ---------------------------------------------------------

    def _decode(self, raw: dict) -> AdminUser:
        try:
            return self._to_domain(raw)
        except DECODE_ERRORS as exc:
            raise TransportError(
                f"Malformed user record {raw.get('id')!r} in {self._file_path}"
            ) from exc

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise TransportError(f"Cannot read users from {self._file_path}") from exc
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise TransportError(f"{self._file_path} does not hold a list of users")
        return records

    def _persist_raw(self, users: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(users, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise TransportError(f"Cannot write users to {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw(copy.deepcopy(self._seed))
