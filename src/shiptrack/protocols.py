"""Storage protocols consumed by the shipment store and account service."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable


class ShipmentRecord(Protocol):
    id: str
    tracking_number: str
    created_at: datetime
    updated_at: datetime


class UserRecord(Protocol):
    id: str
    username: str
    email: str
    password_hash: str


@runtime_checkable
class ShipmentRepository(Protocol):
    """Persistence for shipment records.

    ``create`` must raise ``ConflictError`` when the storage layer's
    tracking number uniqueness constraint is violated.
    """

    async def get_by_id(self, shipment_id: str) -> ShipmentRecord | None: ...

    async def get_by_tracking_number(
        self, tracking_number: str
    ) -> ShipmentRecord | None: ...

    async def list_all(
        self, limit: int | None = None
    ) -> list[ShipmentRecord]: ...

    async def create(self, **fields: Any) -> ShipmentRecord: ...

    async def update(
        self, shipment_id: str, **fields: Any
    ) -> ShipmentRecord | None: ...

    async def delete(self, shipment_id: str) -> bool: ...


@runtime_checkable
class UserRepository(Protocol):
    """Persistence for account credentials."""

    async def get_by_username(self, username: str) -> UserRecord | None: ...

    async def find_by_username_or_email(
        self, username: str, email: str
    ) -> UserRecord | None: ...

    async def create(
        self, *, username: str, email: str, password_hash: str
    ) -> UserRecord: ...
