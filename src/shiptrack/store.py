"""Shipment record lifecycle."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from typing import Any

from shiptrack.exceptions import ShipmentNotFoundError
from shiptrack.protocols import ShipmentRecord, ShipmentRepository
from shiptrack.resolver import IdentifierResolver
from shiptrack.validation import as_utc, utcnow, validate_shipment_fields

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 5

_TICK = timedelta(microseconds=1)


def parse_limit(value: Any, default: int = DEFAULT_RECENT_LIMIT) -> int:
    """Parse a client-supplied limit, falling back to ``default``."""
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return default
    return limit if limit > 0 else default


class ShipmentStore:
    """Create, list, resolve, update and delete shipment records.

    ``update`` and ``delete`` return ``None`` when the identifier matches
    nothing; callers report that as a completed no-op, not as an error.
    """

    def __init__(
        self,
        repository: ShipmentRepository,
        *,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.repository = repository
        self.resolver = IdentifierResolver(repository)
        self.recent_limit = recent_limit
        self.clock = clock

    async def create(self, fields: Mapping[str, Any]) -> ShipmentRecord:
        now = self.clock()
        cleaned = validate_shipment_fields(fields, now=now)
        shipment = await self.repository.create(
            **cleaned, created_at=now, updated_at=now
        )
        logger.info("New shipment created: %s", shipment.tracking_number)
        return shipment

    async def list_all(self) -> list[ShipmentRecord]:
        return await self.repository.list_all()

    async def list_recent(self, limit: Any = None) -> list[ShipmentRecord]:
        return await self.repository.list_all(
            limit=parse_limit(limit, self.recent_limit)
        )

    async def find(self, identifier: str) -> ShipmentRecord:
        shipment = await self.resolver.resolve(identifier)
        if shipment is None:
            logger.warning("Shipment not found: %s", identifier)
            raise ShipmentNotFoundError(identifier)
        logger.info("Shipment found: %s", shipment.tracking_number)
        return shipment

    async def update(
        self, identifier: str, fields: Mapping[str, Any]
    ) -> ShipmentRecord | None:
        """Apply allow-listed ``fields`` to the resolved shipment.

        Non-updatable keys (tracking number, id, timestamps) are ignored.
        """
        shipment = await self.resolver.resolve(identifier)
        if shipment is None:
            logger.warning("Shipment not found for update: %s", identifier)
            return None

        now = self.clock()
        changes = validate_shipment_fields(fields, partial=True, now=now)
        previous = as_utc(shipment.updated_at)
        changes["updated_at"] = max(now, previous + _TICK)

        updated = await self.repository.update(shipment.id, **changes)
        logger.info("Shipment update attempted: %s", identifier)
        return updated

    async def delete(self, identifier: str) -> ShipmentRecord | None:
        """Hard-delete the resolved shipment and return its last state."""
        shipment = await self.resolver.resolve(identifier)
        if shipment is None:
            logger.warning("Shipment not found for deletion: %s", identifier)
            return None

        deleted = await self.repository.delete(shipment.id)
        logger.info("Shipment deletion attempted: %s", identifier)
        if not deleted:
            logger.warning("Shipment already gone: %s", identifier)
            return None
        return shipment
