"""Dual-identifier shipment lookup."""

from __future__ import annotations

import re

from shiptrack.protocols import ShipmentRecord, ShipmentRepository

INTERNAL_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def is_internal_id(identifier: str) -> bool:
    """Whether ``identifier`` is shaped like an internal shipment id."""
    return INTERNAL_ID_RE.fullmatch(identifier) is not None


class IdentifierResolver:
    """Resolve a handle that is either an internal id or a tracking number.

    Id lookup is attempted first and wins when both would match; the
    tracking number lookup runs whenever the id lookup is skipped or misses.
    """

    def __init__(self, repository: ShipmentRepository) -> None:
        self.repository = repository

    async def resolve(self, identifier: str) -> ShipmentRecord | None:
        if is_internal_id(identifier):
            shipment = await self.repository.get_by_id(identifier.lower())
            if shipment is not None:
                return shipment
        return await self.repository.get_by_tracking_number(identifier)
