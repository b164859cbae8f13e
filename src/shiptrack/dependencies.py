"""Dependency providers for request handlers."""

from __future__ import annotations

from fastapi import Request

from shiptrack.auth import AccountService
from shiptrack.config import ShiptrackConfig
from shiptrack.protocols import ShipmentRepository, UserRepository
from shiptrack.store import ShipmentStore


def get_config(request: Request) -> ShiptrackConfig:
    """Read config from FastAPI app state."""
    return request.app.state.shiptrack_config


def get_shipment_repository(request: Request) -> ShipmentRepository:
    """Read shipment repository from FastAPI app state."""
    return request.app.state.shiptrack_shipments


def get_user_repository(request: Request) -> UserRepository:
    """Read user repository from FastAPI app state."""
    return request.app.state.shiptrack_users


def get_store(request: Request) -> ShipmentStore:
    """Create ShipmentStore for the current request."""
    config = get_config(request)
    return ShipmentStore(
        get_shipment_repository(request),
        recent_limit=config.recent_limit,
    )


def get_accounts(request: Request) -> AccountService:
    """Create AccountService for the current request."""
    return AccountService(get_user_repository(request), get_config(request))
