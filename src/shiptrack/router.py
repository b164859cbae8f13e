"""Router factory for shiptrack."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from shiptrack.config import ShiptrackConfig
from shiptrack.protocols import ShipmentRepository, UserRepository
from shiptrack.routes.auth import router as auth_router
from shiptrack.routes.shipments import router as shipments_router


def create_shiptrack_router(
    *,
    config: ShiptrackConfig,
    shipments: ShipmentRepository,
    users: UserRepository,
) -> APIRouter:
    """Create a configured API router.

    Exception handlers are not installed here; call
    ``register_exception_handlers`` on the application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        app.state.shiptrack_config = config
        app.state.shiptrack_shipments = shipments
        app.state.shiptrack_users = users
        yield

    router = APIRouter(lifespan=lifespan)
    router.include_router(shipments_router)
    router.include_router(auth_router)
    return router
