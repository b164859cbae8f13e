"""Application factory wiring storage, routes and middleware."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from shiptrack.config import ShiptrackConfig
from shiptrack.contrib.sqlalchemy.database import Database
from shiptrack.contrib.sqlalchemy.repository import (
    SQLAlchemyShipmentRepository,
    SQLAlchemyUserRepository,
)
from shiptrack.exceptions import register_exception_handlers
from shiptrack.router import create_shiptrack_router

logger = logging.getLogger(__name__)


def create_app(
    config: ShiptrackConfig, *, database: Database | None = None
) -> FastAPI:
    """Build the shiptrack FastAPI application.

    The storage connection is opened on startup and closed on shutdown; a
    failed initial connection aborts startup.
    """
    database = database or Database(config.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        try:
            await database.connect()
        except (SQLAlchemyError, OSError):
            logger.exception("Storage connection error")
            await database.close()
            raise
        yield
        logger.info("Shutting down server...")
        await database.close()

    app = FastAPI(title="shiptrack", lifespan=lifespan)
    app.state.shiptrack_database = database
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        return "Cargo Management System backend"

    app.include_router(
        create_shiptrack_router(
            config=config,
            shipments=SQLAlchemyShipmentRepository(database.session_factory),
            users=SQLAlchemyUserRepository(database.session_factory),
        ),
        prefix="/api",
    )
    return app
