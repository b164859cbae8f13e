"""Shared fixtures for shiptrack tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import jwt
import pytest
from fastapi.testclient import TestClient

from shiptrack.app import create_app
from shiptrack.config import ShiptrackConfig

MEMORY_URL = "sqlite+aiosqlite://"


def decode_token(token: str, secret: str) -> dict:
    return jwt.decode(token, secret, algorithms=["HS256"])


def future_date(days: int = 7) -> datetime:
    return datetime.now(tz=UTC) + timedelta(days=days)


def shipment_fields(**overrides) -> dict:
    """Valid snake_case fields for ShipmentStore.create."""
    fields = {
        "tracking_number": "ABC12345",
        "origin": "Warsaw",
        "destination": "Berlin",
        "weight": 5.5,
        "dimensions": "20x30x15cm",
        "expected_delivery_date": future_date(),
        "carrier": "DHL",
        "sender_name": "Jan Kowalski",
        "sender_contact": "+123-456-7890",
        "receiver_name": "Anna Schmidt",
        "receiver_contact": "(555) 123-4567",
    }
    fields.update(overrides)
    return fields


def shipment_payload(**overrides) -> dict:
    """Valid camelCase JSON body for POST /api/shipments."""
    payload = {
        "trackingNumber": "ABC12345",
        "origin": "Warsaw",
        "destination": "Berlin",
        "weight": 5.5,
        "dimensions": "20x30x15cm",
        "expectedDeliveryDate": future_date().isoformat(),
        "carrier": "DHL",
        "senderName": "Jan Kowalski",
        "senderContact": "+123-456-7890",
        "receiverName": "Anna Schmidt",
        "receiverContact": "(555) 123-4567",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def config() -> ShiptrackConfig:
    return ShiptrackConfig(
        database_url=MEMORY_URL,
        jwt_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture()
async def database():
    """Connected in-memory database."""
    from shiptrack.contrib.sqlalchemy.database import Database

    db = Database(MEMORY_URL)
    await db.connect()
    yield db
    await db.close()


@pytest.fixture()
def shipment_repository(database):
    from shiptrack.contrib.sqlalchemy.repository import (
        SQLAlchemyShipmentRepository,
    )

    return SQLAlchemyShipmentRepository(database.session_factory)


@pytest.fixture()
def user_repository(database):
    from shiptrack.contrib.sqlalchemy.repository import (
        SQLAlchemyUserRepository,
    )

    return SQLAlchemyUserRepository(database.session_factory)


@pytest.fixture()
def client(config) -> Iterator[TestClient]:
    """HTTP client for a fully wired app on a fresh in-memory database."""
    with TestClient(create_app(config)) as test_client:
        yield test_client
