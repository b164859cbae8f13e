"""SQLAlchemy shipment/user models."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Float, Index, String, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


def new_object_id() -> str:
    """24-character hex identifier."""
    return secrets.token_hex(12)


class UTCDateTime(TypeDecorator):
    """Store UTC, always hand back aware datetimes."""

    impl = DateTime
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(timezone=True)

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""


class ShipmentModel(Base):
    """Shipment record."""

    __tablename__ = "shiptrack_shipments"
    __table_args__ = (
        Index("ix_shiptrack_shipments_carrier_status", "carrier", "status"),
    )

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id
    )
    tracking_number: Mapped[str] = mapped_column(String(20), unique=True)
    origin: Mapped[str] = mapped_column(String(255))
    destination: Mapped[str] = mapped_column(String(255))
    weight: Mapped[float] = mapped_column(Float)
    dimensions: Mapped[str] = mapped_column(String(64))
    expected_delivery_date: Mapped[datetime] = mapped_column(
        UTCDateTime, index=True
    )
    shipment_type: Mapped[str] = mapped_column(String(32), default="Standard")
    carrier: Mapped[str] = mapped_column(String(128))
    is_fragile: Mapped[bool] = mapped_column(Boolean, default=False)
    is_urgent: Mapped[bool] = mapped_column(Boolean, default=False)
    sender_name: Mapped[str] = mapped_column(String(255))
    sender_contact: Mapped[str] = mapped_column(String(32))
    receiver_name: Mapped[str] = mapped_column(String(255))
    receiver_contact: Mapped[str] = mapped_column(String(32))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), default="Pending", index=True
    )
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, index=True)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime)


class UserModel(Base):
    """Account credentials; ``password_hash`` is a salted bcrypt hash."""

    __tablename__ = "shiptrack_users"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id
    )
    username: Mapped[str] = mapped_column(String(128), unique=True)
    email: Mapped[str] = mapped_column(String(255), unique=True)
    password_hash: Mapped[str] = mapped_column(String(128))
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=lambda: datetime.now(tz=UTC)
    )
