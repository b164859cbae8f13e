"""SQLAlchemy repository implementations."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shiptrack.contrib.sqlalchemy.models import (
    ShipmentModel,
    UserModel,
    new_object_id,
)
from shiptrack.exceptions import ConflictError


class SQLAlchemyShipmentRepository:
    """Shipment repository backed by SQLAlchemy async sessions.

    Tracking number uniqueness is enforced by the table's UNIQUE constraint,
    so concurrent creates cannot both succeed.
    """

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        self.session_factory = session_factory

    async def get_by_id(self, shipment_id: str) -> ShipmentModel | None:
        async with self.session_factory() as session:
            return await session.get(ShipmentModel, shipment_id)

    async def get_by_tracking_number(
        self, tracking_number: str
    ) -> ShipmentModel | None:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ShipmentModel).where(
                    ShipmentModel.tracking_number == tracking_number
                )
            )
            return result.scalar_one_or_none()

    async def list_all(
        self, limit: int | None = None
    ) -> list[ShipmentModel]:
        """List shipments newest first."""
        stmt = select(ShipmentModel).order_by(ShipmentModel.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def create(self, **fields: Any) -> ShipmentModel:
        shipment = ShipmentModel(
            id=fields.pop("id", None) or new_object_id(), **fields
        )
        async with self.session_factory() as session:
            session.add(shipment)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError("Tracking number already exists") from e
            await session.refresh(shipment)
        return shipment

    async def update(
        self, shipment_id: str, **fields: Any
    ) -> ShipmentModel | None:
        async with self.session_factory() as session:
            shipment = await session.get(ShipmentModel, shipment_id)
            if shipment is None:
                return None
            for key, value in fields.items():
                setattr(shipment, key, value)
            await session.commit()
            await session.refresh(shipment)
            return shipment

    async def delete(self, shipment_id: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(ShipmentModel).where(ShipmentModel.id == shipment_id)
            )
            await session.commit()
            return result.rowcount > 0


class SQLAlchemyUserRepository:
    """Credential store backed by SQLAlchemy async sessions."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        self.session_factory = session_factory

    async def get_by_username(self, username: str) -> UserModel | None:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.username == username)
            )
            return result.scalar_one_or_none()

    async def find_by_username_or_email(
        self, username: str, email: str
    ) -> UserModel | None:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel)
                .where(
                    or_(
                        UserModel.username == username,
                        UserModel.email == email,
                    )
                )
                .limit(1)
            )
            return result.scalar_one_or_none()

    async def create(
        self, *, username: str, email: str, password_hash: str
    ) -> UserModel:
        user = UserModel(
            id=new_object_id(),
            username=username,
            email=email,
            password_hash=password_hash,
        )
        async with self.session_factory() as session:
            session.add(user)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError("Username or email already exists") from e
            await session.refresh(user)
        return user
