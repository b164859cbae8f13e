"""Pydantic request/response schemas.

JSON bodies use camelCase keys; Python attributes stay snake_case.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shiptrack.validation import as_utc


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateShipmentRequest(CamelModel):
    """Partial update body.

    Values are accepted as sent; the shipment store type-checks and
    validates them so every violation is reported together.  Keys outside
    this model (``trackingNumber``, ``id``, ...) are dropped silently.
    """

    origin: Any = None
    destination: Any = None
    weight: Any = None
    dimensions: Any = None
    expected_delivery_date: Any = None
    shipment_type: Any = None
    carrier: Any = None
    is_fragile: Any = None
    is_urgent: Any = None
    sender_name: Any = None
    sender_contact: Any = None
    receiver_name: Any = None
    receiver_contact: Any = None
    notes: Any = None
    status: Any = None

    def to_fields(self) -> dict[str, Any]:
        """Fields explicitly sent by the client."""
        return self.model_dump(exclude_unset=True)


class CreateShipmentRequest(UpdateShipmentRequest):
    """Create body; required-field checks happen in the shipment store."""

    tracking_number: Any = None


class ShipmentResponse(CamelModel):
    id: str
    tracking_number: str
    origin: str
    destination: str
    weight: float
    dimensions: str
    expected_delivery_date: datetime
    formatted_delivery_date: str
    shipment_type: str
    carrier: str
    is_fragile: bool
    is_urgent: bool
    sender_name: str
    sender_contact: str
    receiver_name: str
    receiver_contact: str
    notes: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_shipment(cls, shipment: Any) -> ShipmentResponse:
        delivery = as_utc(shipment.expected_delivery_date)
        formatted = f"{delivery:%B} {delivery.day}, {delivery.year}"
        return cls(
            id=str(shipment.id),
            tracking_number=shipment.tracking_number,
            origin=shipment.origin,
            destination=shipment.destination,
            weight=shipment.weight,
            dimensions=shipment.dimensions,
            expected_delivery_date=delivery,
            formatted_delivery_date=formatted,
            shipment_type=str(shipment.shipment_type),
            carrier=shipment.carrier,
            is_fragile=shipment.is_fragile,
            is_urgent=shipment.is_urgent,
            sender_name=shipment.sender_name,
            sender_contact=shipment.sender_contact,
            receiver_name=shipment.receiver_name,
            receiver_contact=shipment.receiver_contact,
            notes=shipment.notes,
            status=str(shipment.status),
            created_at=as_utc(shipment.created_at),
            updated_at=as_utc(shipment.updated_at),
        )


class UpdateShipmentResponse(CamelModel):
    success: bool
    message: str
    shipment: ShipmentResponse | None = None


class DeletedShipment(CamelModel):
    tracking_number: str
    id: str


class DeleteShipmentResponse(CamelModel):
    success: bool
    message: str
    deleted_shipment: DeletedShipment | None = None


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    message: str
    token: str
