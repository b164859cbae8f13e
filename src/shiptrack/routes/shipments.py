"""Shipment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shiptrack.dependencies import get_store
from shiptrack.schemas import (
    CreateShipmentRequest,
    DeletedShipment,
    DeleteShipmentResponse,
    ShipmentResponse,
    UpdateShipmentRequest,
    UpdateShipmentResponse,
)
from shiptrack.store import ShipmentStore

NOT_FOUND_MESSAGE = "No shipment found - operation completed"

router = APIRouter(prefix="/shipments", tags=["shipments"])


@router.get("/health")
async def shipments_health() -> dict[str, str]:
    """Healthcheck endpoint for shipment routes."""
    return {"status": "ok"}


@router.post(
    "",
    response_model=ShipmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_shipment(
    body: CreateShipmentRequest,
    store: ShipmentStore = Depends(get_store),
) -> ShipmentResponse:
    """Validate and persist a new shipment."""
    shipment = await store.create(body.to_fields())
    return ShipmentResponse.from_shipment(shipment)


@router.get("", response_model=list[ShipmentResponse])
async def list_shipments(
    store: ShipmentStore = Depends(get_store),
) -> list[ShipmentResponse]:
    """All shipments, newest first."""
    shipments = await store.list_all()
    return [ShipmentResponse.from_shipment(s) for s in shipments]


@router.get("/recent", response_model=list[ShipmentResponse])
async def recent_shipments(
    limit: str | None = None,
    store: ShipmentStore = Depends(get_store),
) -> list[ShipmentResponse]:
    """Newest shipments; unparseable or non-positive limits use the default."""
    shipments = await store.list_recent(limit)
    return [ShipmentResponse.from_shipment(s) for s in shipments]


@router.get("/find/{identifier}", response_model=ShipmentResponse)
async def find_shipment(
    identifier: str,
    store: ShipmentStore = Depends(get_store),
) -> ShipmentResponse:
    """Find a shipment by internal id or tracking number."""
    shipment = await store.find(identifier)
    return ShipmentResponse.from_shipment(shipment)


@router.patch("/{identifier}", response_model=UpdateShipmentResponse)
async def update_shipment(
    identifier: str,
    body: UpdateShipmentRequest,
    store: ShipmentStore = Depends(get_store),
) -> UpdateShipmentResponse:
    """Partially update a shipment.

    An unknown identifier is answered with 200 and ``success: true``.
    """
    fields = body.to_fields()
    shipment = await store.update(identifier, fields)
    if shipment is None:
        return UpdateShipmentResponse(success=True, message=NOT_FOUND_MESSAGE)
    return UpdateShipmentResponse(
        success=True,
        message="Update operation completed",
        shipment=ShipmentResponse.from_shipment(shipment),
    )


@router.delete(
    "/{identifier}",
    response_model=DeleteShipmentResponse,
    response_model_exclude_none=True,
)
async def delete_shipment(
    identifier: str,
    store: ShipmentStore = Depends(get_store),
) -> DeleteShipmentResponse:
    """Hard-delete a shipment; an unknown identifier is a completed no-op."""
    shipment = await store.delete(identifier)
    if shipment is None:
        return DeleteShipmentResponse(success=True, message=NOT_FOUND_MESSAGE)
    return DeleteShipmentResponse(
        success=True,
        message="Delete operation completed",
        deleted_shipment=DeletedShipment(
            tracking_number=shipment.tracking_number,
            id=str(shipment.id),
        ),
    )
