"""Shipment enumerations."""

from enum import StrEnum


class ShipmentType(StrEnum):
    STANDARD = "Standard"
    EXPRESS = "Express"
    ECONOMY = "Economy"
    OVERNIGHT = "Overnight"
    INTERNATIONAL = "International"


class ShipmentStatus(StrEnum):
    PENDING = "Pending"
    IN_TRANSIT = "In Transit"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    RETURNED = "Returned"
