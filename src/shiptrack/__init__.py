"""Shipment tracking record service."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "IdentifierResolver",
    "ShipmentNotFoundError",
    "ShipmentStore",
    "ShipmentValidationError",
    "ShiptrackConfig",
    "__version__",
    "create_app",
    "create_shiptrack_router",
    "register_exception_handlers",
]

if TYPE_CHECKING:
    from shiptrack.app import create_app
    from shiptrack.config import ShiptrackConfig
    from shiptrack.exceptions import (
        ShipmentNotFoundError,
        ShipmentValidationError,
        register_exception_handlers,
    )
    from shiptrack.resolver import IdentifierResolver
    from shiptrack.router import create_shiptrack_router
    from shiptrack.store import ShipmentStore


def __getattr__(name: str):
    # Lazy imports to avoid loading all submodules on package import.
    if name == "ShiptrackConfig":
        from shiptrack.config import ShiptrackConfig

        return ShiptrackConfig
    if name == "create_app":
        from shiptrack.app import create_app

        return create_app
    if name == "create_shiptrack_router":
        from shiptrack.router import create_shiptrack_router

        return create_shiptrack_router
    if name == "ShipmentStore":
        from shiptrack.store import ShipmentStore

        return ShipmentStore
    if name == "IdentifierResolver":
        from shiptrack.resolver import IdentifierResolver

        return IdentifierResolver
    if name in (
        "ShipmentNotFoundError",
        "ShipmentValidationError",
        "register_exception_handlers",
    ):
        from shiptrack import exceptions

        return getattr(exceptions, name)
    raise AttributeError(f"module 'shiptrack' has no attribute {name!r}")
