"""Shiptrack exceptions and their HTTP mapping."""

from __future__ import annotations

import logging
from typing import NamedTuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class FieldError(NamedTuple):
    field: str
    message: str


class ShiptrackError(Exception):
    """Base class for all shiptrack errors."""


class ShipmentValidationError(ShiptrackError):
    """One or more shipment field rules were violated."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(error.message for error in self.errors))


class ConflictError(ShiptrackError):
    """A storage-level uniqueness constraint was violated."""


class ShipmentNotFoundError(ShiptrackError):
    """Identifier resolves to no shipment."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Shipment {identifier} not found")


class AccountError(ShiptrackError):
    """Registration or login rejected."""


class DuplicateAccountError(AccountError):
    """Username or email is already taken."""


class InvalidCredentialsError(AccountError):
    """Username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def register_exception_handlers(app: FastAPI) -> None:
    """Register shiptrack exception handlers on a FastAPI app.

    Handler order (most specific first):
    1. ShipmentValidationError → 400
    2. RequestValidationError → 400
    3. ConflictError → 409
    4. ShipmentNotFoundError → 404
    5. DuplicateAccountError / InvalidCredentialsError → 400
    6. SQLAlchemyError → 500 (generic message)
    7. Exception → 500 (catch-all)
    """

    @app.exception_handler(ShipmentValidationError)
    async def _invalid_shipment(
        request: Request,
        exc: ShipmentValidationError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "detail": "Invalid shipment data",
                "code": "validation_error",
                "errors": [
                    {"field": to_camel(error.field), "message": error.message}
                    for error in exc.errors
                ],
            },
        )

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "detail": "Invalid request data",
                "code": "validation_error",
                "errors": [
                    {"field": _field_name(err["loc"]), "message": err["msg"]}
                    for err in exc.errors()
                ],
            },
        )

    @app.exception_handler(ConflictError)
    async def _conflict(
        request: Request,
        exc: ConflictError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "detail": str(exc),
                "code": "conflict",
            },
        )

    @app.exception_handler(ShipmentNotFoundError)
    async def _not_found(
        request: Request,
        exc: ShipmentNotFoundError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "detail": "Shipment not found",
                "code": "not_found",
            },
        )

    @app.exception_handler(DuplicateAccountError)
    async def _duplicate_account(
        request: Request,
        exc: DuplicateAccountError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "detail": str(exc),
                "code": "duplicate_account",
            },
        )

    @app.exception_handler(InvalidCredentialsError)
    async def _invalid_credentials(
        request: Request,
        exc: InvalidCredentialsError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "detail": str(exc),
                "code": "invalid_credentials",
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def _storage_error(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        logger.error(
            "Storage error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Storage error",
                "code": "storage_error",
            },
        )

    @app.exception_handler(Exception)
    async def _unhandled(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Something went wrong!",
                "code": "internal_error",
            },
        )
