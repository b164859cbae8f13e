"""Account endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from shiptrack.auth import AccountService
from shiptrack.dependencies import get_accounts
from shiptrack.schemas import LoginRequest, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.get("/register", response_class=PlainTextResponse)
async def register_check() -> str:
    return "Register endpoint is working"


@router.get("/signup", response_class=PlainTextResponse)
async def signup_check() -> str:
    return "Signup endpoint is working"


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    accounts: AccountService = Depends(get_accounts),
) -> TokenResponse:
    """Create an account and return a signed token."""
    logger.info(
        "Registration attempt received: username=%s email=%s",
        body.username,
        body.email,
    )
    token = await accounts.register(body.username, body.email, body.password)
    return TokenResponse(message="User registered successfully", token=token)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    accounts: AccountService = Depends(get_accounts),
) -> TokenResponse:
    """Check credentials and return a signed token."""
    logger.info("Login attempt received: username=%s", body.username)
    token = await accounts.login(body.username, body.password)
    return TokenResponse(message="Login successful", token=token)
