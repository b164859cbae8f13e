"""Account registration, login and token issuance."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from shiptrack.config import ShiptrackConfig
from shiptrack.exceptions import (
    ConflictError,
    DuplicateAccountError,
    InvalidCredentialsError,
)
from shiptrack.protocols import UserRecord, UserRepository

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    """Salted bcrypt hash of ``password``."""
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)
    ).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(
        password.encode("utf-8"), password_hash.encode("utf-8")
    )


def create_access_token(
    user: UserRecord,
    *,
    secret: str,
    algorithm: str = "HS256",
    expires: timedelta = timedelta(days=1),
) -> str:
    now = datetime.now(tz=UTC)
    payload = {
        "userId": str(user.id),
        "username": user.username,
        "iat": now,
        "exp": now + expires,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


class AccountService:
    """Register accounts and authenticate them, issuing signed tokens."""

    def __init__(self, users: UserRepository, config: ShiptrackConfig) -> None:
        self.users = users
        self.config = config

    def _issue_token(self, user: UserRecord) -> str:
        return create_access_token(
            user,
            secret=self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
            expires=self.config.token_expires,
        )

    async def register(self, username: str, email: str, password: str) -> str:
        existing = await self.users.find_by_username_or_email(username, email)
        if existing is not None:
            if existing.username == username:
                raise DuplicateAccountError("Username already exists")
            raise DuplicateAccountError("Email already exists")

        password_hash = hash_password(password, self.config.bcrypt_rounds)
        try:
            user = await self.users.create(
                username=username, email=email, password_hash=password_hash
            )
        except ConflictError as e:
            raise DuplicateAccountError(str(e)) from e
        logger.info("User registered: %s", user.username)
        return self._issue_token(user)

    async def login(self, username: str, password: str) -> str:
        user = await self.users.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", username)
            raise InvalidCredentialsError
        logger.info("Login successful: %s", username)
        return self._issue_token(user)
