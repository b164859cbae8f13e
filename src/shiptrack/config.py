"""Runtime configuration for shiptrack."""

from datetime import timedelta

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShiptrackConfig(BaseSettings):
    """Environment-driven service config."""

    model_config = SettingsConfigDict(
        env_prefix="SHIPTRACK_",
        env_file=".env",
        extra="ignore",
    )

    database_url: str
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    token_expires: timedelta = timedelta(days=1)
    bcrypt_rounds: int = 12
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    recent_limit: int = 5
    host: str = "0.0.0.0"
    port: int = 5001
    log_level: str = "INFO"
