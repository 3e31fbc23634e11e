"""Application configuration using Pydantic Settings"""

import logging
from datetime import timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

SERVICE_NAME = "discord-games-bridge"

DEFAULT_CORS_ORIGINS = "https://vigh24.github.io,http://localhost:8000"


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        # Relative to the working directory
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Discord
    discord_token: str = Field(..., description="Discord bot token")
    discord_client_id: str = Field(default="", description="Discord application ID")
    discord_guild_id: int = Field(..., description="Guild used for member statistics")
    discord_channel_id: int = Field(..., description="Channel mirrored as the games list")

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")
    cors_allow_origins: str = Field(
        default=DEFAULT_CORS_ORIGINS, description="Comma-separated CORS origin allow-list"
    )

    # Refresh schedule
    history_limit: int = Field(default=100, ge=1, description="Messages fetched per refresh")
    games_refresh_minutes: float = Field(default=5, gt=0, description="Games refresh period")
    stats_refresh_seconds: float = Field(default=60, gt=0, description="Stats refresh period")

    display_timezone: str = Field(default="UTC", description="Timezone used for postedAt")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(f"Invalid log level '{v}', defaulting to INFO")
            return "INFO"
        return v_upper

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        if v.upper() == "UTC":
            return "UTC"
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone '{v}', defaulting to UTC")
            return "UTC"
        return v

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS allowed origins"""
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    @property
    def display_tz(self) -> tzinfo:
        if self.display_timezone == "UTC":
            return timezone.utc
        return ZoneInfo(self.display_timezone)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()  # type: ignore[call-arg]
