"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen after
initialization; the media roots that may change at runtime are handed to
the ConfigRegistry as startup overrides.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import ChunkSize, MaxQueueSize, NonEmptyStr, PortNumber

DEFAULT_VIDEOS_PATH = "media/videos"
DEFAULT_SOUNDS_PATH = "media/sounds"


class ServerSettings(BaseModel):
    """HTTP listener configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    host: NonEmptyStr = "0.0.0.0"
    port: PortNumber = 3001
    cors_origins: tuple[str, ...] = Field(
        default=("*",), validation_alias=AliasChoices("cors_origins", "cors")
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
        """Accept a comma-separated string or a JSON array."""
        if isinstance(v, str):
            v = [origin.strip() for origin in v.split(",") if origin.strip()]
        return tuple(v)


class MediaSettings(BaseModel):
    """Media root defaults and streaming behaviour."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_videos_path: NonEmptyStr = Field(
        default=DEFAULT_VIDEOS_PATH,
        validation_alias=AliasChoices("default_videos_path", "videos_default"),
    )
    default_sounds_path: NonEmptyStr = Field(
        default=DEFAULT_SOUNDS_PATH,
        validation_alias=AliasChoices("default_sounds_path", "sounds_default"),
    )
    stream_chunk_size: ChunkSize = Field(
        default=256 * 1024,
        validation_alias=AliasChoices("stream_chunk_size", "chunk_size"),
    )


class QueueSettings(BaseModel):
    """Shared queue configuration."""

    model_config = ConfigDict(frozen=True)

    max_size: MaxQueueSize = 200


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - VIDEOS_PATH, SOUNDS_PATH (startup overrides for the media roots)
    - SERVER__HOST, SERVER__PORT, SERVER__CORS_ORIGINS (nested with prefix)
    - MEDIA__STREAM_CHUNK_SIZE, QUEUE__MAX_SIZE, etc.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    videos_path: str | None = None
    sounds_path: str | None = None

    server: ServerSettings = Field(default_factory=ServerSettings)
    media: MediaSettings = Field(default_factory=MediaSettings)
    queue: QueueSettings = Field(default_factory=QueueSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels))
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
