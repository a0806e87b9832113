from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ServerConfig",
]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class ServerConfig(BaseModel):
    """Listener settings handed to `serve()` at startup."""

    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build a config from HOST, PORT and LOG_LEVEL, falling back to defaults."""
        raw_port = os.getenv("PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port, 10)
        except ValueError as e:
            raise ValueError("PORT must be an integer") from e
        try:
            return cls(
                host=os.getenv("HOST", DEFAULT_HOST),
                port=port,
                log_level=os.getenv("LOG_LEVEL", "INFO"),
            )
        except ValidationError as e:
            raise ValueError(f"invalid server configuration: {e}") from e
