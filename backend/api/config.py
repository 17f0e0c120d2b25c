"""Application settings via pydantic-settings."""

from __future__ import annotations

import json
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_cors_origins(raw: str) -> list[str]:
    """Parse a CORS origins string given as a JSON array or comma-separated list."""
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        parsed = None
    if isinstance(parsed, list):
        return [str(x) for x in parsed]

    stripped = raw.strip("[] ")
    return [s.strip().strip('"').strip("'") for s in stripped.split(",") if s.strip()]


class Settings(BaseSettings):
    """Distance conversion API configuration.

    Values are loaded from environment variables, falling back to a ``.env``
    file in the project root.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stored as a raw string; pydantic-settings would otherwise demand strict
    # JSON for list-typed fields.
    cors_origins_raw: str = '["http://localhost:3000"]'

    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    # Upper bound on the number of values in one batch conversion
    max_batch_size: int = 10_000

    debug: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins parsed from ``cors_origins_raw``."""
        return _parse_cors_origins(self.cors_origins_raw)
