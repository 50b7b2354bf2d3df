from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment and .env."""

    BOT_TOKEN: str = ""
    TAX_RATE: Decimal = Decimal("0.18")
    TARIFF_DATA_PATH: str | None = None
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("TAX_RATE")
    @classmethod
    def _check_tax_rate(cls, v: Decimal) -> Decimal:
        if v < 0 or v > 1:
            raise ValueError("TAX_RATE must be within 0..1")
        return v


def load_settings() -> Settings:
    return Settings()


settings = load_settings()

__all__ = ["Settings", "settings", "load_settings"]
