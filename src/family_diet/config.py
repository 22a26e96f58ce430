"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_token: str
    renal_disease_codes: str = "ckd,kidney_disease,chronic_kidney_disease"
    renal_potassium_limit_mg: float = 200.0
    max_fruit_servings: int = Field(default=3, ge=1, le=3)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FAMILY_DIET_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_code_list(raw: str | None) -> frozenset[str]:
    """Parse a comma-separated list of disease codes from env."""
    if raw is None:
        return frozenset()
    codes: set[str] = set()
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value:
            codes.add(value)
    return frozenset(codes)
