"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_base_url: str | None = None
    catalog_dir: str = "data"
    state_backend: Literal["file", "supabase"] = "file"
    state_dir: str = ".bar_state"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    allow_substitutions: bool = True
    page_size: int = 6
    image_base_url: str = "/images"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
