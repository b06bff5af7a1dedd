"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    photos_table: str = "photos"
    accounts_table: str = "accounts"
    upload_dir: str = "uploads"
    max_upload_files: int = 2
    bcrypt_rounds: int = 10
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3001
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("max_upload_files")
    @classmethod
    def _check_upload_cap(cls, value: int) -> int:
        if value <= 0 or value % 2:
            raise ValueError("max_upload_files must be a positive even number")
        return value

    @field_validator("bcrypt_rounds")
    @classmethod
    def _check_rounds(cls, value: int) -> int:
        if not 4 <= value <= 31:  # noqa: PLR2004
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return value
