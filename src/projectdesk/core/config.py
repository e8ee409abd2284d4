from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Project Desk"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Uploads
    upload_dir: Path = Path("uploads/projects")
    upload_max_file_size: int = 10 * 1024 * 1024
    upload_max_files: int = 5
    file_delete_timeout_seconds: float = 5.0

    # Migrations
    run_migrations_on_startup: bool = True

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Reject wildcards, credentials are allowed on CORS requests."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("upload_max_file_size", "upload_max_files")
    @classmethod
    def validate_positive_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Upload limits must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
