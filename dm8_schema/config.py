"""Configuration management for dm8-schema."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.dm8-schema/.env
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".dm8-schema" / ".env"
    if user_env.exists():
        return str(user_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from DM8_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DM8_",
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Connection
    host: str = Field(default="localhost", description="DM8 server host")
    port: int = Field(default=5236, description="DM8 server port")
    user: Optional[str] = Field(default=None, description="DM8 login user")
    password: Optional[str] = Field(default=None, description="DM8 login password")

    # Schema owner resolution: schema wins over database
    schema_name: Optional[str] = Field(
        default=None,
        alias="DM8_SCHEMA",
        description="Schema (owner) to introspect",
    )
    database: Optional[str] = Field(
        default=None,
        description="Database name, used as the owner when no schema is set",
    )

    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    @property
    def schema_owner(self) -> Optional[str]:
        return self.schema_name or self.database


# Global settings instance
settings = Settings()
