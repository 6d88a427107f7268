from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = f"sqlite+aiosqlite:///{Path.home() / 'reverie.db'}"


class Settings(BaseSettings):
    # App
    app_name: str = "Reverie"
    app_version: str = "0.1.0"
    debug: bool = False

    # Database: REVERIE_DB, REVERIE_DATABASE_URL or DATABASE_URL
    database_url: str = Field(
        default=DEFAULT_DATABASE_URL,
        validation_alias=AliasChoices(
            "REVERIE_DB", "REVERIE_DATABASE_URL", "DATABASE_URL", "database_url"
        ),
    )
    database_echo: bool = False

    # Administrative endpoints (user listing)
    admin_enabled: bool = False

    # CLI defaults
    default_author: str = "me"
    default_project: str = "default"
    default_page_size: int = 100

    @field_validator("database_url")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """
        Validate the database URL and accept the short ``sqlite:/path/db.sqlite`` form.

        The short form is rewritten to the async SQLAlchemy driver URL.
        """
        v = v.strip()
        if not v:
            raise ValueError("REVERIE_DB is required. Example: sqlite:/tmp/db.sqlite")
        if v.startswith("sqlite:") and not v.startswith("sqlite://"):
            return "sqlite+aiosqlite:///" + v.removeprefix("sqlite:")
        if v.startswith("sqlite://"):
            return "sqlite+aiosqlite://" + v.removeprefix("sqlite://")
        return v

    @field_validator("default_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("default_page_size must be positive")
        return v

    model_config = SettingsConfigDict(
        env_prefix="REVERIE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
