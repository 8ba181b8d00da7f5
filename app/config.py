"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone name or UTC offset used for timestamps",
    )
    default_page_width: float = Field(
        default=210,
        description="Width assigned to newly added pages",
        gt=0,
    )
    default_page_height: float = Field(
        default=297,
        description="Height assigned to newly added pages",
        gt=0,
    )
    default_font: str = Field(
        default="helvetica",
        description="Font used by text elements that do not define one",
        min_length=1,
    )
    default_font_size: float = Field(
        default=12,
        description="Font size used by text elements that do not define one",
        gt=0,
    )
    date_format: str = Field(
        default="%d.%m.%Y",
        description="strftime pattern used by date elements",
        min_length=1,
    )
    pdf_filename: str = Field(
        default="certificate.pdf",
        description="File name suggested to clients downloading a rendered document",
        min_length=1,
    )
    element_plugins: dict[str, str] = Field(
        default_factory=dict,
        description="Extra element types mapped to 'module:ClassName' import paths",
    )

    @field_validator("element_plugins")
    @classmethod
    def _validate_plugin_paths(cls, value: dict[str, str]) -> dict[str, str]:
        for tag, path in value.items():
            if not tag.strip():
                raise ValueError("ELEMENT_PLUGINS keys must be non-empty type tags")
            if ":" not in path:
                raise ValueError(
                    f"ELEMENT_PLUGINS entry for '{tag}' must use the 'module:ClassName' form"
                )
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
