from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path.cwd()


class Settings(BaseSettings):
    """Adapter settings with validation.

    Values are read from ``CONTENT_ADAPTERS_*`` environment variables or a
    ``.env`` file in the working directory. Every field has a default, so an
    empty environment yields a usable configuration.
    """

    # Template lookup directories
    themes_dir: Path = Field(
        default=BASE_DIR / "content" / "themes",
        description="Root directory holding one folder per theme",
    )
    extensions_dir: Path = Field(
        default=BASE_DIR / "extensions",
        description="Root directory holding one folder per extension",
    )
    views_dir: Path | None = Field(
        default=None,
        description="Application default views directory, checked last",
    )

    # HTML defaults
    default_themename: str = Field(default="periodicjs.theme.default", min_length=1)
    default_fileext: str = Field(default=".html", min_length=1, description="Template file extension")
    error_viewname: str = Field(default="home/error404", min_length=1)

    # XML defaults
    xml_root: str | None = Field(default=None, description="Root tag used when an adapter sets none")

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="CONTENT_ADAPTERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("default_fileext", mode="after")
    @classmethod
    def validate_default_fileext(cls, v: str) -> str:
        """Ensure the extension starts with a dot."""
        v = v.strip()
        return v if v.startswith(".") else f".{v}"

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v


# Singleton settings instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached Settings instance so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None
