"""Message catalog service configuration settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")


class I18nSettings(BaseSettings):
    """Message catalog configuration settings."""

    LOCALES_DIR: Optional[str] = Field(default=None, alias="I18N_LOCALES_DIR")
    ERROR_POLICY: Literal["exit", "raise"] = Field(
        default="exit", alias="I18N_ERROR_POLICY"
    )
    DEFAULT_LOCALE: str = Field(default="zh-CN", alias="I18N_DEFAULT_LOCALE")
    SUPPORTED_LOCALES: list[str] = Field(
        default=["zh-CN", "en-US"], alias="I18N_SUPPORTED_LOCALES"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Message catalog service configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


# Create the settings instance
settings = get_settings()
