# ABOUTME: Shared settings base for notifier channels
# ABOUTME: Holds host identity and log output settings with lenient value parsing

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_ALIASES = {"dev": "development", "develop": "development", "stage": "staging", "prod": "production"}
_FORMAT_ALIASES = {"structured": "json", "text": "txt"}


class BaseNotifierSettings(BaseSettings):
    """Settings every channel inherits.

    Read from the process environment or a ``.env`` file. Channel settings
    subclass this so a host ends up with one settings object whose log fields
    also drive ``setup_logging``.
    """

    APP_NAME: str = Field(default="notifier", description="Name bound to log records emitted without one")
    ENV: Literal["development", "staging", "production"] = Field(default="development")
    DEBUG: bool = Field(default=False, description="Include variable values in logged tracebacks")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    LOG_FORMAT: Literal["json", "txt"] = Field(default="txt", description="json writes one object per line")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", "LOG_FORMAT", mode="before")
    @classmethod
    def resolve_alias(cls, v, info):
        if not isinstance(v, str):
            return v
        aliases = _ENV_ALIASES if info.field_name == "ENV" else _FORMAT_ALIASES
        v = v.strip().lower()
        return aliases.get(v, v)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v
