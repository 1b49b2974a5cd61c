"""Environment-driven settings (SCAFFOLDR_* variables)."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_BOOT_VERSION,
    DEFAULT_JAVA_VERSION,
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
    SUPPORTED_DSLS,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCAFFOLDR_", extra="ignore")

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False
    template_dir: Optional[str] = None
    default_java_version: int = DEFAULT_JAVA_VERSION
    default_boot_version: str = DEFAULT_BOOT_VERSION
    default_dsl: str = "kotlin"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("default_dsl")
    @classmethod
    def validate_default_dsl(cls, v: str) -> str:
        v = v.lower()
        if v not in SUPPORTED_DSLS:
            raise ValueError(f"default_dsl must be one of {', '.join(SUPPORTED_DSLS)}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
