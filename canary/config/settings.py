# canary/config/settings.py

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FILE = "activity.log"
DEFAULT_WRAPPER_NAME = "lc"


class CanarySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CANARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "little-canary"
    wrapper_name: str = Field(DEFAULT_WRAPPER_NAME, min_length=1)

    # --- Audit sink ---
    log_file: str = Field(DEFAULT_LOG_FILE, min_length=1)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


@lru_cache
def get_settings() -> CanarySettings:
    return CanarySettings()
