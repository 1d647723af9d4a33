"""
Configuration — loads logging settings from environment variables.
All values have safe defaults for local dev. Every variable is prefixed
with LOGWRAP_ (e.g. LOGWRAP_LOG_FORMAT=json).
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOGWRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Output ────────────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    colorize: bool = True          # console format only

    # ── App ───────────────────────────────────────────────────────────────────
    logger_name: str = "logwrap"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
