"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    brandbento_env: str = "development"
    brandbento_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Shareable state
    url_soft_limit: int = 1800
    state_version: int = 1

    # History / recents
    history_limit: int = 50
    recent_fonts_limit: int = 10

    # Content store; data_dir unset keeps everything in memory
    storage_prefix: str = "bb:img:"
    data_dir: Path | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
