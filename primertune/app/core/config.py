# File: primertune/app/core/config.py
# Version: v0.4.0
"""
Centralized application settings using Pydantic Settings.

Controls:
- App metadata and API prefix
- CORS origins
- Database URL (SQLAlchemy) for stored workspaces
- Log level for the API process
- Primer parameter files (defaults + editable current)
"""
from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


class Settings(BaseSettings):
    # --- App ---
    API_PREFIX: str = "/api"
    APP_NAME: str = "PrimerTune"
    APP_VERSION: str = "0.4.0"

    # --- CORS ---
    CORS_ORIGINS: str = "*"  # comma-separated or '*' for all

    # --- Primer parameters ---
    PRIMER_PARAMS_DEFAULT_PATH: Path = _CONFIG_DIR / "primers_param_default.json"
    PRIMER_PARAMS_PATH: Path = _CONFIG_DIR / "primers_param.json"

    # --- DB ---
    DB_URL: str = "sqlite:///primertune/app/data/primertune.db"
    SCHEMA_AUTOHEAL: bool = True

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.CORS_ORIGINS.strip()
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]

settings = Settings()
