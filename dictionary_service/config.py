# dictionary_service/config.py
from __future__ import annotations

import os

from pydantic_settings import BaseSettings, SettingsConfigDict


def _as_bool(v: str | None, default: bool = False) -> bool:
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseSettings):
    # Service
    service_name: str = os.getenv("SERVICE_NAME", "dictionary-service")
    app_port: int = int(os.getenv("APP_PORT", "8085"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Mongo
    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    mongo_db: str = os.getenv("MONGO_DB", "dictionary")

    # Seeding
    seed_on_start: bool = _as_bool(os.getenv("SEED_ON_START"), default=True)
    seed_application: str = os.getenv("SEED_APPLICATION", "dictionary")
    # Opt-in: options whose parent cannot be resolved are stored as root-level
    seed_allow_root_fallback: bool = _as_bool(os.getenv("SEED_ALLOW_ROOT_FALLBACK"), default=False)
    seed_actor: str = os.getenv("SEED_ACTOR", "system")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")


settings = Settings()
