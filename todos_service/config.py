"""
Configuración del servicio de todos
Lee variables de entorno (y un .env local si existe)
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p for p in raw.replace(",", " ").split() if p]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"
    cors_origins: tuple = ("*",)
    log_level: str = "INFO"
    debug: bool = False
    env: str = "development"

    @staticmethod
    def from_env() -> "Settings":
        prefix = os.getenv("API_PREFIX", "/api").strip("/")
        if prefix:
            prefix = "/" + prefix
        return Settings(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
            api_prefix=prefix,
            cors_origins=tuple(_env_list("CORS_ORIGINS", ["*"])),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            debug=_env_bool("FLASK_DEBUG", False),
            env=os.getenv("APP_ENV", "development"),
        )
