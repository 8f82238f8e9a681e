# config/settings.py
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

# 1) localizar .env (cwd primero, luego raíz del repo)
dotenv_path = find_dotenv(usecwd=True)
if not dotenv_path:
    repo_root_env = Path(__file__).resolve().parents[1] / ".env"
    if repo_root_env.exists():
        dotenv_path = str(repo_root_env)

# 2) cargar .env sin pisar variables ya definidas en el entorno
load_dotenv(dotenv_path=dotenv_path if dotenv_path else None, override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "si", "sí"}


APP_NAME = "Gym Rutinas API"
APP_VERSION = "1.0.0"

APP_ENV: str = os.getenv("APP_ENV", "development").strip().lower()
APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "America/Argentina/Buenos_Aires")
APP_LOCALE: str = os.getenv("APP_LOCALE", "es")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
SQL_ECHO: bool = _env_bool("SQL_ECHO", False)

JWT_ALG: str = os.getenv("JWT_ALG", "HS256")
JWT_EXP_DAYS: int = int(os.getenv("JWT_EXP_DAYS", "7"))
COOKIE_NAME = "token"

CORS_ORIGINS: list[str] = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if o.strip()
]


def is_development() -> bool:
    return APP_ENV == "development"


def get_jwt_secret() -> str | None:
    """Se lee en cada request: el secreto puede definirse después del arranque."""
    secret = os.getenv("JWT_SECRET")
    return secret.strip() if secret and secret.strip() else None
