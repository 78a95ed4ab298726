"""
Environment-driven settings.

Every setting has a default that works against a local MongoDB and a built
frontend in `../dist/`.
"""

from __future__ import annotations

import os

DEFAULT_MONGODB_URI = "mongodb://127.0.0.1:27017"
DEFAULT_DATABASE = "csesoc"
DEFAULT_DIST_PATH = "../dist/"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def mongodb_uri() -> str:
    return _env_str("MONGODB_URI", DEFAULT_MONGODB_URI)


def database_name() -> str:
    return _env_str("MONGODB_DATABASE", DEFAULT_DATABASE)


def mongodb_timeout_ms() -> int:
    return _env_int("MONGODB_TIMEOUT_MS", 10_000)


def server_selection_timeout_ms() -> int:
    return _env_int("MONGODB_SERVER_SELECTION_TIMEOUT_MS", 5_000)


def dist_path() -> str:
    return _env_str("DIST_PATH", DEFAULT_DIST_PATH)


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS", "http://localhost:8080")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def registration_enabled() -> bool:
    return _env_bool("REGISTRATION_ENABLED", False)


def registration_permissions() -> str:
    return _env_str("REGISTRATION_PERMISSIONS", "editor")


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return _env_str("JWT_SECRET", "dev-change-this-secret")


def jwt_algorithm() -> str:
    return _env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    return _env_int("ACCESS_TOKEN_EXPIRE_MIN", 60)
