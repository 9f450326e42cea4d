"""
Environment-backed settings.

Everything is read from the process environment. A local `.env` file is
loaded once at startup (see `load_env`) and never overrides variables that
are already set.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

DEFAULT_API_HOST = "localhost"
DEFAULT_API_PORT = 8080


def load_env() -> None:
    load_dotenv(override=False)


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


def api_host() -> str:
    return os.environ.get("API_HOST", DEFAULT_API_HOST).strip() or DEFAULT_API_HOST


def api_port() -> int:
    return _env_int("API_PORT", DEFAULT_API_PORT)


def public_base_url() -> str:
    """
    Base URL used to build `Location` headers for created resources.

    Falls back to the bind address, which is only right when clients reach
    the service directly. Set PUBLIC_BASE_URL behind a proxy.
    """
    configured = os.environ.get("PUBLIC_BASE_URL", "").strip()
    if configured:
        return configured.rstrip("/")
    return f"http://{api_host()}:{api_port()}"


def pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    return max(1, pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 10))


def command_timeout() -> float:
    return float(_env_int("DB_COMMAND_TIMEOUT", 30))


def init_schema_enabled() -> bool:
    return _env_bool("DB_INIT_SCHEMA", True)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
