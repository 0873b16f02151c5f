from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_TAXONOMY_PATH = Path(__file__).resolve().parents[2] / "taxonomy" / "taxonomy.json"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]
    taxonomy_path: str
    max_resume_chars: int
    max_jd_chars: int
    display_text_max_chars: int


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    taxonomy_path=_get_env("TAXONOMY_PATH", str(_DEFAULT_TAXONOMY_PATH)) or str(_DEFAULT_TAXONOMY_PATH),
    max_resume_chars=_get_env_int("MAX_RESUME_CHARS", 50000),
    max_jd_chars=_get_env_int("MAX_JD_CHARS", 50000),
    display_text_max_chars=_get_env_int("DISPLAY_TEXT_MAX_CHARS", 8000),
)

if settings.max_resume_chars <= 0 or settings.max_jd_chars <= 0:
    raise RuntimeError("MAX_RESUME_CHARS and MAX_JD_CHARS must be positive integers.")

if settings.display_text_max_chars <= 0:
    raise RuntimeError("DISPLAY_TEXT_MAX_CHARS must be a positive integer.")
