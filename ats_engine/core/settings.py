from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


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
    scoring_config_path: str | None
    max_input_chars: int
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
    scoring_config_path=_get_env("ATS_SCORING_CONFIG_PATH"),
    max_input_chars=_get_env_int("ATS_MAX_INPUT_CHARS", 500_000),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
)

if settings.max_input_chars <= 0:
    raise RuntimeError("ATS_MAX_INPUT_CHARS must be a positive integer.")
