from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"


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
    bulk_rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    scoring_config_path: Path
    entity_extractor: str
    min_text_chars: int
    max_text_chars: int
    bulk_max_resumes: int


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    bulk_rate_limit=_get_env("BULK_RATE_LIMIT", "10/minute") or "10/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    scoring_config_path=Path(_get_env("SCORING_CONFIG_PATH", str(_DEFAULT_SCORING_CONFIG_PATH)) or _DEFAULT_SCORING_CONFIG_PATH),
    entity_extractor=(_get_env("ENTITY_EXTRACTOR", "pattern") or "pattern").strip().lower(),
    min_text_chars=_get_env_int("MIN_TEXT_CHARS", 10),
    max_text_chars=_get_env_int("MAX_TEXT_CHARS", 50000),
    bulk_max_resumes=_get_env_int("BULK_MAX_RESUMES", 5),
)

if settings.entity_extractor not in {"pattern", "nltk"}:
    raise RuntimeError("ENTITY_EXTRACTOR must be either 'pattern' or 'nltk'.")

if settings.min_text_chars > settings.max_text_chars:
    raise RuntimeError("MIN_TEXT_CHARS must not exceed MAX_TEXT_CHARS.")
