from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

load_dotenv()

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"


def _get_env(env: Mapping[str, str], name: str, default: str | None = None) -> str | None:
    value = env.get(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _get_env(env, name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(env: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = _get_env(env, name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(env: Mapping[str, str], name: str, default: float | None) -> float | None:
    raw = _get_env(env, name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(env: Mapping[str, str], name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(env, name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


@dataclass(frozen=True)
class Settings:
    google_api_key: str | None
    gemini_model: str
    max_output_tokens_override: int | None
    temperature_override: float | None
    environment: str
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    rate_limit: str
    rate_limit_enabled: bool
    max_upload_bytes: int
    verify_upload_signature: bool
    port: int

    @property
    def gemini_configured(self) -> bool:
        key = (self.google_api_key or "").strip()
        return bool(key) and not _looks_like_placeholder(key)

    @property
    def expose_error_details(self) -> bool:
        return self.environment == "development"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build the immutable settings object from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ

    max_upload_mb = _get_env_int(env, "MAX_UPLOAD_MB", 10) or 10
    max_tokens = _get_env_int(env, "MAX_TOKENS", None)
    if max_tokens is not None and max_tokens <= 0:
        max_tokens = None

    settings = Settings(
        google_api_key=_get_env(env, "GOOGLE_API_KEY"),
        gemini_model=(_get_env(env, "GEMINI_MODEL", DEFAULT_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL).strip(),
        max_output_tokens_override=max_tokens,
        temperature_override=_get_env_float(env, "TEMPERATURE", None),
        environment=(_get_env(env, "APP_ENV", "production") or "production").strip().lower(),
        log_level=(_get_env(env, "LOG_LEVEL", "INFO") or "INFO").strip().upper(),
        sentry_dsn=_get_env(env, "SENTRY_DSN"),
        cors_allowed_origins=_get_env_list(env, "CORS_ALLOWED_ORIGINS", ["*"]),
        cors_allow_credentials=_get_env_bool(env, "CORS_ALLOW_CREDENTIALS", False),
        rate_limit=_get_env(env, "RATE_LIMIT", "20/minute") or "20/minute",
        rate_limit_enabled=_get_env_bool(env, "RATE_LIMIT_ENABLED", True),
        max_upload_bytes=max_upload_mb * 1024 * 1024,
        verify_upload_signature=_get_env_bool(env, "UPLOAD_VERIFY_SIGNATURE", False),
        port=_get_env_int(env, "PORT", 5000) or 5000,
    )

    if settings.temperature_override is not None and not 0.0 <= settings.temperature_override <= 2.0:
        raise RuntimeError("TEMPERATURE must be between 0.0 and 2.0.")

    if settings.cors_allow_credentials and "*" in settings.cors_allowed_origins:
        raise RuntimeError("CORS_ALLOW_CREDENTIALS=true requires explicit CORS_ALLOWED_ORIGINS.")

    return settings
