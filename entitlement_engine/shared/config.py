from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json_list(name: str, default: list[str]) -> list[str]:
    value = _env(name)
    if not value:
        return list(default)
    parsed = json.loads(value)
    if not isinstance(parsed, list):
        raise ValueError(f"{name} must be a JSON list.")
    return [str(item) for item in parsed]


@dataclass(frozen=True)
class Settings:
    revenuecat_api_base: str
    revenuecat_api_key: str
    revenuecat_platform: str
    revenuecat_timeout_seconds: float
    expiring_soon_threshold_days: int
    service_api_token: str
    cors_allow_origins: list[str]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        revenuecat_api_base=_env("REVENUECAT_API_BASE", "https://api.revenuecat.com/v1"),
        revenuecat_api_key=_env("REVENUECAT_API_KEY", ""),
        revenuecat_platform=_env("REVENUECAT_PLATFORM", "ios"),
        revenuecat_timeout_seconds=float(_env("REVENUECAT_TIMEOUT_SECONDS", "10")),
        expiring_soon_threshold_days=int(_env("EXPIRING_SOON_THRESHOLD_DAYS", "3")),
        service_api_token=_env("SERVICE_API_TOKEN", ""),
        cors_allow_origins=_json_list("CORS_ALLOW_ORIGINS", ["*"]),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
