from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json(name: str, default):
    value = _env(name)
    if not value:
        return default
    return json.loads(value)


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    jwt_secret: str
    jwt_access_ttl_minutes: int
    pix_key: str
    pix_merchant_name: str
    pix_merchant_city: str
    revalidate_url: str
    revalidate_secret: str
    revalidate_timeout_seconds: float
    cors_allow_origins: list[str]


def get_settings() -> Settings:
    return Settings(
        postgres_dsn=_env("POSTGRES_DSN", ""),
        jwt_secret=_env("JWT_SECRET", ""),
        jwt_access_ttl_minutes=int(_env("JWT_ACCESS_TTL_MINUTES", "60")),
        pix_key=_env("PIX_KEY", ""),
        pix_merchant_name=_env("PIX_MERCHANT_NAME", "MYPROFILE"),
        pix_merchant_city=_env("PIX_MERCHANT_CITY", "SAO PAULO"),
        revalidate_url=_env("REVALIDATE_URL", ""),
        revalidate_secret=_env("REVALIDATE_SECRET", ""),
        revalidate_timeout_seconds=float(_env("REVALIDATE_TIMEOUT_SECONDS", "5")),
        cors_allow_origins=_json("CORS_ALLOW_ORIGINS", ["*"]),
    )
