"""Application configuration and dependency factories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List
from dotenv import load_dotenv

from invoice_actions.adapters.supabase_client import get_supabase_client
from invoice_actions.domain.constants import LISTING_PATH
from invoice_actions.services.cache import ListingCache

load_dotenv()


def _normalize_path(path: str) -> str:
    stripped = path.strip().strip("/")
    return f"/{stripped}" if stripped else LISTING_PATH


@dataclass(slots=True)
class Settings:
    supabase_url: str
    supabase_key: str
    log_level: str = "INFO"
    listing_path: str = LISTING_PATH
    cors_origins: List[str] | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    try:
        cors_raw = os.environ.get(
            "CORS_ALLOW_ORIGINS", "http://localhost:3000,http://localhost:3001"
        )
        cors_origins = [origin.strip() for origin in cors_raw.split(",") if origin.strip()]
        if not cors_origins:
            cors_origins = ["*"]

        return Settings(
            supabase_url=os.environ["SUPABASE_URL"],
            supabase_key=os.environ["SUPABASE_KEY"],
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            listing_path=_normalize_path(os.environ.get("INVOICES_LISTING_PATH", LISTING_PATH)),
            cors_origins=cors_origins,
        )
    except KeyError as exc:
        missing = ", ".join(sorted({key for key in exc.args}))
        raise RuntimeError(f"Missing required environment variables: {missing}") from exc


def get_supabase():
    settings = get_settings()
    return get_supabase_client(settings.supabase_url, settings.supabase_key)


@lru_cache(maxsize=1)
def get_listing_cache() -> ListingCache:
    return ListingCache()
