"""Supabase client helpers."""

from __future__ import annotations

from functools import lru_cache
from supabase import Client, create_client

from invoice_actions.logging_config import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_supabase_client(url: str, key: str) -> Client:
    """Return a cached Supabase client for the project at ``url``."""
    logger.info("Creating Supabase client for %s", url)
    return create_client(url, key)
