"""Statement helpers for the Supabase ``invoices`` table."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from invoice_actions.domain.constants import INVOICE_COLUMNS, INVOICES_TABLE
from invoice_actions.domain.errors import PersistenceError

STORE_ERRORS = (APIError, httpx.HTTPError)


def _execute(query, *, action: str):
    try:
        return query.execute()
    except STORE_ERRORS as exc:
        raise PersistenceError(action, exc) from exc


def _rows(query_result) -> List[Dict[str, Any]]:
    return list(getattr(query_result, "data", None) or [])


def insert_invoice(*, supabase: Client, row: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Insert one invoice row and return it as stored, ``id`` included."""
    response = _execute(supabase.table(INVOICES_TABLE).insert(row), action="create")
    data = _rows(response)
    return data[0] if data else None


def update_invoice_row(*, supabase: Client, invoice_id: str, values: Dict[str, Any]) -> int:
    """Update the row matching ``invoice_id`` and return the number of rows changed."""
    response = _execute(
        supabase.table(INVOICES_TABLE).update(values).eq("id", invoice_id),
        action="update",
    )
    return len(_rows(response))


def delete_invoice_row(*, supabase: Client, invoice_id: str) -> int:
    response = _execute(
        supabase.table(INVOICES_TABLE).delete().eq("id", invoice_id),
        action="delete",
    )
    return len(_rows(response))


def fetch_invoices(*, supabase: Client) -> List[Dict[str, Any]]:
    """Return every invoice, most recent date first."""
    response = _execute(
        supabase.table(INVOICES_TABLE).select(INVOICE_COLUMNS).order("date", desc=True),
        action="fetch",
    )
    return _rows(response)
