"""Tests for the ``invoices`` table statement helpers."""

from __future__ import annotations

import httpx
import pytest
from postgrest.exceptions import APIError

from invoice_actions.domain.errors import PersistenceError
from invoice_actions.services.store import (
    delete_invoice_row,
    fetch_invoices,
    insert_invoice,
    update_invoice_row,
)


def test_insert_returns_stored_row(fake_supabase) -> None:
    row = insert_invoice(
        supabase=fake_supabase,
        row={"customer_id": "c1", "amount": 500, "status": "paid", "date": "2026-10-19"},
    )

    assert row is not None
    assert row["id"] in fake_supabase.rows


def test_fetch_orders_by_date_descending(fake_supabase) -> None:
    fake_supabase.seed(customer_id="c1", amount=1, status="paid", date="2024-01-01")
    fake_supabase.seed(customer_id="c2", amount=2, status="pending", date="2025-06-30")

    rows = fetch_invoices(supabase=fake_supabase)

    assert [row["customer_id"] for row in rows] == ["c2", "c1"]
    assert fake_supabase.executed[0].columns == "id, customer_id, amount, status, date"


def test_update_and_delete_count_rows(fake_supabase) -> None:
    row = fake_supabase.seed(customer_id="c1", amount=1, status="paid", date="2024-01-01")

    assert update_invoice_row(supabase=fake_supabase, invoice_id=row["id"], values={"amount": 9}) == 1
    assert delete_invoice_row(supabase=fake_supabase, invoice_id=row["id"]) == 1
    assert delete_invoice_row(supabase=fake_supabase, invoice_id=row["id"]) == 0


@pytest.mark.parametrize(
    "error",
    [
        APIError({"message": "invalid input syntax for type uuid", "code": "22P02"}),
        httpx.ConnectError("connection refused"),
    ],
)
def test_client_errors_become_persistence_errors(fake_supabase, error) -> None:
    fake_supabase.error = error

    with pytest.raises(PersistenceError) as exc_info:
        delete_invoice_row(supabase=fake_supabase, invoice_id="not-a-uuid")

    assert exc_info.value.action == "delete"
    assert exc_info.value.cause is error


def test_unexpected_errors_propagate(fake_supabase) -> None:
    fake_supabase.error = KeyError("boom")

    with pytest.raises(KeyError):
        fetch_invoices(supabase=fake_supabase)
