"""Service layer exports."""

from .actions import create_invoice, delete_invoice, update_invoice, utc_today
from .cache import ListingCache, RevalidationPort
from .store import delete_invoice_row, fetch_invoices, insert_invoice, update_invoice_row
from .validation import flatten_field_errors, parse_invoice_form

__all__ = [
    "create_invoice",
    "delete_invoice",
    "update_invoice",
    "utc_today",
    "ListingCache",
    "RevalidationPort",
    "delete_invoice_row",
    "fetch_invoices",
    "insert_invoice",
    "update_invoice_row",
    "flatten_field_errors",
    "parse_invoice_form",
]
