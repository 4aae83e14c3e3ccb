"""Domain-level constants for invoice actions."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Tuple

INVOICES_TABLE = "invoices"
INVOICE_COLUMNS = "id, customer_id, amount, status, date"

LISTING_PATH = "/dashboard/invoices"

FORM_FIELDS: Tuple[str, ...] = ("customerId", "amount", "status")

FIELD_ERROR_MESSAGES: Dict[str, str] = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}

# Largest amount whose cent value fits the 32-bit integer amount column
MAX_AMOUNT = Decimal("21474836.47")

ERROR_TYPE_MESSAGES: Dict[Tuple[str, str], str] = {
    ("amount", "less_than_equal"): "Please enter an amount no greater than $21,474,836.47.",
}

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to {verb} Invoice."
DATABASE_ERROR_MESSAGE = "Database Error: Failed to {verb} Invoice."
DELETED_MESSAGE = "Deleted Invoice."
