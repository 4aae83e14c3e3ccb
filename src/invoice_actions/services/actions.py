"""Create, update and delete actions behind the invoice forms.

Each action validates the submitted fields, runs a single statement against
the ``invoices`` table and revalidates the invoice listing once the write has
committed. Failures come back as typed results rather than exceptions, so the
web layer decides whether to redirect or re-render the form.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping, Optional

from supabase import Client

from invoice_actions.domain.constants import (
    DATABASE_ERROR_MESSAGE,
    DELETED_MESSAGE,
    LISTING_PATH,
    MISSING_FIELDS_MESSAGE,
)
from invoice_actions.domain.errors import InvoiceValidationError, PersistenceError
from invoice_actions.domain.models import (
    ActionResult,
    ActionState,
    ActionSuccess,
    PersistenceFailure,
    ValidationFailure,
)
from invoice_actions.logging_config import get_logger
from invoice_actions.services.cache import RevalidationPort
from invoice_actions.services.store import delete_invoice_row, insert_invoice, update_invoice_row
from invoice_actions.services.validation import parse_invoice_form

logger = get_logger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _validation_failure(exc: InvoiceValidationError, verb: str) -> ValidationFailure:
    return ValidationFailure(
        errors=exc.field_errors,
        message=MISSING_FIELDS_MESSAGE.format(verb=verb),
    )


def _persistence_failure(exc: PersistenceError, verb: str) -> PersistenceFailure:
    return PersistenceFailure(
        message=DATABASE_ERROR_MESSAGE.format(verb=verb),
        detail=str(exc.cause),
    )


def create_invoice(
    prev_state: Optional[ActionState],
    form_data: Mapping[str, Any],
    *,
    supabase: Client,
    cache: RevalidationPort,
    listing_path: str = LISTING_PATH,
    today: Callable[[], date] = utc_today,
) -> ActionResult:
    """Insert a new invoice dated today.

    ``prev_state`` is the state the form last rendered with; it does not
    influence the outcome.
    """
    try:
        fields = parse_invoice_form(form_data)
    except InvoiceValidationError as exc:
        logger.info("Rejected invoice creation: %s", exc)
        return _validation_failure(exc, "Create")

    row = {**fields.to_row(), "date": today().isoformat()}
    try:
        created = insert_invoice(supabase=supabase, row=row)
    except PersistenceError as exc:
        logger.exception("Failed to insert invoice for customer %s", fields.customer_id)
        return _persistence_failure(exc, "Create")

    cache.revalidate_path(listing_path)
    invoice_id = created.get("id") if created else None
    logger.info("Created invoice %s for customer %s", invoice_id, fields.customer_id)
    return ActionSuccess(invoice_id=invoice_id, affected=1)


def update_invoice(
    invoice_id: str,
    form_data: Mapping[str, Any],
    *,
    supabase: Client,
    cache: RevalidationPort,
    listing_path: str = LISTING_PATH,
) -> ActionResult:
    """Overwrite customer, amount and status of an existing invoice.

    The invoice date is left untouched.
    """
    try:
        fields = parse_invoice_form(form_data)
    except InvoiceValidationError as exc:
        logger.info("Rejected update of invoice %s: %s", invoice_id, exc)
        return _validation_failure(exc, "Update")

    try:
        affected = update_invoice_row(supabase=supabase, invoice_id=invoice_id, values=fields.to_row())
    except PersistenceError as exc:
        logger.exception("Failed to update invoice %s", invoice_id)
        return _persistence_failure(exc, "Update")

    if affected == 0:
        logger.warning("Update matched no invoice with id %s", invoice_id)
    cache.revalidate_path(listing_path)
    return ActionSuccess(invoice_id=invoice_id, affected=affected)


def delete_invoice(
    invoice_id: str,
    *,
    supabase: Client,
    cache: RevalidationPort,
    listing_path: str = LISTING_PATH,
) -> ActionResult:
    try:
        affected = delete_invoice_row(supabase=supabase, invoice_id=invoice_id)
    except PersistenceError as exc:
        logger.exception("Failed to delete invoice %s", invoice_id)
        return _persistence_failure(exc, "Delete")

    if affected == 0:
        logger.warning("Delete matched no invoice with id %s", invoice_id)
    cache.revalidate_path(listing_path)
    return ActionSuccess(invoice_id=invoice_id, message=DELETED_MESSAGE, affected=affected)
