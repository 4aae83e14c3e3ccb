"""Parsing of submitted invoice forms."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError

from invoice_actions.domain.constants import ERROR_TYPE_MESSAGES, FIELD_ERROR_MESSAGES, FORM_FIELDS
from invoice_actions.domain.errors import InvoiceValidationError
from invoice_actions.domain.models import InvoiceForm


def flatten_field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Group pydantic errors by form field, one message per constraint."""
    field_errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "form"
        message = ERROR_TYPE_MESSAGES.get((field, error.get("type", ""))) or FIELD_ERROR_MESSAGES.get(
            field, error.get("msg", "Invalid value.")
        )
        messages = field_errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return field_errors


def parse_invoice_form(form_data: Mapping[str, Any]) -> InvoiceForm:
    """Validate raw form values, raising ``InvoiceValidationError`` on failure.

    Only the customer, amount and status fields are read; ``id``, ``date`` and
    any framework-injected keys are ignored.
    """
    raw = {field: form_data.get(field) for field in FORM_FIELDS}
    try:
        return InvoiceForm.model_validate(raw)
    except ValidationError as exc:
        raise InvoiceValidationError(flatten_field_errors(exc)) from exc
