"""Exceptions raised while validating and persisting invoices."""

from __future__ import annotations

from typing import Dict, List


class InvoiceActionError(Exception):
    """Base class for invoice action failures."""


class InvoiceValidationError(InvoiceActionError):
    """Submitted form fields do not satisfy the invoice schema."""

    def __init__(self, field_errors: Dict[str, List[str]]) -> None:
        self.field_errors = field_errors
        fields = ", ".join(field_errors) or "form"
        super().__init__(f"Invalid invoice fields: {fields}")


class PersistenceError(InvoiceActionError):
    """The store rejected or failed to execute an invoice statement."""

    def __init__(self, action: str, cause: BaseException) -> None:
        self.action = action
        self.cause = cause
        super().__init__(f"Unable to {action} invoice: {cause}")
