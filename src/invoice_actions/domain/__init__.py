"""Domain exports."""

from .constants import (
    DATABASE_ERROR_MESSAGE,
    DELETED_MESSAGE,
    FIELD_ERROR_MESSAGES,
    FORM_FIELDS,
    INVOICES_TABLE,
    LISTING_PATH,
    MAX_AMOUNT,
    MISSING_FIELDS_MESSAGE,
)
from .errors import InvoiceActionError, InvoiceValidationError, PersistenceError
from .models import (
    ActionResult,
    ActionState,
    ActionSuccess,
    Invoice,
    InvoiceForm,
    InvoiceStatus,
    PersistenceFailure,
    ValidationFailure,
)

__all__ = [
    "DATABASE_ERROR_MESSAGE",
    "DELETED_MESSAGE",
    "FIELD_ERROR_MESSAGES",
    "FORM_FIELDS",
    "INVOICES_TABLE",
    "LISTING_PATH",
    "MAX_AMOUNT",
    "MISSING_FIELDS_MESSAGE",
    "InvoiceActionError",
    "InvoiceValidationError",
    "PersistenceError",
    "ActionResult",
    "ActionState",
    "ActionSuccess",
    "Invoice",
    "InvoiceForm",
    "InvoiceStatus",
    "PersistenceFailure",
    "ValidationFailure",
]
