"""
Invoice Actions Package

Server-side handlers behind the invoice create, edit and delete forms:
- Form validation into typed invoice fields
- Single-statement writes to the Supabase ``invoices`` table
- Listing cache invalidation after every committed write
- Typed action results the web layer turns into redirects or form state

Main Components:
- domain/: Models, constants and error types
- services/: Actions, validation, store access and the listing cache
- adapters/: Supabase client factory
- logging_config.py: Logger setup shared by the package and the API

Usage:
    Serve the API with: uvicorn backend.app.main:app
"""

__version__ = "0.1.0"
__author__ = "Invoice Actions Team"

from .domain import ActionState, InvoiceForm, InvoiceStatus
from .services import create_invoice, delete_invoice, update_invoice

__all__ = [
    "ActionState",
    "InvoiceForm",
    "InvoiceStatus",
    "create_invoice",
    "delete_invoice",
    "update_invoice",
]
