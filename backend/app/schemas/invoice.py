"""API schemas for invoice endpoints."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel

from invoice_actions.domain.models import Invoice


class InvoiceListResponse(BaseModel):
    invoices: List[Invoice]


class ActionStateResponse(BaseModel):
    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


class InvoiceDeleteResponse(BaseModel):
    message: str
