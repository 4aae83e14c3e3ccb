"""API schema exports."""

from .invoice import ActionStateResponse, InvoiceDeleteResponse, InvoiceListResponse

__all__ = [
    "ActionStateResponse",
    "InvoiceDeleteResponse",
    "InvoiceListResponse",
]
