"""Domain models for invoice form actions."""

from __future__ import annotations

import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import MAX_AMOUNT

CENTS_PER_UNIT = Decimal(100)


def to_cents(amount: Decimal) -> Decimal:
    return (amount * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


class InvoiceStatus(str, Enum):
    """Lifecycle states an invoice can be stored with."""

    PENDING = "pending"
    PAID = "paid"


class InvoiceForm(BaseModel):
    """Fields submitted by the invoice create and edit forms."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def validate_whole_cents(cls, value: Decimal) -> Decimal:
        """Reject positive amounts that round down to zero cents."""
        if to_cents(value) <= 0:
            raise ValueError("Amount rounds to zero cents")
        return value

    @property
    def amount_in_cents(self) -> int:
        """Amount converted to minor units, rounded half-up to a whole cent."""
        return int(to_cents(self.amount))

    def to_row(self) -> Dict[str, object]:
        return {
            "customer_id": self.customer_id,
            "amount": self.amount_in_cents,
            "status": self.status.value,
        }


class Invoice(BaseModel):
    """Invoice row as stored in the ``invoices`` table."""

    id: str
    customer_id: str
    amount: int = Field(description="Amount in cents")
    status: InvoiceStatus
    date: datetime.date


class ActionState(BaseModel):
    """Form state handed back to the page after a failed submission."""

    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


class ActionSuccess(BaseModel):
    """A committed write. Navigation is left to the caller."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    invoice_id: Optional[str] = None
    message: Optional[str] = None
    affected: int = 0

    @property
    def ok(self) -> bool:
        return True

    def to_state(self) -> ActionState:
        return ActionState(message=self.message)


class ValidationFailure(BaseModel):
    """Submitted fields were rejected before any write was attempted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["validation"] = "validation"
    errors: Dict[str, List[str]]
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_state(self) -> ActionState:
        return ActionState(errors={field: list(msgs) for field, msgs in self.errors.items()}, message=self.message)


class PersistenceFailure(BaseModel):
    """The store failed the write. ``detail`` carries the client error text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["persistence"] = "persistence"
    message: str
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    def to_state(self) -> ActionState:
        return ActionState(message=self.message)


ActionResult = Union[ActionSuccess, ValidationFailure, PersistenceFailure]
