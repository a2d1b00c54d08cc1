from decimal import Decimal, ROUND_HALF_UP
from typing import ClassVar, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from src.api.invoices.constants import (
    InvoiceStatus,
    MAX_INVOICE_AMOUNT,
    CUSTOMER_REQUIRED_MESSAGE,
    AMOUNT_GREATER_THAN_ZERO_MESSAGE,
    STATUS_REQUIRED_MESSAGE,
    CREATE_MISSING_FIELDS_MESSAGE,
    UPDATE_MISSING_FIELDS_MESSAGE,
)

INVOICE_FIELD_MESSAGES = {
    "customerId": CUSTOMER_REQUIRED_MESSAGE,
    "amount": AMOUNT_GREATER_THAN_ZERO_MESSAGE,
    "status": STATUS_REQUIRED_MESSAGE,
}


def to_minor_units(amount: Decimal) -> int:
    """Convert a whole-currency amount to cents, rounding half up."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def check_amount_in_cents(amount: Decimal) -> Decimal:
    """Reject amounts that would be stored as zero cents"""
    if to_minor_units(amount) <= 0:
        raise ValueError("Amount rounds to zero cents")
    return amount


class CreateInvoice(BaseModel):
    """Fields accepted from the create invoice form.

    ``id`` and ``date`` are assigned by the server and are not part of
    the submitted form.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field_messages: ClassVar[Dict[str, str]] = INVOICE_FIELD_MESSAGES
    failure_message: ClassVar[str] = CREATE_MISSING_FIELDS_MESSAGE

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_INVOICE_AMOUNT)
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def amount_has_cents(cls, amount: Decimal) -> Decimal:
        return check_amount_in_cents(amount)

    @property
    def amount_in_cents(self) -> int:
        return to_minor_units(self.amount)


class UpdateInvoice(BaseModel):
    """Fields accepted from the edit invoice form.

    The invoice id comes from the route, never from the form.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field_messages: ClassVar[Dict[str, str]] = INVOICE_FIELD_MESSAGES
    failure_message: ClassVar[str] = UPDATE_MISSING_FIELDS_MESSAGE

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_INVOICE_AMOUNT)
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def amount_has_cents(cls, amount: Decimal) -> Decimal:
        return check_amount_in_cents(amount)

    @property
    def amount_in_cents(self) -> int:
        return to_minor_units(self.amount)


class FormState(BaseModel):
    """Outcome of a form submission, sent back so the form can show errors.

    An empty state means nothing went wrong.
    """
    model_config = ConfigDict(frozen=True)

    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


class InvoiceRead(BaseModel):
    """Schema for reading invoice data"""
    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: str

    model_config = ConfigDict(from_attributes=True)


class InvoiceListItem(InvoiceRead):
    """Invoice row of the dashboard table, joined with its customer"""
    name: str
    email: str
    image_url: Optional[str] = None
