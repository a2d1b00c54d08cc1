from enum import Enum
from decimal import Decimal


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


ITEMS_PER_PAGE = 6

# Field error messages shown next to the invoice form inputs
CUSTOMER_REQUIRED_MESSAGE = "Please select a customer."
AMOUNT_GREATER_THAN_ZERO_MESSAGE = "Please enter an amount greater than $0."
STATUS_REQUIRED_MESSAGE = "Please select an invoice status."

CREATE_MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Invoice."
UPDATE_MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Update Invoice."

CREATE_DATABASE_ERROR_MESSAGE = "Database Error: Failed to Create Invoice."
UPDATE_DATABASE_ERROR_MESSAGE = "Database Error: Failed to Update Invoice."
DELETE_DATABASE_ERROR_MESSAGE = "Database Error: Failed to Delete Invoice."

# Largest amount whose cents value fits the integer amount column
MAX_INVOICE_AMOUNT = Decimal("21474836.47")
