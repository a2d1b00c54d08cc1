import uuid
from typing import Optional
from sqlmodel import Field
from src.api.common.models.base import BaseModel


def generate_invoice_id() -> str:
    return str(uuid.uuid4())


class Invoice(BaseModel, table=True):
    """
    Invoice issued to a customer from the dashboard
    """
    # Assigned by the database on insert
    id: Optional[str] = Field(
        default=None, primary_key=True,
        sa_column_kwargs={"default": generate_invoice_id})

    customer_id: str = Field(foreign_key="customers.id", index=True)

    # Minor units (cents)
    amount: int
    status: str
    # YYYY-MM-DD
    date: str
