import uuid
from typing import Optional
from sqlmodel import Field
from src.api.common.models.base import BaseModel


def generate_customer_id() -> str:
    return str(uuid.uuid4())


class Customer(BaseModel, table=True):
    """
    Customer that invoices are issued to
    """
    id: Optional[str] = Field(
        default=None, primary_key=True,
        sa_column_kwargs={"default": generate_customer_id})
    name: str = Field(index=True)
    email: str
    image_url: Optional[str] = None
