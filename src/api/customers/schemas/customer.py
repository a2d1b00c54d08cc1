from typing import Optional
from pydantic import BaseModel, ConfigDict


class CustomerRead(BaseModel):
    """Schema for reading customer data"""
    id: str
    name: str
    email: str
    image_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CustomerField(BaseModel):
    """Id and name pair used to fill the customer select of the invoice form"""
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)
