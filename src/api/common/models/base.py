from sqlmodel import SQLModel
from sqlalchemy.orm import declared_attr


class BaseModel(SQLModel):
    """Base model for all models in the application"""
    @declared_attr
    def __tablename__(cls) -> str:
        # Invoice -> invoices, Customer -> customers
        return f"{cls.__name__.lower()}s"
