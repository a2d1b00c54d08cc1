import uuid
from typing import Optional
from sqlmodel import Field
from src.api.common.models.base import BaseModel


def generate_user_id() -> str:
    return str(uuid.uuid4())


class User(BaseModel, table=True):
    """
    Dashboard user allowed to sign in with email and password
    """
    id: Optional[str] = Field(
        default=None, primary_key=True,
        sa_column_kwargs={"default": generate_user_id})
    name: str
    email: str = Field(index=True, unique=True)
    # Salted PBKDF2 hash, see src.api.common.utils.encryption.hash_password
    password: str
