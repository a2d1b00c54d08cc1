from dataclasses import dataclass
from typing import Union
from pydantic import BaseModel, Field


class LoginForm(BaseModel):
    """Fields submitted by the login form"""
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=6)


@dataclass(frozen=True)
class SignInSuccess:
    user_id: str
    session_token: str


@dataclass(frozen=True)
class SignInFailure:
    """The verifier rejected the attempt for a known reason, named by ``kind``"""
    kind: str


@dataclass(frozen=True)
class SignInError:
    """Anything the verifier could not classify, e.g. the database being down"""
    error: Exception


SignInResult = Union[SignInSuccess, SignInFailure, SignInError]
