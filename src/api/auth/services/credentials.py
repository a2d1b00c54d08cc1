"""
Credential verification for the login form.

Providers raise ``AuthError`` subclasses for failures they understand.
``CredentialVerifier.sign_in`` turns every outcome into a ``SignInResult``
so callers branch on the variant instead of on exception types.
"""
import logging
from typing import Any, Dict, Mapping, Optional
from pydantic import ValidationError
from sqlmodel import Session, select
from src.api.auth.config import CREDENTIALS_STRATEGY
from src.api.auth.models.user import User
from src.api.auth.schemas.auth import (
    LoginForm,
    SignInError,
    SignInFailure,
    SignInResult,
    SignInSuccess,
)
from src.api.auth.services.session_service import create_session_token
from src.api.common.utils.encryption import verify_password

logger = logging.getLogger(__name__)


class AuthError(Exception):
    type = "AuthError"


class CredentialsSignin(AuthError):
    """Email and password do not identify a user"""
    type = "CredentialsSignin"


class InvalidProvider(AuthError):
    type = "InvalidProvider"


class CredentialsProvider:
    """Checks an email and password against the users table"""

    def __init__(self, db: Session):
        self.db = db

    def authorize(self, form_data: Mapping[str, Any]) -> User:
        try:
            credentials = LoginForm.model_validate({
                "email": form_data.get("email"),
                "password": form_data.get("password"),
            })
        except ValidationError:
            raise CredentialsSignin("Malformed credentials")

        user = self.db.exec(select(User).where(User.email == credentials.email)).first()
        if user is None or not verify_password(credentials.password, user.password):
            raise CredentialsSignin("Invalid email or password")
        return user


class CredentialVerifier:
    def __init__(self, db: Session, providers: Optional[Dict[str, Any]] = None):
        self.providers = providers if providers is not None else {
            CREDENTIALS_STRATEGY: CredentialsProvider(db),
        }

    def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> SignInResult:
        """
        Verify submitted credentials with the named strategy

        Args:
            strategy: Provider key, e.g. "credentials"
            form_data: Raw submitted form

        Returns:
            SignInSuccess with a session token, SignInFailure for a
            classified AuthError, or SignInError wrapping any other exception
        """
        try:
            provider = self.providers.get(strategy)
            if provider is None:
                raise InvalidProvider(f"Unknown sign-in strategy: {strategy}")
            user = provider.authorize(form_data)
        except AuthError as e:
            logger.info(f"Sign-in rejected ({e.type}): {e}")
            return SignInFailure(kind=e.type)
        except Exception as e:
            return SignInError(error=e)

        logger.info(f"User {user.id} signed in")
        return SignInSuccess(user_id=user.id, session_token=create_session_token(user.id))
