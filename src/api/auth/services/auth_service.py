from typing import Any, Mapping, Optional
from sqlmodel import Session
from src.api.auth.config import AuthConfig, CREDENTIALS_STRATEGY, auth_config
from src.api.auth.schemas.auth import SignInError, SignInFailure
from src.api.auth.services.credentials import CredentialsSignin, CredentialVerifier
from src.api.common.utils.navigation import redirect

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_AUTH_ERROR_MESSAGE = "Something went wrong."


class AuthService:
    def __init__(self, db: Session, verifier: Optional[CredentialVerifier] = None,
                 config: Optional[AuthConfig] = None):
        self.verifier = verifier if verifier is not None else CredentialVerifier(db)
        self.config = config if config is not None else auth_config

    def authenticate(self, prev_state: Optional[str], form_data: Mapping[str, Any]) -> Optional[str]:
        """
        Sign a user in with the credentials strategy

        A successful sign-in redirects to the dashboard with the session
        cookie set and returns nothing. Unclassified errors from the
        verifier are re-raised.

        Returns:
            Message to show on the login form when sign-in failed
        """
        result = self.verifier.sign_in(CREDENTIALS_STRATEGY, form_data)
        if isinstance(result, SignInError):
            raise result.error
        if isinstance(result, SignInFailure):
            if result.kind == CredentialsSignin.type:
                return INVALID_CREDENTIALS_MESSAGE
            return GENERIC_AUTH_ERROR_MESSAGE

        redirect(
            self.config.login_redirect,
            cookies={self.config.session_cookie: result.session_token},
            cookie_max_age=self.config.session_max_age,
        )
