import pytest
from unittest.mock import Mock, patch
from sqlalchemy.exc import OperationalError

from src.api.auth.config import AuthConfig
from src.api.auth.schemas.auth import SignInError, SignInFailure, SignInSuccess
from src.api.auth.services.auth_service import AuthService
from src.api.auth.services.credentials import (
    AuthError,
    CredentialsProvider,
    CredentialsSignin,
    CredentialVerifier,
)
from src.api.auth.services.session_service import create_session_token, read_session_token
from src.api.common.utils.navigation import RedirectTo


class TestCredentialVerifier:
    """Test CredentialVerifier.sign_in with the credentials strategy"""

    def test_sign_in_success(self, test_session, test_data_factory, sample_user_data):
        user = test_data_factory.create_user(test_session)
        verifier = CredentialVerifier(test_session)

        result = verifier.sign_in("credentials", sample_user_data)

        assert isinstance(result, SignInSuccess)
        assert result.user_id == user.id
        assert read_session_token(result.session_token, max_age=60) == user.id

    def test_sign_in_wrong_password(self, test_session, test_data_factory, sample_user_data):
        test_data_factory.create_user(test_session)
        verifier = CredentialVerifier(test_session)
        sample_user_data["password"] = "wrong-password"

        result = verifier.sign_in("credentials", sample_user_data)

        assert result == SignInFailure(kind="CredentialsSignin")

    def test_sign_in_unknown_email(self, test_session, sample_user_data):
        verifier = CredentialVerifier(test_session)

        result = verifier.sign_in("credentials", sample_user_data)

        assert result == SignInFailure(kind="CredentialsSignin")

    @pytest.mark.parametrize("form", [
        {},
        {"email": "not-an-email", "password": "123456"},
        {"email": "user@nextmail.com", "password": "123"},
    ])
    def test_sign_in_malformed_form(self, test_session, form):
        """Test that malformed input is a credentials failure, not an error"""
        verifier = CredentialVerifier(test_session)

        result = verifier.sign_in("credentials", form)

        assert result == SignInFailure(kind="CredentialsSignin")

    def test_sign_in_unknown_strategy(self, test_session, sample_user_data):
        verifier = CredentialVerifier(test_session)

        result = verifier.sign_in("github", sample_user_data)

        assert result == SignInFailure(kind="InvalidProvider")

    def test_sign_in_database_error(self, test_session, sample_user_data):
        """Test that storage failures are not classified"""
        verifier = CredentialVerifier(test_session)
        error = OperationalError("SELECT", {}, Exception("could not connect to server"))

        with patch.object(test_session, "exec", side_effect=error):
            result = verifier.sign_in("credentials", sample_user_data)

        assert isinstance(result, SignInError)
        assert result.error is error

    def test_provider_raises_credentials_signin(self, test_session):
        provider = CredentialsProvider(test_session)

        with pytest.raises(CredentialsSignin):
            provider.authorize({"email": "user@nextmail.com", "password": "123456"})


class TestAuthenticate:
    """Test AuthService.authenticate"""

    def make_service(self, result):
        verifier = Mock()
        verifier.sign_in.return_value = result
        config = AuthConfig(session_max_age=3600, login_redirect="/dashboard")
        return AuthService(db=None, verifier=verifier, config=config), verifier

    def test_authenticate_success_redirects_with_session(self):
        service, verifier = self.make_service(SignInSuccess(user_id="u1", session_token="token"))
        form = {"email": "user@nextmail.com", "password": "123456"}

        with pytest.raises(RedirectTo) as redirect:
            service.authenticate(None, form)

        verifier.sign_in.assert_called_once_with("credentials", form)
        assert redirect.value.url == "/dashboard"
        assert redirect.value.cookies == {"session": "token"}
        assert redirect.value.cookie_max_age == 3600

    def test_authenticate_invalid_credentials(self):
        service, _ = self.make_service(SignInFailure(kind="CredentialsSignin"))

        assert service.authenticate(None, {}) == "Invalid credentials."

    @pytest.mark.parametrize("kind", ["InvalidProvider", "AccessDenied", "AuthError"])
    def test_authenticate_other_classified_failure(self, kind):
        service, _ = self.make_service(SignInFailure(kind=kind))

        assert service.authenticate(None, {}) == "Something went wrong."

    def test_authenticate_reraises_unclassified_error(self):
        error = RuntimeError("database unavailable")
        service, _ = self.make_service(SignInError(error=error))

        with pytest.raises(RuntimeError, match="database unavailable"):
            service.authenticate("Invalid credentials.", {})

    def test_authenticate_with_real_verifier(self, test_session, test_data_factory, sample_user_data):
        test_data_factory.create_user(test_session)
        service = AuthService(test_session)
        sample_user_data["password"] = "nope-nope"

        assert service.authenticate(None, sample_user_data) == "Invalid credentials."


class TestSessionTokens:
    """Test session token helpers"""

    def test_round_trip(self):
        token = create_session_token("user-1")

        assert read_session_token(token, max_age=60) == "user-1"

    def test_missing_token(self):
        assert read_session_token(None, max_age=60) is None
        assert read_session_token("", max_age=60) is None

    def test_tampered_token(self):
        token = create_session_token("user-1")

        assert read_session_token(token[:-4] + "AAAA", max_age=60) is None

    def test_expired_token(self):
        token = create_session_token("user-1")

        with patch("cryptography.fernet.time.time", return_value=10 ** 12):
            assert read_session_token(token, max_age=60) is None


class TestAuthErrors:
    def test_credentials_signin_is_auth_error(self):
        assert issubclass(CredentialsSignin, AuthError)
        assert CredentialsSignin.type == "CredentialsSignin"
