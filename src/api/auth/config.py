import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv
from src.api.common.constants.routes import DASHBOARD_PATH

load_dotenv()

CREDENTIALS_STRATEGY = "credentials"


class AuthConfig(BaseModel):
    session_cookie: str = "session"
    session_max_age: int = Field(
        default_factory=lambda: int(os.getenv("SESSION_MAX_AGE", str(60 * 60 * 24))))
    login_redirect: str = Field(
        default_factory=lambda: os.getenv("LOGIN_REDIRECT", DASHBOARD_PATH))


auth_config = AuthConfig()
