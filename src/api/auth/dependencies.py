from typing import Optional
from fastapi import HTTPException, Request
from src.api.auth.config import auth_config
from src.api.auth.services.session_service import read_session_token


def require_session(request: Request) -> str:
    """Dependency returning the signed-in user's id, 401 without a valid session cookie"""
    token: Optional[str] = request.cookies.get(auth_config.session_cookie)
    user_id = read_session_token(token, auth_config.session_max_age)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id
