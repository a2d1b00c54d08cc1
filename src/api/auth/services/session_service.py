import logging
from typing import Optional
from cryptography.fernet import InvalidToken
from src.api.common.utils.encryption import encrypt_data, decrypt_data

logger = logging.getLogger(__name__)


def create_session_token(user_id: str) -> str:
    """Issue a signed, timestamped token naming the signed-in user"""
    return encrypt_data(user_id)


def read_session_token(token: Optional[str], max_age: int) -> Optional[str]:
    """
    Get the user id from a session token

    Returns None for a missing, tampered or expired token.
    """
    if not token:
        return None
    try:
        return decrypt_data(token, ttl=max_age) or None
    except InvalidToken:
        logger.debug("Rejected invalid or expired session token")
        return None
