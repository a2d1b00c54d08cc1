import logging
import os
from typing import Optional
from cryptography.exceptions import InvalidKey
from cryptography.fernet import Fernet
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

PASSWORD_HASH_ITERATIONS = 390_000

# Get the session signing key from environment or generate one
AUTH_SECRET = os.getenv("AUTH_SECRET")
if not AUTH_SECRET:
    AUTH_SECRET = Fernet.generate_key().decode()
    logger.warning(
        "AUTH_SECRET not found in environment. Generated a temporary key; "
        "sessions will not survive a restart. Add AUTH_SECRET to your .env file.")

# Initialize Fernet cipher
cipher = Fernet(AUTH_SECRET.encode() if isinstance(
    AUTH_SECRET, str) else AUTH_SECRET)


def encrypt_data(data: str) -> str:
    """
    Encrypt and sign data into a URL-safe token

    Args:
        data: The string data to encrypt

    Returns:
        Encrypted string
    """
    if not data:
        return ""
    return cipher.encrypt(data.encode()).decode()


def decrypt_data(encrypted_data: str, ttl: Optional[int] = None) -> str:
    """
    Decrypt a token produced by encrypt_data

    Args:
        encrypted_data: The encrypted string to decrypt
        ttl: Maximum token age in seconds, None to accept any age

    Returns:
        Decrypted string

    Raises:
        cryptography.fernet.InvalidToken: if the token is malformed, tampered or expired
    """
    if not encrypted_data:
        return ""
    return cipher.decrypt(encrypted_data.encode(), ttl=ttl).decode()


def _password_kdf(salt: bytes) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=PASSWORD_HASH_ITERATIONS,
    )


def hash_password(password: str) -> str:
    """Hash a password as ``<salt hex>$<digest hex>``."""
    salt = os.urandom(16)
    digest = _password_kdf(salt).derive(password.encode())
    return f"{salt.hex()}${digest.hex()}"


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plain password against a value produced by hash_password."""
    try:
        salt_hex, digest_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        digest = bytes.fromhex(digest_hex)
    except ValueError:
        return False
    try:
        _password_kdf(salt).verify(password.encode(), digest)
    except InvalidKey:
        return False
    return True
