# Services/passwords.py
import secrets

from passlib.context import CryptContext

GENERATED_PASSWORD_BYTES = 16

_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return _pwd_context.verify(password, password_hash)


def auto_generate_hash_password() -> str:
    """Hash of a random secret; the plain value is never kept or returned."""
    return hash_password(secrets.token_urlsafe(GENERATED_PASSWORD_BYTES))
