"""
Membership Backend — Password Hashing
=======================================

What:  Hashes member passwords with PBKDF2-SHA256 (passlib).
How:   Every hash uses the same process-wide salt from settings
       (PASSWORD_SALT), so equal passwords produce equal hashes.
Who:   The members route handlers, through the get_password_hasher
       dependency. Services never see a plaintext password.

Stored format (passlib modular crypt):
    $pbkdf2-sha256$29000$<salt>$<checksum>
"""

from fastapi import Depends
from passlib.hash import pbkdf2_sha256

from app.config import Settings, get_settings
from app.exceptions import ConfigurationError


class PasswordHasher:
    """Salted PBKDF2 hashing bound to one configured salt."""

    def __init__(self, salt: str):
        if not salt:
            raise ConfigurationError(
                message="PASSWORD_SALT is not configured",
                context={"setting": "PASSWORD_SALT"},
            )
        self._handler = pbkdf2_sha256.using(salt=salt.encode("utf-8"))

    def hash(self, password: str) -> str:
        return self._handler.hash(password)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    """FastAPI dependency building a hasher from the injected settings."""
    return PasswordHasher(settings.password_salt)
