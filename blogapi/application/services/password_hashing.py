"""Password hashing backed by Werkzeug's salted hash strings."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from blogapi.domain.users.repositories import PasswordHasher
from blogapi.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, *, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password: str, hashed: str) -> bool:
        # A stored value Werkzeug cannot parse is treated as a failed check.
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            logger.warning("auth.verify: unreadable stored password hash")
            return False
