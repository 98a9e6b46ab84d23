from __future__ import annotations

from passlib.context import CryptContext

from app.application.ports.password_hasher_port import PasswordHasherPort


class PasswordHasher(PasswordHasherPort):
    def __init__(self):
        # bcrypt continua aceito para hashes legados; novos hashes usam argon2.
        self._ctx = CryptContext(
            schemes=["argon2", "bcrypt"],
            deprecated="auto",
        )

    def hash(self, plain_password: str) -> str:
        return self._ctx.hash(plain_password)

    def verify(self, plain_password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return self._ctx.verify(plain_password, password_hash)
        except (ValueError, TypeError):
            return False
