"""
Password hashing helpers.
"""

from __future__ import annotations

import bcrypt

# bcrypt only hashes the first 72 bytes; newer releases reject longer input.
MAX_PASSWORD_BYTES = 72


class PasswordError(ValueError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordError("Password is empty.")
    if len(password) > MAX_PASSWORD_BYTES:
        raise PasswordError(f"Password is longer than {MAX_PASSWORD_BYTES} bytes.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")

