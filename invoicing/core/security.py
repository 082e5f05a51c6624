"""Security helpers (hashing and verification)."""

from __future__ import annotations

import bcrypt
from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_ARGON2_PREFIX = "argon2$"
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
BCRYPT_ROUNDS = 10


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Salted bcrypt hash (``$2b$10$...``), the format the users table stores."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def is_bcrypt_hash(stored_hash: str | None) -> bool:
    return (stored_hash or "").startswith(_BCRYPT_PREFIXES)


def _bcrypt_rounds(stored: str) -> int:
    try:
        return int(stored.split("$")[2])
    except (IndexError, ValueError):
        return 0


def needs_rehash(stored_hash: str | None) -> bool:
    """True for Argon2 hashes and for bcrypt hashes with another work factor."""
    stored = stored_hash or ""
    if not is_bcrypt_hash(stored):
        return True
    return _bcrypt_rounds(stored) != BCRYPT_ROUNDS


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if is_bcrypt_hash(stored):
        try:
            return bcrypt.checkpw(password.encode(), stored.encode())
        except ValueError:
            return False
    if stored.startswith(_ARGON2_PREFIX):
        hashed = stored[len(_ARGON2_PREFIX) :]
        try:
            return _ph.verify(hashed, password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    return False
