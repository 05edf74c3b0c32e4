"""Password hashing and strength checks."""
import re
from typing import Optional

import bcrypt

from console.config import settings

# bcrypt ignores everything past this many bytes
MAX_PASSWORD_BYTES = 72

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;':\",.<>?/"

_PASSWORD_RULES = (
    (re.compile(r"[A-Z]"), "uppercase letter"),
    (re.compile(r"[a-z]"), "lowercase letter"),
    (re.compile(r"\d"), "digit"),
    (re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]"), "special character"),
)


def generate_salt() -> bytes:
    """Generate a bcrypt salt (cost factor included) for a new password."""
    return bcrypt.gensalt(rounds=settings.password_bcrypt_rounds)


def hash_password(password: str, salt: bytes) -> bytes:
    """Hash a password with the given bcrypt salt."""
    return bcrypt.hashpw(password.encode("utf-8"), salt)


def verify_password(password: str, password_hash: bytes) -> bool:
    """Verify a plain password against its bcrypt hash."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password_bytes, password_hash)


def password_problems(password: str, min_length: Optional[int] = None) -> list[str]:
    """Return the list of strength rules the password breaks (empty if strong)."""
    min_length = min_length or settings.password_min_length
    problems = []
    if len(password) < min_length:
        problems.append(f"shorter than {min_length} characters")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        problems.append(f"longer than {MAX_PASSWORD_BYTES} bytes")
    for pattern, name in _PASSWORD_RULES:
        if not pattern.search(password):
            problems.append(f"missing {name}")
    return problems
