"""HTTP Basic Auth — bcrypt-based htpasswd generation."""

from __future__ import annotations

from typing import Any

import bcrypt

from htpasswd_mcp.constants import BCRYPT_MAX_PASSWORD_BYTES, DEFAULT_BCRYPT_ROUNDS, FIELD_SEPARATOR
from htpasswd_mcp.errors import CryptoUnavailableError, ValidationError
from htpasswd_mcp.models import CredentialPair, HtpasswdEntry


def _password_bytes(password: str) -> bytes:
    # bcrypt only consumes the first 72 bytes of a password
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def validate_credentials(username: Any, password: Any) -> CredentialPair:
    """Check a username/password pair. Raises ValidationError on bad input."""
    if not isinstance(username, str):
        raise ValidationError("Username must be a string")
    if not isinstance(password, str):
        raise ValidationError("Password must be a string")
    if not username:
        raise ValidationError("Username cannot be empty")
    if FIELD_SEPARATOR in username:
        raise ValidationError("Username cannot contain a colon (:)")
    if not password:
        raise ValidationError("Password cannot be empty")
    return CredentialPair(username=username, password=password)


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Generate a bcrypt hash suitable for htpasswd files."""
    try:
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(_password_bytes(password), salt)
    except (OSError, NotImplementedError) as exc:
        raise CryptoUnavailableError(f"bcrypt is unavailable: {exc}") from exc
    except ValueError as exc:
        raise ValidationError(f"Password cannot be hashed: {exc}") from exc
    return hashed.decode()


def create_entry(username: Any, password: Any, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> HtpasswdEntry:
    """Validate the pair and return the hashed htpasswd entry."""
    credentials = validate_credentials(username, password)
    hashed = hash_password(credentials.password.get_secret_value(), rounds=rounds)
    return HtpasswdEntry(username=credentials.username, hash=hashed)


def create_htpasswd(username: Any, password: Any, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Return a single htpasswd line: username:hash."""
    return create_entry(username, password, rounds=rounds).to_line()


def verify_entry(line: str, password: str) -> bool:
    """Check that *password* matches the hash of an htpasswd line."""
    entry = HtpasswdEntry.from_line(line)
    if not entry.hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), entry.hash.encode())
    except ValueError:
        return False
