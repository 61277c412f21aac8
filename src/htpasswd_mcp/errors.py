"""Custom exceptions for the htpasswd MCP server."""

from __future__ import annotations


class HtpasswdError(Exception):
    """Base exception for all htpasswd operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class ValidationError(HtpasswdError):
    """Credential input is malformed (empty field, colon in username)."""


class CryptoUnavailableError(HtpasswdError):
    """Secure random source or bcrypt primitive is unavailable."""

    def __init__(self, message: str, *, exit_code: int = 2):
        super().__init__(message, exit_code=exit_code)


class UnknownOperationError(HtpasswdError):
    """Requested tool or prompt is not registered."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"{kind.capitalize()} not found: {name}")
        self.kind = kind
        self.name = name
