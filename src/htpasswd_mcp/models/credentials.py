"""Credential pair and derived htpasswd entry models."""

from __future__ import annotations

from pydantic import BaseModel, SecretStr

from htpasswd_mcp.constants import FIELD_SEPARATOR


class CredentialPair(BaseModel):
    """A username/password pair that lives for one hashing call."""

    username: str
    password: SecretStr


class HtpasswdEntry(BaseModel):
    """A single ``username:hash`` htpasswd line."""

    username: str
    hash: str

    def to_line(self) -> str:
        return f"{self.username}{FIELD_SEPARATOR}{self.hash}"

    @classmethod
    def from_line(cls, line: str) -> HtpasswdEntry:
        username, _, hashed = line.strip().partition(FIELD_SEPARATOR)
        return cls(username=username, hash=hashed)
