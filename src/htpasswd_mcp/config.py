"""Server configuration — singleton Settings resolved at startup."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from htpasswd_mcp.constants import (
    DEFAULT_BCRYPT_ROUNDS,
    DEFAULT_LOG_LEVEL,
    MAX_BCRYPT_ROUNDS,
    MIN_BCRYPT_ROUNDS,
    SERVER_NAME,
    SERVER_VERSION,
)


class Settings(BaseSettings):
    """Runtime configuration read from ``HTPASSWD_MCP_*`` environment variables."""

    server_name: str = SERVER_NAME
    server_version: str = SERVER_VERSION
    bcrypt_rounds: int = Field(default=DEFAULT_BCRYPT_ROUNDS, ge=MIN_BCRYPT_ROUNDS, le=MAX_BCRYPT_ROUNDS)
    log_level: str = DEFAULT_LOG_LEVEL
    audit_jsonl_path: Path | None = None

    model_config = SettingsConfigDict(env_prefix="HTPASSWD_MCP_")


@lru_cache(maxsize=1)
def get_config() -> Settings:
    """Return the global Settings (resolved once, cached)."""
    return Settings()
