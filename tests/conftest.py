"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from htpasswd_mcp.config import Settings, get_config


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setenv("HTPASSWD_MCP_ACTOR", "tester")
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def tmp_config(tmp_path: Path) -> Settings:
    """Return Settings with cheap bcrypt rounds and a temp audit file."""
    return Settings(
        bcrypt_rounds=4,
        audit_jsonl_path=tmp_path / "log" / "audit.jsonl",
    )
