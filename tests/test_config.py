"""Tests for Settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from htpasswd_mcp.config import Settings, get_config


class TestSettings:
    def test_defaults(self):
        cfg = Settings()
        assert cfg.server_name == "HtpasswdToolServer"
        assert cfg.server_version == "1.0.0"
        assert cfg.bcrypt_rounds == 10
        assert cfg.log_level == "INFO"
        assert cfg.audit_jsonl_path is None

    def test_from_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HTPASSWD_MCP_BCRYPT_ROUNDS", "12")
        monkeypatch.setenv("HTPASSWD_MCP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("HTPASSWD_MCP_AUDIT_JSONL_PATH", str(tmp_path / "audit.jsonl"))
        cfg = Settings()
        assert cfg.bcrypt_rounds == 12
        assert cfg.log_level == "DEBUG"
        assert cfg.audit_jsonl_path == tmp_path / "audit.jsonl"

    def test_rounds_bounds(self):
        with pytest.raises(PydanticValidationError):
            Settings(bcrypt_rounds=3)
        with pytest.raises(PydanticValidationError):
            Settings(bcrypt_rounds=32)

    def test_get_config_cached(self):
        assert get_config() is get_config()
