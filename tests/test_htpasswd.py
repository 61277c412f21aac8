"""Tests for bcrypt htpasswd service."""

from __future__ import annotations

import re

import bcrypt
import pytest

from htpasswd_mcp.errors import CryptoUnavailableError, ValidationError
from htpasswd_mcp.models import HtpasswdEntry
from htpasswd_mcp.services.htpasswd import (
    create_entry,
    create_htpasswd,
    hash_password,
    validate_credentials,
    verify_entry,
)

ENTRY_PATTERN = re.compile(r"^alice:\$2[aby]\$10\$[A-Za-z0-9./]{53}$")


class TestHtpasswd:
    def test_hash_password_is_bcrypt(self):
        hashed = hash_password("secret123")
        # bcrypt hashes start with $2b$ and carry the cost factor
        assert hashed.startswith("$2b$10$")
        assert len(hashed) == 60
        assert bcrypt.checkpw(b"secret123", hashed.encode())

    def test_create_htpasswd_line(self):
        line = create_htpasswd("admin", "password", rounds=4)
        assert line.startswith("admin:$2b$04$")
        user, hashed = line.split(":", 1)
        assert user == "admin"
        assert bcrypt.checkpw(b"password", hashed.encode())

    def test_alice_scenario(self):
        line = create_htpasswd("alice", "s3cret")
        assert ENTRY_PATTERN.match(line)
        assert verify_entry(line, "s3cret")
        assert not verify_entry(line, "wrong")

    def test_fresh_salt_each_call(self):
        first = create_htpasswd("bob", "pw", rounds=4)
        second = create_htpasswd("bob", "pw", rounds=4)
        assert first != second
        assert verify_entry(first, "pw")
        assert verify_entry(second, "pw")

    def test_create_entry_model(self):
        entry = create_entry("carol", "hunter2", rounds=4)
        assert isinstance(entry, HtpasswdEntry)
        assert entry.username == "carol"
        assert entry.to_line() == f"carol:{entry.hash}"

    def test_unicode_credentials(self):
        line = create_htpasswd("zoë", "pässwörd", rounds=4)
        assert line.startswith("zoë:")
        assert verify_entry(line, "pässwörd")

    def test_long_password_uses_first_72_bytes(self):
        password = "x" * 100
        line = create_htpasswd("dave", password, rounds=4)
        assert verify_entry(line, password)
        assert verify_entry(line, "x" * 72)


class TestValidation:
    @pytest.mark.parametrize(
        ("username", "password", "message"),
        [
            ("", "pw", "Username cannot be empty"),
            ("user", "", "Password cannot be empty"),
            ("us:er", "pw", "Username cannot contain a colon (:)"),
            (None, "pw", "Username must be a string"),
            ("user", 42, "Password must be a string"),
        ],
    )
    def test_rejects_bad_input(self, username, password, message):
        with pytest.raises(ValidationError, match=re.escape(message)):
            create_htpasswd(username, password, rounds=4)

    def test_password_hidden_in_repr(self):
        pair = validate_credentials("erin", "topsecret")
        assert "topsecret" not in repr(pair)
        assert pair.password.get_secret_value() == "topsecret"


class TestCryptoFailure:
    def test_random_source_unavailable(self, monkeypatch):
        def broken_gensalt(*args, **kwargs):
            raise OSError("no entropy")

        monkeypatch.setattr(bcrypt, "gensalt", broken_gensalt)
        with pytest.raises(CryptoUnavailableError) as excinfo:
            create_htpasswd("frank", "pw")
        assert excinfo.value.exit_code == 2


class TestVerifyEntry:
    def test_missing_hash(self):
        assert not verify_entry("nohash", "pw")

    def test_malformed_hash(self):
        assert not verify_entry("user:not-a-bcrypt-hash", "pw")
