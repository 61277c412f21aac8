"""Shared constants for the htpasswd MCP server."""

# Server identity
SERVER_NAME = "HtpasswdToolServer"
SERVER_VERSION = "1.0.0"

# Operation names
TOOL_GENERATE_HTPASSWD = "generateHtpasswd"
PROMPT_GENERATE_HTPASSWD = "interactiveGenerateHtpasswd"

# bcrypt
DEFAULT_BCRYPT_ROUNDS = 10
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31
BCRYPT_MAX_PASSWORD_BYTES = 72

# htpasswd line format
FIELD_SEPARATOR = ":"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
