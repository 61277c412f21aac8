"""htpasswd MCP — bcrypt htpasswd entry generation over the Model Context Protocol."""

from htpasswd_mcp.constants import SERVER_NAME, SERVER_VERSION
from htpasswd_mcp.errors import (
    CryptoUnavailableError,
    HtpasswdError,
    UnknownOperationError,
    ValidationError,
)
from htpasswd_mcp.services.htpasswd import create_entry, create_htpasswd

__version__ = SERVER_VERSION

__all__ = [
    "CryptoUnavailableError",
    "HtpasswdError",
    "SERVER_NAME",
    "SERVER_VERSION",
    "UnknownOperationError",
    "ValidationError",
    "create_entry",
    "create_htpasswd",
]
