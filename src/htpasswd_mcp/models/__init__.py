"""Shared Pydantic models."""

from htpasswd_mcp.models.audit_event import AuditEvent
from htpasswd_mcp.models.credentials import CredentialPair, HtpasswdEntry
from htpasswd_mcp.models.operation import (
    PromptArgument,
    PromptMessage,
    PromptResult,
    PromptSpec,
    ToolResult,
    ToolSpec,
)

__all__ = [
    "AuditEvent",
    "CredentialPair",
    "HtpasswdEntry",
    "PromptArgument",
    "PromptMessage",
    "PromptResult",
    "PromptSpec",
    "ToolResult",
    "ToolSpec",
]
