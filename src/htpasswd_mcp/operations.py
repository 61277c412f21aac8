"""The generateHtpasswd tool and its interactive prompt variant."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from htpasswd_mcp.audit import audit
from htpasswd_mcp.config import Settings
from htpasswd_mcp.constants import PROMPT_GENERATE_HTPASSWD, TOOL_GENERATE_HTPASSWD
from htpasswd_mcp.errors import ValidationError
from htpasswd_mcp.models import (
    PromptArgument,
    PromptMessage,
    PromptResult,
    PromptSpec,
    ToolResult,
    ToolSpec,
)
from htpasswd_mcp.registry import OperationRegistry
from htpasswd_mcp.services import htpasswd

log = logging.getLogger(__name__)

GENERATE_TOOL = ToolSpec(
    name=TOOL_GENERATE_HTPASSWD,
    description=(
        "Generate an htpasswd entry for Apache web server authentication. "
        "This tool creates a bcrypt-hashed password entry in the format "
        "'username:hashedpassword' that can be used in .htpasswd files."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "username": {
                "type": "string",
                "description": (
                    "The username for the htpasswd entry. This will appear before "
                    "the colon in the output. Cannot contain colons."
                ),
                "minLength": 1,
                "pattern": "^[^:]*$",
            },
            "password": {
                "type": "string",
                "description": (
                    "The plain text password to be hashed. This will be securely "
                    "hashed using bcrypt with a salt."
                ),
                "minLength": 1,
            },
        },
        "required": ["username", "password"],
    },
)

GENERATE_PROMPT = PromptSpec(
    name=PROMPT_GENERATE_HTPASSWD,
    description="Interactive prompt to generate htpasswd entries with user input validation",
    arguments=[
        PromptArgument(
            name="username",
            description=(
                "The username for the htpasswd entry. This will be the name before "
                "the colon in the htpasswd entry."
            ),
            required=True,
        ),
        PromptArgument(
            name="password",
            description="The password to be hashed. This will be securely hashed using bcrypt.",
            required=True,
        ),
    ],
)


async def generate_entry(username: Any, password: Any, rounds: int) -> str:
    """Hash off the event loop; bcrypt is CPU-bound."""
    return await asyncio.to_thread(htpasswd.create_htpasswd, username, password, rounds)


def _target(arguments: dict[str, Any]) -> str:
    username = arguments.get("username")
    return username if isinstance(username, str) else ""


def make_generate_tool(cfg: Settings):
    async def handle(arguments: dict[str, Any]) -> ToolResult:
        with audit("tool.generate_htpasswd", target=_target(arguments)) as event:
            try:
                line = await generate_entry(arguments.get("username"), arguments.get("password"), cfg.bcrypt_rounds)
            except ValidationError as exc:
                event.result = "rejected"
                event.error = str(exc)
                return ToolResult(text=f"Error generating htpasswd: {exc}", is_error=True)
        return ToolResult(text=line)

    return handle


def make_generate_prompt(cfg: Settings):
    async def handle(arguments: dict[str, Any]) -> PromptResult:
        with audit("prompt.generate_htpasswd", target=_target(arguments)) as event:
            try:
                line = await generate_entry(arguments.get("username"), arguments.get("password"), cfg.bcrypt_rounds)
            except ValidationError as exc:
                event.result = "rejected"
                event.error = str(exc)
                return PromptResult(
                    description="Error generating htpasswd entry",
                    messages=[PromptMessage(text=f"Error: {exc}")],
                )
        return PromptResult(
            description="Generated htpasswd entry",
            messages=[PromptMessage(text=line)],
        )

    return handle


def build_registry(cfg: Settings) -> OperationRegistry:
    """Register every operation the server exposes."""
    registry = OperationRegistry()
    registry.add_tool(GENERATE_TOOL, make_generate_tool(cfg))
    registry.add_prompt(GENERATE_PROMPT, make_generate_prompt(cfg))
    log.debug("Registered tools=%s prompts=%s", [t.name for t in registry.list_tools()], [p.name for p in registry.list_prompts()])
    return registry
