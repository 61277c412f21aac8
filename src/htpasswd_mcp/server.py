"""MCP server wiring: registry -> SDK low-level Server over stdio."""

from __future__ import annotations

import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from htpasswd_mcp.config import Settings
from htpasswd_mcp.errors import UnknownOperationError
from htpasswd_mcp.models import PromptResult, PromptSpec, ToolResult, ToolSpec
from htpasswd_mcp.operations import build_registry
from htpasswd_mcp.registry import OperationRegistry

log = logging.getLogger(__name__)


def to_mcp_tool(spec: ToolSpec) -> types.Tool:
    return types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema)


def to_mcp_prompt(spec: PromptSpec) -> types.Prompt:
    return types.Prompt(
        name=spec.name,
        description=spec.description,
        arguments=[
            types.PromptArgument(name=arg.name, description=arg.description, required=arg.required)
            for arg in spec.arguments
        ],
    )


def to_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def to_prompt_result(result: PromptResult) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=result.description,
        messages=[
            types.PromptMessage(role=msg.role, content=types.TextContent(type="text", text=msg.text))
            for msg in result.messages
        ],
    )


def not_found(exc: UnknownOperationError) -> McpError:
    return McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(exc)))


def build_server(cfg: Settings, registry: OperationRegistry | None = None) -> Server:
    """Create the SDK server and bind the registry's handlers to it.

    ``tools/call`` is bound directly on ``request_handlers`` instead of through
    ``Server.call_tool()``: the decorator checks arguments against the input
    schema before the handler runs and turns every exception into an
    ``isError`` result. Credential checks belong to ``validate_credentials``,
    and an unknown tool must reach the client as a JSON-RPC error.
    """
    registry = registry or build_registry(cfg)
    server: Server = Server(cfg.server_name, version=cfg.server_version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(spec) for spec in registry.list_tools()]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await registry.call_tool(req.params.name, req.params.arguments)
        except UnknownOperationError as exc:
            raise not_found(exc) from exc
        return types.ServerResult(to_tool_result(result))

    server.request_handlers[types.CallToolRequest] = call_tool

    @server.list_prompts()
    async def list_prompts() -> list[types.Prompt]:
        return [to_mcp_prompt(spec) for spec in registry.list_prompts()]

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        try:
            result = await registry.get_prompt(name, arguments)
        except UnknownOperationError as exc:
            raise not_found(exc) from exc
        return to_prompt_result(result)

    return server


async def serve_stdio(cfg: Settings) -> None:
    """Serve over stdin/stdout until the client disconnects."""
    server = build_server(cfg)
    async with stdio_server() as (read_stream, write_stream):
        log.info("%s %s listening on stdio", cfg.server_name, cfg.server_version)
        await server.run(read_stream, write_stream, server.create_initialization_options())
