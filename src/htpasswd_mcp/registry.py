"""Explicit name -> handler registry for tools and prompts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from htpasswd_mcp.errors import UnknownOperationError
from htpasswd_mcp.models import PromptResult, PromptSpec, ToolResult, ToolSpec

log = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolResult]]
PromptHandler = Callable[[dict[str, Any]], Awaitable[PromptResult]]


@dataclass(frozen=True)
class _ToolBinding:
    spec: ToolSpec
    handler: ToolHandler


@dataclass(frozen=True)
class _PromptBinding:
    spec: PromptSpec
    handler: PromptHandler


class OperationRegistry:
    """Tools and prompts keyed by name, populated once at startup."""

    def __init__(self) -> None:
        self._tools: dict[str, _ToolBinding] = {}
        self._prompts: dict[str, _PromptBinding] = {}

    def add_tool(self, spec: ToolSpec, handler: ToolHandler) -> None:
        if spec.name in self._tools:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._tools[spec.name] = _ToolBinding(spec, handler)

    def add_prompt(self, spec: PromptSpec, handler: PromptHandler) -> None:
        if spec.name in self._prompts:
            raise ValueError(f"Prompt already registered: {spec.name}")
        self._prompts[spec.name] = _PromptBinding(spec, handler)

    def list_tools(self) -> list[ToolSpec]:
        return [binding.spec for binding in self._tools.values()]

    def list_prompts(self) -> list[PromptSpec]:
        return [binding.spec for binding in self._prompts.values()]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Run a tool. Raises UnknownOperationError if *name* is not registered."""
        binding = self._tools.get(name)
        if binding is None:
            log.warning("Unknown tool requested: %s", name)
            raise UnknownOperationError("tool", name)
        return await binding.handler(arguments or {})

    async def get_prompt(self, name: str, arguments: dict[str, Any] | None = None) -> PromptResult:
        """Render a prompt. Raises UnknownOperationError if *name* is not registered."""
        binding = self._prompts.get(name)
        if binding is None:
            log.warning("Unknown prompt requested: %s", name)
            raise UnknownOperationError("prompt", name)
        return await binding.handler(arguments or {})
