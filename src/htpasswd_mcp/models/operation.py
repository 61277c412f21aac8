"""Descriptors and results for registered tools and prompts."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ToolSpec(BaseModel):
    """Metadata advertised for a callable tool."""

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=lambda: {"type": "object", "properties": {}})

    @property
    def required_fields(self) -> list[str]:
        return list(self.input_schema.get("required", []))


class PromptArgument(BaseModel):
    name: str
    description: str = ""
    required: bool = False


class PromptSpec(BaseModel):
    """Metadata advertised for an interactive prompt."""

    name: str
    description: str = ""
    arguments: list[PromptArgument] = Field(default_factory=list)


class ToolResult(BaseModel):
    """Outcome of a tool call; errors are carried as data."""

    text: str
    is_error: bool = False


class PromptMessage(BaseModel):
    role: Literal["user", "assistant"] = "assistant"
    text: str


class PromptResult(BaseModel):
    """Outcome of a prompt request, framed as conversational messages."""

    description: str = ""
    messages: list[PromptMessage] = Field(default_factory=list)
