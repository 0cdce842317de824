"""Pydantic schemas for the storage tool server."""

from shared.schemas.tools import (
    ErrorKind,
    ModuleManifest,
    ToolCall,
    ToolDefinition,
    ToolParameter,
    ToolResult,
)

__all__ = [
    "ErrorKind",
    "ModuleManifest",
    "ToolCall",
    "ToolDefinition",
    "ToolParameter",
    "ToolResult",
]
