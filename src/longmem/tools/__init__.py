"""Tool interface and registry shared with the agent host."""

from .base import Tool, ToolResult
from .registry import ToolRegistry

__all__ = [
    "Tool",
    "ToolResult",
    "ToolRegistry",
]
