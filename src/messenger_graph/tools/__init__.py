"""MCP Tools for Messenger operations."""

from typing import Callable, Dict, List, Optional

from mcp.types import Tool

from .messages import MESSAGE_HANDLERS, MESSAGE_TOOLS
from .profile import PROFILE_HANDLERS, PROFILE_TOOLS
from .users import USER_HANDLERS, USER_TOOLS

# Combine all tools
ALL_TOOLS: List[Tool] = PROFILE_TOOLS + MESSAGE_TOOLS + USER_TOOLS

# Combine all handlers
ALL_HANDLERS: Dict[str, Callable] = {
    **PROFILE_HANDLERS,
    **MESSAGE_HANDLERS,
    **USER_HANDLERS,
}


def get_tool_handler(name: str) -> Optional[Callable]:
    """Get the handler function for a tool.

    Args:
        name: The tool name

    Returns:
        The handler function if found, None otherwise.
    """
    return ALL_HANDLERS.get(name)


__all__ = [
    "ALL_TOOLS",
    "ALL_HANDLERS",
    "get_tool_handler",
]
