"""Facebook Messenger Graph API client and MCP server."""

from .config import MessengerConfig
from .graph import (
    GraphAPIClient,
    GraphAPIError,
    GraphResponse,
    PersistentMenuOptions,
    ProfileField,
    SenderAction,
)

__all__ = [
    "GraphAPIClient",
    "GraphAPIError",
    "GraphResponse",
    "MessengerConfig",
    "PersistentMenuOptions",
    "ProfileField",
    "SenderAction",
]
