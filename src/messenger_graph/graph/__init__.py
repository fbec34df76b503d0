"""Facebook Messenger Graph API client module."""

from .client import GraphAPIClient
from .models import AttachmentType, PersistentMenuOptions, ProfileField, SenderAction
from .transport import GRAPH_API_BASE, GraphAPIError, GraphResponse, GraphTransport

__all__ = [
    "GRAPH_API_BASE",
    "AttachmentType",
    "GraphAPIClient",
    "GraphAPIError",
    "GraphResponse",
    "GraphTransport",
    "PersistentMenuOptions",
    "ProfileField",
    "SenderAction",
]
