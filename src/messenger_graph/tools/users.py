"""User profile tools for the Messenger MCP server."""

from typing import Any, Dict, List

from mcp.types import Tool

from ..graph import GraphAPIClient

USER_TOOLS: List[Tool] = [
    Tool(
        name="messenger_get_user",
        description="Get a Messenger user's public profile (name, picture, locale, timezone)",
        inputSchema={
            "type": "object",
            "properties": {
                "user_id": {
                    "type": "string",
                    "description": "Page-scoped ID of the user",
                },
            },
            "required": ["user_id"],
        },
    ),
]


async def handle_get_user(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_get_user tool call."""
    user_id = arguments.get("user_id")
    if not user_id:
        return {"error": "user_id is required"}

    response = await client.get_user(user_id)
    return response.to_dict()


USER_HANDLERS = {
    "messenger_get_user": handle_get_user,
}
