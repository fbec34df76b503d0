"""Messenger Profile tools for the Messenger MCP server."""

from typing import Any, Dict, List

from mcp.types import Tool

from ..graph import GraphAPIClient, PersistentMenuOptions, ProfileField

PROFILE_FIELDS = [field.value for field in ProfileField]

PROFILE_TOOLS: List[Tool] = [
    Tool(
        name="messenger_get_profile",
        description="Read a Messenger Profile field of the page",
        inputSchema={
            "type": "object",
            "properties": {
                "field": {
                    "type": "string",
                    "enum": PROFILE_FIELDS,
                    "description": "Profile field to read",
                },
            },
            "required": ["field"],
        },
    ),
    Tool(
        name="messenger_set_get_started",
        description="Set the Get Started button postback payload",
        inputSchema={
            "type": "object",
            "properties": {
                "payload": {
                    "type": "string",
                    "description": "Postback payload sent when the user taps Get Started",
                },
            },
            "required": ["payload"],
        },
    ),
    Tool(
        name="messenger_set_greeting",
        description="Set the greeting text shown before a conversation starts",
        inputSchema={
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": "Greeting text",
                },
            },
            "required": ["text"],
        },
    ),
    Tool(
        name="messenger_set_persistent_menu",
        description="Set the persistent menu of the page",
        inputSchema={
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Menu call-to-actions (postback or web_url buttons)",
                },
                "input_disabled": {
                    "type": "boolean",
                    "description": "Disable the composer so users can only use the menu. Default: false",
                    "default": False,
                },
            },
            "required": ["items"],
        },
    ),
    Tool(
        name="messenger_set_domain_whitelist",
        description="Set the domains whitelisted for webviews and extensions",
        inputSchema={
            "type": "object",
            "properties": {
                "domains": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Domains to whitelist",
                },
            },
            "required": ["domains"],
        },
    ),
    Tool(
        name="messenger_delete_profile_field",
        description="Delete a Messenger Profile field of the page",
        inputSchema={
            "type": "object",
            "properties": {
                "field": {
                    "type": "string",
                    "enum": PROFILE_FIELDS,
                    "description": "Profile field to delete",
                },
            },
            "required": ["field"],
        },
    ),
]


def _parse_field(arguments: Dict[str, Any]) -> ProfileField | None:
    try:
        return ProfileField(arguments.get("field"))
    except ValueError:
        return None


async def handle_get_profile(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_get_profile tool call."""
    field = _parse_field(arguments)
    if field is None:
        return {"error": f"field must be one of: {PROFILE_FIELDS}"}

    getters = {
        ProfileField.GET_STARTED: client.get_get_started_button,
        ProfileField.PERSISTENT_MENU: client.get_persistent_menu,
        ProfileField.GREETING: client.get_greeting_text,
        ProfileField.WHITELISTED_DOMAINS: client.get_domain_whitelist,
    }
    response = await getters[field]()
    return response.to_dict()


async def handle_set_get_started(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_set_get_started tool call."""
    payload = arguments.get("payload")
    if not payload:
        return {"error": "payload is required"}

    response = await client.set_get_started_button(payload)
    return response.to_dict()


async def handle_set_greeting(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_set_greeting tool call."""
    text = arguments.get("text")
    if not text:
        return {"error": "text is required"}

    response = await client.set_greeting_text(text)
    return response.to_dict()


async def handle_set_persistent_menu(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_set_persistent_menu tool call."""
    items = arguments.get("items", [])
    if not items:
        return {"error": "At least one menu item is required"}

    options = PersistentMenuOptions(input_disabled=bool(arguments.get("input_disabled", False)))
    response = await client.set_persistent_menu(items, options)
    return response.to_dict()


async def handle_set_domain_whitelist(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_set_domain_whitelist tool call."""
    domains = arguments.get("domains", [])
    if not domains:
        return {"error": "At least one domain is required"}

    response = await client.set_domain_whitelist(domains)
    return response.to_dict()


async def handle_delete_profile_field(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_delete_profile_field tool call."""
    field = _parse_field(arguments)
    if field is None:
        return {"error": f"field must be one of: {PROFILE_FIELDS}"}

    deleters = {
        ProfileField.GET_STARTED: client.delete_get_started_button,
        ProfileField.PERSISTENT_MENU: client.delete_persistent_menu,
        ProfileField.GREETING: client.delete_greeting_text,
        ProfileField.WHITELISTED_DOMAINS: client.delete_domain_whitelist,
    }
    response = await deleters[field]()
    return response.to_dict()


PROFILE_HANDLERS = {
    "messenger_get_profile": handle_get_profile,
    "messenger_set_get_started": handle_set_get_started,
    "messenger_set_greeting": handle_set_greeting,
    "messenger_set_persistent_menu": handle_set_persistent_menu,
    "messenger_set_domain_whitelist": handle_set_domain_whitelist,
    "messenger_delete_profile_field": handle_delete_profile_field,
}
