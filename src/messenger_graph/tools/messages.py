"""Send API tools for the Messenger MCP server."""

from typing import Any, Dict, List

from mcp.types import Tool

from ..graph import GraphAPIClient, SenderAction

MEDIA_KINDS = ["image", "audio", "video", "file"]
SENDER_ACTIONS = [action.value for action in SenderAction]

MESSAGE_TOOLS: List[Tool] = [
    Tool(
        name="messenger_send_text",
        description="Send a text message to a Messenger user",
        inputSchema={
            "type": "object",
            "properties": {
                "recipient_id": {
                    "type": "string",
                    "description": "Page-scoped ID of the recipient",
                },
                "text": {
                    "type": "string",
                    "description": "Message text",
                },
            },
            "required": ["recipient_id", "text"],
        },
    ),
    Tool(
        name="messenger_send_media",
        description="Send an image, audio, video or file attachment by URL",
        inputSchema={
            "type": "object",
            "properties": {
                "recipient_id": {
                    "type": "string",
                    "description": "Page-scoped ID of the recipient",
                },
                "kind": {
                    "type": "string",
                    "enum": MEDIA_KINDS,
                    "description": "Attachment type",
                },
                "url": {
                    "type": "string",
                    "description": "Public URL of the media",
                },
            },
            "required": ["recipient_id", "kind", "url"],
        },
    ),
    Tool(
        name="messenger_send_button_template",
        description="Send a button template: text with up to three buttons",
        inputSchema={
            "type": "object",
            "properties": {
                "recipient_id": {
                    "type": "string",
                    "description": "Page-scoped ID of the recipient",
                },
                "text": {
                    "type": "string",
                    "description": "Text shown above the buttons",
                },
                "buttons": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Buttons (postback, web_url, phone_number)",
                },
            },
            "required": ["recipient_id", "text", "buttons"],
        },
    ),
    Tool(
        name="messenger_send_generic_template",
        description="Send a generic template (carousel of elements)",
        inputSchema={
            "type": "object",
            "properties": {
                "recipient_id": {
                    "type": "string",
                    "description": "Page-scoped ID of the recipient",
                },
                "elements": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Template elements (title, subtitle, image_url, buttons)",
                },
                "image_aspect_ratio": {
                    "type": "string",
                    "enum": ["square", "horizontal"],
                    "description": "Aspect ratio of element images. Default: square",
                    "default": "square",
                },
            },
            "required": ["recipient_id", "elements"],
        },
    ),
    Tool(
        name="messenger_send_quick_replies",
        description="Send a text or attachment message with quick reply options",
        inputSchema={
            "type": "object",
            "properties": {
                "recipient_id": {
                    "type": "string",
                    "description": "Page-scoped ID of the recipient",
                },
                "text": {
                    "type": "string",
                    "description": "Message text (required unless attachment is given)",
                },
                "attachment": {
                    "type": "object",
                    "description": "Message attachment ({type, payload}), sent instead of or with text",
                },
                "quick_replies": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Quick replies ({content_type, title, payload})",
                },
            },
            "required": ["recipient_id", "quick_replies"],
        },
    ),
    Tool(
        name="messenger_sender_action",
        description="Show typing indicators or mark the last message as seen",
        inputSchema={
            "type": "object",
            "properties": {
                "recipient_id": {
                    "type": "string",
                    "description": "Page-scoped ID of the recipient",
                },
                "action": {
                    "type": "string",
                    "enum": SENDER_ACTIONS,
                    "description": "Sender action",
                },
            },
            "required": ["recipient_id", "action"],
        },
    ),
]


async def handle_send_text(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_send_text tool call."""
    recipient_id = arguments.get("recipient_id")
    text = arguments.get("text", "")

    if not recipient_id:
        return {"error": "recipient_id is required"}
    if not text:
        return {"error": "text is required"}

    response = await client.send_text(recipient_id, text)
    return {**response.to_dict(), "recipient_id": recipient_id}


async def handle_send_media(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_send_media tool call."""
    recipient_id = arguments.get("recipient_id")
    kind = arguments.get("kind")
    url = arguments.get("url")

    if not recipient_id:
        return {"error": "recipient_id is required"}
    if kind not in MEDIA_KINDS:
        return {"error": f"kind must be one of: {MEDIA_KINDS}"}
    if not url:
        return {"error": "url is required"}

    senders = {
        "image": client.send_image,
        "audio": client.send_audio,
        "video": client.send_video,
        "file": client.send_file,
    }
    response = await senders[kind](recipient_id, url)
    return {**response.to_dict(), "recipient_id": recipient_id, "kind": kind}


async def handle_send_button_template(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_send_button_template tool call."""
    recipient_id = arguments.get("recipient_id")
    text = arguments.get("text", "")
    buttons = arguments.get("buttons", [])

    if not recipient_id:
        return {"error": "recipient_id is required"}
    if not text:
        return {"error": "text is required"}
    if not buttons:
        return {"error": "At least one button is required"}

    response = await client.send_button_template(recipient_id, text, buttons)
    return {**response.to_dict(), "recipient_id": recipient_id}


async def handle_send_generic_template(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_send_generic_template tool call."""
    recipient_id = arguments.get("recipient_id")
    elements = arguments.get("elements", [])
    image_aspect_ratio = arguments.get("image_aspect_ratio", "square")

    if not recipient_id:
        return {"error": "recipient_id is required"}
    if not elements:
        return {"error": "At least one element is required"}

    response = await client.send_generic_template(
        recipient_id,
        elements,
        image_aspect_ratio=image_aspect_ratio,
    )
    return {**response.to_dict(), "recipient_id": recipient_id}


async def handle_send_quick_replies(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_send_quick_replies tool call."""
    recipient_id = arguments.get("recipient_id")
    text = arguments.get("text") or None
    attachment = arguments.get("attachment") or None
    quick_replies = arguments.get("quick_replies", [])

    if not recipient_id:
        return {"error": "recipient_id is required"}
    if text is None and attachment is None:
        return {"error": "text or attachment is required"}
    if not quick_replies:
        return {"error": "At least one quick reply is required"}

    response = await client.send_quick_replies(recipient_id, text, attachment, quick_replies)
    return {**response.to_dict(), "recipient_id": recipient_id}


async def handle_sender_action(
    arguments: Dict[str, Any],
    client: GraphAPIClient,
) -> Dict[str, Any]:
    """Handle messenger_sender_action tool call."""
    recipient_id = arguments.get("recipient_id")
    action = arguments.get("action")

    if not recipient_id:
        return {"error": "recipient_id is required"}
    if action not in SENDER_ACTIONS:
        return {"error": f"action must be one of: {SENDER_ACTIONS}"}

    response = await client.set_sender_action(recipient_id, SenderAction(action))
    return {**response.to_dict(), "recipient_id": recipient_id, "action": action}


MESSAGE_HANDLERS = {
    "messenger_send_text": handle_send_text,
    "messenger_send_media": handle_send_media,
    "messenger_send_button_template": handle_send_button_template,
    "messenger_send_generic_template": handle_send_generic_template,
    "messenger_send_quick_replies": handle_send_quick_replies,
    "messenger_sender_action": handle_sender_action,
}
