"""Facebook Messenger Graph API client."""

import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from .models import AttachmentType, PersistentMenuOptions, ProfileField, SenderAction
from .transport import GRAPH_API_BASE, GraphResponse, GraphTransport

logger = logging.getLogger(__name__)

PROFILE_ENDPOINT = "me/messenger_profile"
MESSAGES_ENDPOINT = "me/messages"


class GraphAPIClient:
    """Wrapper around the Messenger Platform endpoints of the Graph API.

    Every method issues exactly one request and returns the transport's
    GraphResponse unchanged.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize Graph client.

        Args:
            access_token: Page access token
            base_url: Override for the Graph API base URL
            session: Optional caller-owned aiohttp session
        """
        self._http = GraphTransport(
            access_token,
            base_url=base_url or GRAPH_API_BASE,
            session=session,
        )

    def get_http_client(self) -> GraphTransport:
        """Return the underlying transport."""
        return self._http

    # ==================== Messenger Profile ====================

    async def _get_profile_field(self, field: ProfileField) -> GraphResponse:
        return await self._http.get(PROFILE_ENDPOINT, params={"fields": field.value})

    async def _set_profile_field(self, field: ProfileField, value: Any) -> GraphResponse:
        logger.info(f"Setting messenger profile field {field.value}")
        return await self._http.post(PROFILE_ENDPOINT, {field.value: value})

    async def _delete_profile_field(self, field: ProfileField) -> GraphResponse:
        logger.info(f"Deleting messenger profile field {field.value}")
        return await self._http.delete(PROFILE_ENDPOINT, {"fields": [field.value]})

    async def get_get_started_button(self) -> GraphResponse:
        return await self._get_profile_field(ProfileField.GET_STARTED)

    async def set_get_started_button(self, payload: str) -> GraphResponse:
        """Set the Get Started button.

        Args:
            payload: Postback payload delivered when the button is tapped
        """
        return await self._set_profile_field(ProfileField.GET_STARTED, {"payload": payload})

    async def delete_get_started_button(self) -> GraphResponse:
        return await self._delete_profile_field(ProfileField.GET_STARTED)

    async def get_persistent_menu(self) -> GraphResponse:
        return await self._get_profile_field(ProfileField.PERSISTENT_MENU)

    async def set_persistent_menu(
        self,
        items: list[dict[str, Any]],
        options: PersistentMenuOptions | None = None,
    ) -> GraphResponse:
        """Set the persistent menu.

        The items are wrapped into a single locale entry.

        Args:
            items: Menu call-to-actions (postback, web_url, nested)
            options: Composer and locale options

        Returns:
            Graph API response
        """
        options = options or PersistentMenuOptions()
        menu = [
            {
                "locale": options.locale,
                "composer_input_disabled": options.input_disabled,
                "call_to_actions": items,
            }
        ]
        return await self._set_profile_field(ProfileField.PERSISTENT_MENU, menu)

    async def delete_persistent_menu(self) -> GraphResponse:
        return await self._delete_profile_field(ProfileField.PERSISTENT_MENU)

    async def get_greeting_text(self) -> GraphResponse:
        return await self._get_profile_field(ProfileField.GREETING)

    async def set_greeting_text(self, text: str) -> GraphResponse:
        greeting = [{"locale": "default", "text": text}]
        return await self._set_profile_field(ProfileField.GREETING, greeting)

    async def delete_greeting_text(self) -> GraphResponse:
        return await self._delete_profile_field(ProfileField.GREETING)

    async def get_domain_whitelist(self) -> GraphResponse:
        return await self._get_profile_field(ProfileField.WHITELISTED_DOMAINS)

    async def set_domain_whitelist(self, domains: str | list[str]) -> GraphResponse:
        """Set the whitelisted domains.

        Args:
            domains: A single domain or a list of domains
        """
        if isinstance(domains, str):
            domains = [domains]
        return await self._set_profile_field(ProfileField.WHITELISTED_DOMAINS, domains)

    async def delete_domain_whitelist(self) -> GraphResponse:
        return await self._delete_profile_field(ProfileField.WHITELISTED_DOMAINS)

    # ==================== Users ====================

    async def get_user(self, user_id: str) -> GraphResponse:
        """Get a user's profile.

        The ID is percent-encoded into a single path segment.

        Args:
            user_id: Page-scoped user ID

        Returns:
            Response with first_name, last_name, profile_pic, locale, timezone, gender
        """
        return await self._http.get(quote(user_id, safe=""))

    # ==================== Send API ====================

    async def send(self, recipient: str, message: dict[str, Any]) -> GraphResponse:
        """Send a message. The message is passed through unchanged.

        Args:
            recipient: Recipient ID
            message: Message object as the Send API expects it

        Returns:
            Response with recipient_id and message_id
        """
        logger.info(f"Sending message to {recipient}")
        return await self._http.post(
            MESSAGES_ENDPOINT,
            {"recipient": {"id": recipient}, "message": message},
        )

    async def send_text(self, recipient: str, text: str) -> GraphResponse:
        return await self.send(recipient, {"text": text})

    async def send_attachment(self, recipient: str, attachment: dict[str, Any]) -> GraphResponse:
        return await self.send(recipient, {"attachment": attachment})

    async def _send_media(self, recipient: str, kind: AttachmentType, url: str) -> GraphResponse:
        return await self.send_attachment(
            recipient,
            {"type": kind.value, "payload": {"url": url}},
        )

    async def send_audio(self, recipient: str, url: str) -> GraphResponse:
        return await self._send_media(recipient, AttachmentType.AUDIO, url)

    async def send_image(self, recipient: str, url: str) -> GraphResponse:
        return await self._send_media(recipient, AttachmentType.IMAGE, url)

    async def send_video(self, recipient: str, url: str) -> GraphResponse:
        return await self._send_media(recipient, AttachmentType.VIDEO, url)

    async def send_file(self, recipient: str, url: str) -> GraphResponse:
        return await self._send_media(recipient, AttachmentType.FILE, url)

    async def send_template(self, recipient: str, payload: dict[str, Any]) -> GraphResponse:
        return await self.send_attachment(
            recipient,
            {"type": AttachmentType.TEMPLATE.value, "payload": payload},
        )

    async def send_button_template(
        self,
        recipient: str,
        text: str,
        buttons: list[dict[str, Any]],
    ) -> GraphResponse:
        return await self.send_template(
            recipient,
            {"template_type": "button", "text": text, "buttons": buttons},
        )

    async def send_generic_template(
        self,
        recipient: str,
        elements: list[dict[str, Any]],
        image_aspect_ratio: str = "square",
    ) -> GraphResponse:
        """Send a generic (carousel) template.

        Args:
            recipient: Recipient ID
            elements: Template elements
            image_aspect_ratio: "square" or "horizontal"
        """
        return await self.send_template(
            recipient,
            {
                "template_type": "generic",
                "elements": elements,
                "image_aspect_ratio": image_aspect_ratio,
            },
        )

    async def send_quick_replies(
        self,
        recipient: str,
        text: str | None,
        attachment: dict[str, Any] | None,
        quick_replies: list[dict[str, Any]],
    ) -> GraphResponse:
        """Send a text or attachment with quick replies.

        Both text and attachment are sent, even when one of them is None.

        Args:
            recipient: Recipient ID
            text: Message text
            attachment: Message attachment
            quick_replies: Quick replies ({content_type, title, payload})
        """
        return await self.send(
            recipient,
            {"text": text, "attachment": attachment, "quick_replies": quick_replies},
        )

    async def set_sender_action(self, recipient: str, action: str | SenderAction) -> GraphResponse:
        if isinstance(action, SenderAction):
            action = action.value
        return await self._http.post(
            MESSAGES_ENDPOINT,
            {"recipient": {"id": recipient}, "sender_action": action},
        )

    async def turn_typing_indicators_on(self, recipient: str) -> GraphResponse:
        return await self.set_sender_action(recipient, SenderAction.TYPING_ON)

    async def turn_typing_indicators_off(self, recipient: str) -> GraphResponse:
        return await self.set_sender_action(recipient, SenderAction.TYPING_OFF)

    async def mark_seen(self, recipient: str) -> GraphResponse:
        return await self.set_sender_action(recipient, SenderAction.MARK_SEEN)
