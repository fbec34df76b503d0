"""Enumerations and options for Messenger Graph API payloads."""

from dataclasses import dataclass
from enum import Enum


class ProfileField(str, Enum):
    """Messenger Profile fields managed through ``me/messenger_profile``."""

    GET_STARTED = "get_started"
    PERSISTENT_MENU = "persistent_menu"
    GREETING = "greeting"
    WHITELISTED_DOMAINS = "whitelisted_domains"


class SenderAction(str, Enum):
    """Sender actions accepted by the Send API."""

    TYPING_ON = "typing_on"
    TYPING_OFF = "typing_off"
    MARK_SEEN = "mark_seen"


class AttachmentType(str, Enum):
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    FILE = "file"
    TEMPLATE = "template"


@dataclass(frozen=True)
class PersistentMenuOptions:
    """Options for ``set_persistent_menu``.

    Attributes:
        input_disabled: Disable the composer so users can only use the menu
        locale: Menu locale
    """

    input_disabled: bool = False
    locale: str = "default"
