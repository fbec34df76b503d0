"""Configuration for the Messenger MCP server."""

import os
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

from .graph import GRAPH_API_BASE, GraphAPIClient

ACCESS_TOKEN_ENV = "MESSENGER_ACCESS_TOKEN"
BASE_URL_ENV = "MESSENGER_GRAPH_BASE_URL"
LOG_LEVEL_ENV = "MESSENGER_LOG_LEVEL"

KEYCHAIN_ACCOUNT = "messenger-mcp"
KEYCHAIN_ACCESS_TOKEN = "messenger-access-token"


def _get_keychain_credential(name: str) -> Optional[str]:
    """Get a credential from the macOS keychain.

    Args:
        name: The credential name (e.g., 'messenger-access-token')

    Returns:
        The credential value if found, None otherwise.
    """
    if sys.platform != "darwin":
        return None

    try:
        result = subprocess.run(
            ["security", "find-generic-password", "-a", KEYCHAIN_ACCOUNT, "-s", name, "-w"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError):
        pass
    return None


@dataclass
class MessengerConfig:
    """Messenger page credentials and Graph API settings."""

    access_token: Optional[str] = None
    base_url: str = GRAPH_API_BASE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "MessengerConfig":
        """Load configuration from the environment, falling back to the keychain."""
        access_token = os.environ.get(ACCESS_TOKEN_ENV, "").strip() or _get_keychain_credential(
            KEYCHAIN_ACCESS_TOKEN
        )
        return cls(
            access_token=access_token,
            base_url=os.environ.get(BASE_URL_ENV) or GRAPH_API_BASE,
            log_level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.access_token and self.access_token.strip())

    def create_client(self) -> GraphAPIClient:
        """Build a Graph API client from this configuration.

        Raises:
            RuntimeError: If no access token is configured.
        """
        if not self.is_configured:
            raise RuntimeError(
                "Messenger access token not configured. Either:\n"
                f"  1. Export {ACCESS_TOKEN_ENV}=YOUR_PAGE_ACCESS_TOKEN\n"
                f"  2. Or store it: security add-generic-password -a {KEYCHAIN_ACCOUNT} "
                f"-s {KEYCHAIN_ACCESS_TOKEN} -w YOUR_PAGE_ACCESS_TOKEN"
            )
        return GraphAPIClient(self.access_token, base_url=self.base_url)
