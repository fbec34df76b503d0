"""HTTP transport for the Facebook Graph API."""

import json
import logging
from dataclasses import dataclass
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)

# Facebook Graph API base URL
GRAPH_API_BASE = "https://graph.facebook.com/v2.8"


class GraphAPIError(Exception):
    """Facebook Graph API error."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        error_code: int | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.error_code = error_code
        self.details = details


def _parse_error(data: Any) -> tuple[str, str | None, int | None]:
    """Parse a Graph API error envelope into (message, type, code).

    Args:
        data: Parsed response body

    Returns:
        Human-readable message, error type and error code
    """
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        error_obj = data["error"]
        error_type = error_obj.get("type")
        error_code = error_obj.get("code")

        if "message" in error_obj:
            return f"Graph API error: {error_obj['message']}", error_type, error_code

        if error_code is not None:
            return f"Graph API error ({error_code}): {str(data)[:200]}", error_type, error_code

    return f"Graph API error: {str(data)[:200]}", None, None


@dataclass(frozen=True)
class GraphResponse:
    """Raw Graph API response: status code and parsed body."""

    status: int
    data: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data}

    def raise_for_status(self) -> "GraphResponse":
        """Raise GraphAPIError for a non-2xx response.

        Returns:
            This response, when the status is 2xx

        Raises:
            GraphAPIError: If the status is not 2xx
        """
        if self.ok:
            return self

        message, error_type, error_code = _parse_error(self.data)
        raise GraphAPIError(
            message,
            status_code=self.status,
            error_type=error_type,
            error_code=error_code,
            details=self.data,
        )


class GraphTransport:
    """Graph API transport bound to a base URL and an access token.

    Every request carries ``access_token`` as a query parameter. Responses are
    handed back as-is, whatever their status; connection errors propagate.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = GRAPH_API_BASE,
        session: aiohttp.ClientSession | None = None,
        headers: dict[str, str] | None = None,
    ):
        """Initialize the transport.

        Args:
            access_token: Page access token sent with every request
            base_url: Graph API base URL
            session: Optional caller-owned session. Without one, each request
                opens its own session.
            headers: Extra default headers
        """
        if not access_token or not access_token.strip():
            raise ValueError("access_token is required")

        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.headers = {"Accept": "application/json", **(headers or {})}
        self._session = session

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> GraphResponse:
        """Make a single request to the Graph API.

        Args:
            method: HTTP method
            path: Endpoint path (without base URL)
            body: JSON request body
            params: Query parameters

        Returns:
            GraphResponse with the status and parsed body
        """
        url = self.build_url(path)
        query = {**(params or {}), "access_token": self.access_token}

        headers = dict(self.headers)
        if body is not None:
            headers["Content-Type"] = "application/json"

        if self._session is not None:
            return await self._send(self._session, method, url, body, query, headers, path)

        async with aiohttp.ClientSession() as session:
            return await self._send(session, method, url, body, query, headers, path)

    async def _send(
        self,
        session: aiohttp.ClientSession,
        method: str,
        url: str,
        body: Any,
        query: dict[str, Any],
        headers: dict[str, str],
        path: str,
    ) -> GraphResponse:
        async with session.request(
            method,
            url,
            json=body,
            params=query,
            headers=headers,
        ) as response:
            text = await response.text()
            status = response.status

        logger.debug(f"{method} {path} -> {status}")
        return GraphResponse(status=status, data=_decode_body(text))

    async def get(self, path: str, params: dict[str, Any] | None = None) -> GraphResponse:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        body: Any,
        params: dict[str, Any] | None = None,
    ) -> GraphResponse:
        return await self.request("POST", path, body=body, params=params)

    async def put(
        self,
        path: str,
        body: Any,
        params: dict[str, Any] | None = None,
    ) -> GraphResponse:
        return await self.request("PUT", path, body=body, params=params)

    async def delete(
        self,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> GraphResponse:
        return await self.request("DELETE", path, body=body, params=params)


def _decode_body(text: str) -> Any:
    """Decode a response body: JSON when possible, raw text otherwise."""
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text
