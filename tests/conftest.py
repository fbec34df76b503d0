"""Shared fixtures: a local aiohttp app standing in for the Graph API."""

from dataclasses import dataclass
from typing import Any

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from messenger_graph.graph import GraphAPIClient

ACCESS_TOKEN = "1234567890"
RECIPIENT_ID = "1QAZ2WSX"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: dict[str, str]
    body: Any
    raw_path: str = ""


class FakeGraphAPI:
    """Records incoming requests and answers with canned replies."""

    def __init__(self):
        self.requests: list[RecordedRequest] = []
        self._replies: dict[tuple[str, str], tuple[int, Any]] = {}
        self.base_url = ""

    def reply(self, method: str, path: str, status: int = 200, data: Any = None) -> None:
        self._replies[(method, path)] = (status, data)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.json() if request.can_read_body else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query=dict(request.query),
                body=body,
                raw_path=request.raw_path.split("?", 1)[0],
            )
        )

        status, data = self._replies.get(
            (request.method, request.path),
            (404, {"error": {"message": "Unknown path", "type": "GraphMethodException", "code": 100}}),
        )
        if data is None:
            return web.Response(status=status)
        return web.json_response(data, status=status)


@pytest_asyncio.fixture
async def graph_api():
    api = FakeGraphAPI()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", api.handle)

    server = TestServer(app)
    await server.start_server()
    api.base_url = f"http://{server.host}:{server.port}"
    try:
        yield api
    finally:
        await server.close()


@pytest_asyncio.fixture
async def client(graph_api):
    return GraphAPIClient(ACCESS_TOKEN, base_url=graph_api.base_url)
