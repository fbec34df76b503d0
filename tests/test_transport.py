"""Tests for GraphTransport and GraphResponse."""

import aiohttp
import pytest

from messenger_graph.graph import GraphAPIError, GraphResponse, GraphTransport

from .conftest import ACCESS_TOKEN


class TestGraphTransport:
    """Tests for request construction and passthrough."""

    @pytest.mark.asyncio
    async def test_appends_access_token_after_params(self, graph_api) -> None:
        graph_api.reply("GET", "/me/messenger_profile", data={"data": []})
        http = GraphTransport(ACCESS_TOKEN, base_url=graph_api.base_url)

        await http.get("me/messenger_profile", params={"fields": "greeting"})

        assert graph_api.last_request.query == {
            "fields": "greeting",
            "access_token": ACCESS_TOKEN,
        }

    @pytest.mark.asyncio
    async def test_non_2xx_is_returned_not_raised(self, graph_api) -> None:
        error = {
            "error": {
                "message": "Invalid OAuth access token.",
                "type": "OAuthException",
                "code": 190,
                "fbtrace_id": "BLBz/WZt8dN",
            }
        }
        graph_api.reply("POST", "/me/messages", status=400, data=error)
        http = GraphTransport(ACCESS_TOKEN, base_url=graph_api.base_url)

        res = await http.post("me/messages", {"recipient": {"id": "1"}, "message": {"text": "hi"}})

        assert res.status == 400
        assert res.data == error
        assert not res.ok

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self, graph_api) -> None:
        graph_api.reply("DELETE", "/me/messenger_profile", status=204)
        http = GraphTransport(ACCESS_TOKEN, base_url=graph_api.base_url)

        res = await http.delete("me/messenger_profile", {"fields": ["greeting"]})

        assert res.status == 204
        assert res.data is None
        assert graph_api.last_request.body == {"fields": ["greeting"]}

    @pytest.mark.asyncio
    async def test_put_sends_json_body(self, graph_api) -> None:
        graph_api.reply("PUT", "/me/thread_settings", data={"result": "success"})
        http = GraphTransport(ACCESS_TOKEN, base_url=graph_api.base_url)

        res = await http.put("me/thread_settings", {"setting_type": "domain_whitelisting"})

        assert res.status == 200
        assert res.data == {"result": "success"}
        assert graph_api.last_request.method == "PUT"
        assert graph_api.last_request.body == {"setting_type": "domain_whitelisting"}
        assert graph_api.last_request.query == {"access_token": ACCESS_TOKEN}

    @pytest.mark.asyncio
    async def test_uses_caller_session(self, graph_api) -> None:
        graph_api.reply("GET", "/42", data={"id": "42"})

        async with aiohttp.ClientSession() as session:
            http = GraphTransport(ACCESS_TOKEN, base_url=graph_api.base_url, session=session)
            first = await http.get("42")
            second = await http.get("/42")
            assert not session.closed

        assert first.data == second.data == {"id": "42"}
        assert len(graph_api.requests) == 2

    @pytest.mark.asyncio
    async def test_connection_errors_propagate(self) -> None:
        http = GraphTransport(ACCESS_TOKEN, base_url="http://127.0.0.1:1")

        with pytest.raises(aiohttp.ClientConnectionError):
            await http.get("me")

    def test_rejects_blank_token(self) -> None:
        with pytest.raises(ValueError):
            GraphTransport("   ")

    def test_build_url(self) -> None:
        http = GraphTransport(ACCESS_TOKEN, base_url="https://graph.facebook.com/v2.8/")
        assert http.build_url("/me/messages") == "https://graph.facebook.com/v2.8/me/messages"
        assert http.build_url("12345") == "https://graph.facebook.com/v2.8/12345"


class TestGraphResponse:
    """Tests for the opt-in status check."""

    def test_raise_for_status_returns_self_when_ok(self) -> None:
        res = GraphResponse(status=200, data={"result": "success"})
        assert res.raise_for_status() is res

    def test_raise_for_status_parses_error_envelope(self) -> None:
        res = GraphResponse(
            status=400,
            data={
                "error": {
                    "message": "(#100) The parameter recipient is required",
                    "type": "OAuthException",
                    "code": 100,
                }
            },
        )

        with pytest.raises(GraphAPIError) as exc_info:
            res.raise_for_status()

        error = exc_info.value
        assert str(error) == "Graph API error: (#100) The parameter recipient is required"
        assert error.status_code == 400
        assert error.error_type == "OAuthException"
        assert error.error_code == 100
        assert error.details == res.data

    def test_raise_for_status_with_plain_body(self) -> None:
        res = GraphResponse(status=502, data="Bad Gateway")

        with pytest.raises(GraphAPIError) as exc_info:
            res.raise_for_status()

        assert exc_info.value.status_code == 502
        assert exc_info.value.error_code is None
        assert "Bad Gateway" in str(exc_info.value)

    def test_to_dict(self) -> None:
        assert GraphResponse(status=200, data=[1]).to_dict() == {"status": 200, "data": [1]}
