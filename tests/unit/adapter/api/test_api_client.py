"""Unit tests for ApiClient."""

import httpx
import pytest

from reel.adapter.api import ApiClient


def make_client(handler) -> ApiClient:
    """Create client that answers every request with ``handler``."""
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://test/api"
    )
    return ApiClient(http)


class TestSend:
    """Tests for ApiClient.send."""

    @pytest.mark.asyncio
    async def test_success_body_returned(self):
        client = make_client(
            lambda request: httpx.Response(
                200, json={"success": True, "data": {"x": 1}, "message": "OK"}
            )
        )

        result = await client.send("GET", "/reviews")

        assert result.success
        assert result.data["data"] == {"x": 1}
        assert result.message == "OK"

    @pytest.mark.asyncio
    async def test_connection_error_becomes_failed_result(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused")

        client = make_client(refuse)

        result = await client.send("POST", "/reviews/r1/like")

        assert not result.success
        assert result.message == "Network error: Connection refused"

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

        result = await client.send("GET", "/reviews")

        assert not result.success
        assert result.message == "Invalid response from server (502)"

    @pytest.mark.asyncio
    async def test_backend_message_used_for_failure(self):
        client = make_client(
            lambda request: httpx.Response(
                403, json={"success": False, "message": "Not authorized"}
            )
        )

        result = await client.send("DELETE", "/reviews/r1")

        assert not result.success
        assert result.message == "Not authorized"

    @pytest.mark.asyncio
    async def test_success_false_with_ok_status_is_failure(self):
        client = make_client(
            lambda request: httpx.Response(200, json={"success": False})
        )

        result = await client.send("GET", "/reviews")

        assert not result.success
        assert result.message == "Request failed (200)"

    @pytest.mark.asyncio
    async def test_none_params_dropped(self):
        seen = []

        def record(request):
            seen.append(request)
            return httpx.Response(200, json={"success": True})

        client = make_client(record)

        await client.send("GET", "/reviews", params={"page": 2, "sortBy": None})

        assert seen[0].url.path == "/api/reviews"
        assert dict(seen[0].url.params) == {"page": "2"}


class TestCall:
    """Tests for ApiClient.call."""

    @pytest.mark.asyncio
    async def test_parse_applied_to_body(self):
        client = make_client(
            lambda request: httpx.Response(200, json={"success": True, "data": [1, 2]})
        )

        result = await client.call("GET", "/x", lambda body: len(body["data"]))

        assert result.success
        assert result.data == 2

    @pytest.mark.asyncio
    async def test_malformed_body_becomes_failed_result(self):
        """A body missing the expected keys is reported, not raised."""
        client = make_client(
            lambda request: httpx.Response(200, json={"success": True})
        )

        result = await client.call("GET", "/x", lambda body: body["data"])

        assert not result.success
        assert result.message == "Malformed response from server"

    @pytest.mark.asyncio
    async def test_failure_passed_through(self):
        client = make_client(
            lambda request: httpx.Response(
                404, json={"success": False, "message": "Review not found"}
            )
        )

        result = await client.call("GET", "/x", lambda body: body)

        assert not result.success
        assert result.message == "Review not found"

    @pytest.mark.asyncio
    async def test_wrong_container_type_becomes_failed_result(self):
        client = make_client(
            lambda request: httpx.Response(200, json={"success": True, "data": []})
        )

        result = await client.call("GET", "/x", lambda body: body["data"].get("results"))

        assert not result.success
        assert result.message == "Malformed response from server"
