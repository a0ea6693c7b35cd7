# ABOUTME: Unit tests for HttpRefreshEndpoint
# ABOUTME: Tests the refresh request shape and parsing of successful and failed replies

import httpx
import pytest

from storefront_auth.implementations.http import HttpRefreshEndpoint

REFRESH_URL = "https://api.example.com/api/v1/auth/refresh"


@pytest.fixture
def endpoint(transport):
    return HttpRefreshEndpoint(transport, REFRESH_URL)


class TestHttpRefreshEndpoint:
    """Test cases for HttpRefreshEndpoint."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_request_is_a_bearer_post(self, endpoint, transport):
        transport.responses = [httpx.Response(200, json={"success": True, "data": {"accessToken": "new"}})]

        await endpoint.refresh("refresh-1")

        url, options = transport.requests[0]
        assert url == REFRESH_URL
        assert options.method == "POST"
        assert options.headers == {"Content-Type": "application/json", "Authorization": "Bearer refresh-1"}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_nested_access_token(self, endpoint, transport):
        transport.responses = [httpx.Response(200, json={"success": True, "data": {"accessToken": "new"}})]

        result = await endpoint.refresh("refresh-1")

        assert result.success is True
        assert result.access_token == "new"
        assert result.refresh_token is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_top_level_access_token(self, endpoint, transport):
        transport.responses = [httpx.Response(200, json={"success": True, "accessToken": "new"})]

        result = await endpoint.refresh("refresh-1")

        assert result.access_token == "new"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_rotated_refresh_token(self, endpoint, transport):
        body = {"success": True, "data": {"accessToken": "new", "refreshToken": "refresh-2"}}
        transport.responses = [httpx.Response(200, json=body)]

        result = await endpoint.refresh("refresh-1")

        assert result.refresh_token == "refresh-2"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_success_false_fails(self, endpoint, transport):
        transport.responses = [httpx.Response(200, json={"success": False, "data": {"accessToken": "new"}})]

        result = await endpoint.refresh("refresh-1")

        assert result.success is False
        assert result.access_token is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_access_token_fails(self, endpoint, transport):
        transport.responses = [httpx.Response(200, json={"success": True, "data": {}})]

        result = await endpoint.refresh("refresh-1")

        assert result.success is False
        assert result.reason == "refresh response did not contain an access token"

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 403, 500])
    async def test_non_success_status_fails(self, endpoint, transport, status):
        transport.responses = [httpx.Response(status, json={"success": True, "data": {"accessToken": "new"}})]

        result = await endpoint.refresh("refresh-1")

        assert result.success is False
        assert result.reason == f"refresh endpoint returned HTTP {status}"

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [b"<html>bad gateway</html>", b"[]", b""])
    async def test_malformed_body_fails(self, endpoint, transport, content):
        transport.responses = [httpx.Response(200, content=content)]

        result = await endpoint.refresh("refresh-1")

        assert result.success is False
        assert result.reason == "malformed refresh response"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, endpoint, transport):
        transport.responses = [httpx.ReadTimeout("timed out")]

        with pytest.raises(httpx.ReadTimeout):
            await endpoint.refresh("refresh-1")
