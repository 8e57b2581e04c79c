"""Tests for aurora_sdk/transport/http.py — request construction and error normalization."""

from unittest.mock import AsyncMock

import httpx
import pytest

from aurora_sdk.errors import AuroraConnectionError, SpecLoadError, TransportError
from aurora_sdk.models import ClientConfig
from aurora_sdk.transport.http import Transport
from tests.conftest import API_KEY, BASE_URL, make_response


@pytest.fixture
def mock_client():
    client = AsyncMock()
    client.is_closed = False
    client.request.return_value = make_response(200, json_body={"ok": True})
    return client


@pytest.fixture
def transport(mock_client):
    return Transport(ClientConfig(base_url=BASE_URL, api_key=API_KEY), mock_client)


class TestRequestConstruction:

    async def test_url_and_default_headers(self, transport, mock_client):
        result = await transport.request("GET", "/v1/tables")
        assert result == {"ok": True}

        args = mock_client.request.call_args
        assert args.args == ("GET", f"{BASE_URL}/v1/tables")
        headers = args.kwargs["headers"]
        assert headers["Content-Type"] == "application/json"
        assert headers["X-Api-Key"] == API_KEY
        assert "Authorization" not in headers

    async def test_path_gets_single_leading_slash(self, transport, mock_client):
        await transport.request("GET", "v1/tables")
        assert mock_client.request.call_args.args[1] == f"{BASE_URL}/v1/tables"

    async def test_query_appended(self, transport, mock_client):
        await transport.request("GET", "/v1/tables/products/records", query={"limit": 10, "sort": None})
        assert mock_client.request.call_args.args[1] == f"{BASE_URL}/v1/tables/products/records?limit=10"

    async def test_base_url_override(self, transport, mock_client):
        await transport.request("GET", "/search", base_url="https://spec.example.com/v2/")
        assert mock_client.request.call_args.args[1] == "https://spec.example.com/v2/search"

    async def test_body_sent_as_json(self, transport, mock_client):
        await transport.request("POST", "/v1/tables/products/records", body={"name": "Milk"})
        assert mock_client.request.call_args.kwargs["json"] == {"name": "Milk"}

    async def test_no_body_when_absent(self, transport, mock_client):
        await transport.request("GET", "/v1/tables")
        assert "json" not in mock_client.request.call_args.kwargs

    async def test_bearer_token_replaces_api_key(self, transport, mock_client):
        await transport.request("GET", "/auth/session", bearer_token="user-token")
        headers = mock_client.request.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer user-token"
        assert "X-Api-Key" not in headers

    async def test_extra_headers_merged(self, transport, mock_client):
        await transport.request("GET", "/me", headers={"X-User-Id": "u1"})
        headers = mock_client.request.call_args.kwargs["headers"]
        assert headers["X-User-Id"] == "u1"
        assert headers["X-Api-Key"] == API_KEY


class TestResponses:

    async def test_204_returns_none(self, transport, mock_client):
        mock_client.request.return_value = make_response(204)
        assert await transport.request("DELETE", "/v1/tables/products/records/r1") is None

    async def test_json_list_returned(self, transport, mock_client):
        mock_client.request.return_value = make_response(200, json_body=[{"slug": "products"}])
        assert await transport.request("GET", "/v1/tables") == [{"slug": "products"}]

    async def test_non_json_success_body(self, transport, mock_client):
        mock_client.request.return_value = make_response(200, text="<html>app shell</html>")
        with pytest.raises(TransportError) as exc_info:
            await transport.request("GET", "/v1/tables")
        assert str(exc_info.value) == "Aurora API 200: Invalid JSON response"
        assert exc_info.value.body == "<html>app shell</html>"

    async def test_non_json_success_body_uses_error_class(self, transport, mock_client):
        mock_client.request.return_value = make_response(200, text="<html></html>")
        with pytest.raises(SpecLoadError):
            await transport.request_url("GET", f"{BASE_URL}/v1/openapi.json", error_class=SpecLoadError)


class TestErrorNormalization:

    async def test_json_error_field(self, transport, mock_client):
        mock_client.request.return_value = make_response(401, json_body={"error": "Invalid API key"})
        with pytest.raises(TransportError) as exc_info:
            await transport.request("GET", "/v1/tables")
        assert str(exc_info.value) == "Aurora API 401: Invalid API key"
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid API key"

    async def test_json_without_error_field_uses_body(self, transport, mock_client):
        mock_client.request.return_value = make_response(400, text='{"message":"bad"}')
        with pytest.raises(TransportError) as exc_info:
            await transport.request("GET", "/v1/tables")
        assert str(exc_info.value) == 'Aurora API 400: {"message":"bad"}'

    async def test_plain_text_body(self, transport, mock_client):
        mock_client.request.return_value = make_response(500, text="Internal meltdown")
        with pytest.raises(TransportError) as exc_info:
            await transport.request("GET", "/v1/tables")
        assert str(exc_info.value).startswith("Aurora API 500")
        assert exc_info.value.message == "Internal meltdown"

    async def test_empty_body_uses_reason_phrase(self, transport, mock_client):
        mock_client.request.return_value = make_response(503)
        with pytest.raises(TransportError) as exc_info:
            await transport.request("GET", "/v1/tables")
        assert str(exc_info.value) == "Aurora API 503: Service Unavailable"

    async def test_custom_error_class(self, transport, mock_client):
        mock_client.request.return_value = make_response(404, json_body={"error": "No spec"})
        with pytest.raises(SpecLoadError):
            await transport.request_url("GET", f"{BASE_URL}/v1/openapi.json", error_class=SpecLoadError)

    async def test_error_not_retried(self, transport, mock_client):
        mock_client.request.return_value = make_response(502, text="bad gateway")
        with pytest.raises(TransportError):
            await transport.request("GET", "/v1/tables")
        assert mock_client.request.call_count == 1

    async def test_connect_error(self, transport, mock_client):
        mock_client.request.side_effect = httpx.ConnectError("Connection refused")
        with pytest.raises(AuroraConnectionError) as exc_info:
            await transport.request("GET", "/v1/tables")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestLifecycle:

    async def test_lazy_client_has_no_timeout(self):
        transport = Transport(ClientConfig(base_url=BASE_URL, api_key=API_KEY))
        client = await transport._get_client()
        assert client.timeout == httpx.Timeout(None)
        await transport.aclose()
        assert transport._client is None

    async def test_injected_client_not_closed(self, transport, mock_client):
        await transport.aclose()
        mock_client.aclose.assert_not_called()
