"""Unit tests for the infrastructure layer."""

from unittest.mock import MagicMock

import httpx
import pytest

from gym_http.infrastructure.http_client import HttpClient


class TestHttpClient:
    async def test_send_delegates_to_httpx(self, mocker):
        client = HttpClient()
        fake_resp = MagicMock(status_code=200)
        mocker.patch.object(client._client, "send", return_value=fake_resp)
        resp = await client.send(httpx.Request("GET", "http://example.com"))
        assert resp.status_code == 200
        await client.aclose()

    async def test_send_propagates_exception(self, mocker):
        client = HttpClient()
        mocker.patch.object(client._client, "send", side_effect=Exception("timeout"))
        with pytest.raises(Exception, match="timeout"):
            await client.send(httpx.Request("GET", "http://example.com"))
        await client.aclose()

    async def test_timeout_passed_to_httpx(self):
        async with HttpClient(timeout=2.5) as client:
            assert client._client.timeout == httpx.Timeout(2.5)

    async def test_transport_used(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(418))
        async with HttpClient(transport=transport) as client:
            resp = await client.send(httpx.Request("GET", "http://example.com"))
        assert resp.status_code == 418

    async def test_context_manager_closes(self):
        async with HttpClient() as client:
            assert client is not None
        assert client._client.is_closed
