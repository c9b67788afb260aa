"""Tests for the httpx transport adapter."""

import json

import httpx
import pytest

from keystone_swift_auth import (
    HttpxHttpTransport,
    IdentityTimeoutError,
    MalformedResponseError,
    TokenAuthenticator,
    TransportError,
)

TOKENS_URL = "https://keystone.example/v3/auth/tokens"


def identity_handler(request: httpx.Request) -> httpx.Response:
    """Minimal Keystone v3 /auth/tokens endpoint."""
    body = json.loads(request.content)
    assert body["auth"]["identity"]["methods"] == ["password"]
    return httpx.Response(
        201,
        headers={"X-Subject-Token": "tok123"},
        json={
            "token": {
                "expires_at": "2099-01-01T00:00:00.000000Z",
                "catalog": [
                    {
                        "name": "swift",
                        "endpoints": [
                            {"interface": "public", "region": "RegionOne",
                             "url": "https://swift.example/v1"},
                        ],
                    }
                ],
            }
        },
    )


def make_transport(handler) -> HttpxHttpTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpxHttpTransport(client=client)


class TestHttpxHttpTransport:

    @pytest.mark.asyncio
    async def test_post_returns_headers_and_body(self):
        transport = make_transport(identity_handler)

        response = await transport.post(TOKENS_URL, data={"auth": {"identity": {"methods": ["password"]}}})

        assert response.status_code == 201
        assert response.header("x-subject-token") == "tok123"
        assert response.body["token"]["catalog"][0]["name"] == "swift"

    @pytest.mark.asyncio
    async def test_sends_json_body_and_headers(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={})

        transport = make_transport(handler)
        await transport.post(TOKENS_URL, data={"a": 1}, headers={"Content-Type": "application/json"})

        assert seen == {"method": "POST", "content_type": "application/json", "body": {"a": 1}}

    @pytest.mark.asyncio
    async def test_error_status_raises_transport_error(self):
        transport = make_transport(lambda request: httpx.Response(401, text="The request you have made requires authentication."))

        with pytest.raises(TransportError) as exc_info:
            await transport.post(TOKENS_URL, data={})

        error = exc_info.value
        assert error.status_code == 401
        assert error.is_unauthorized
        assert error.url == TOKENS_URL
        assert "requires authentication" in error.response_excerpt

    @pytest.mark.asyncio
    async def test_timeout_raises_identity_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        transport = make_transport(handler)

        with pytest.raises(IdentityTimeoutError) as exc_info:
            await transport.post(TOKENS_URL, data={}, timeout=0.5)

        assert isinstance(exc_info.value, TransportError)
        assert not exc_info.value.is_http_error

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = make_transport(handler)

        with pytest.raises(TransportError) as exc_info:
            await transport.post(TOKENS_URL, data={})

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_non_json_body_is_malformed(self):
        transport = make_transport(lambda request: httpx.Response(201, text="<html>ok</html>"))

        with pytest.raises(MalformedResponseError):
            await transport.post(TOKENS_URL, data={})

    @pytest.mark.asyncio
    async def test_borrowed_client_not_closed(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(identity_handler))
        transport = HttpxHttpTransport(client=client)

        await transport.close()

        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        transport = HttpxHttpTransport()
        client = await transport._get_client()

        await transport.close()

        assert client.is_closed


class TestAuthenticatorOverHttpx:
    """End-to-end exchange through the httpx adapter."""

    @pytest.mark.asyncio
    async def test_authenticate_and_cache(self, credentials):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return identity_handler(request)

        async with TokenAuthenticator(
            credentials, make_transport(handler), owns_transport=True
        ) as auth:
            first = await auth.authenticate()
            second = await auth.authenticate()

        assert first.as_dict() == {"url": "https://swift.example/v1", "token": "tok123"}
        assert second == first
        assert calls == [TOKENS_URL]

    @pytest.mark.asyncio
    async def test_identity_failure_surfaces_as_transport_error(self, credentials):
        auth = TokenAuthenticator(
            credentials, make_transport(lambda request: httpx.Response(500, text="oops"))
        )

        with pytest.raises(TransportError) as exc_info:
            await auth.authenticate()

        assert exc_info.value.status_code == 500
        assert auth.current_token is None
