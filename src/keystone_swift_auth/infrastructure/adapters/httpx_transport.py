"""
HTTP transport implementation using httpx.

Provides connection pooling, timeouts, and proper resource management for
identity exchanges.
"""
import logging
from typing import Optional, Dict, Any

import httpx

from ...core.exceptions import TransportError, IdentityTimeoutError, MalformedResponseError
from ...core.protocols import HttpTransportProtocol
from ...core.value_objects import TransportResponse

logger = logging.getLogger(__name__)


class HttpxHttpTransport(HttpTransportProtocol):
    """
    HTTP transport using httpx with async support.

    Maps httpx failures to TransportError. Performs no retries.
    """

    def __init__(
        self,
        timeout: float = 30,
        max_connections: int = 100,
        verify_ssl: bool = True,
        client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize httpx transport with configuration.

        Args:
            timeout: Default request timeout in seconds
            max_connections: Connection pool size
            verify_ssl: Whether to verify TLS certificates
            client: Preconfigured client; it is not closed by this transport
        """
        self.timeout = timeout
        self.max_connections = max_connections
        self.verify_ssl = verify_ssl
        self._client: Optional[httpx.AsyncClient] = client
        self._owns_client = client is None

        logger.info(
            f"HttpxHttpTransport initialized: timeout={timeout}s, "
            f"max_connections={max_connections}, verify_ssl={verify_ssl}"
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create httpx client."""
        if self._client is None:
            limits = httpx.Limits(
                max_connections=self.max_connections,
                max_keepalive_connections=self.max_connections // 2
            )

            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=limits,
                verify=self.verify_ssl,
                follow_redirects=True
            )
            self._owns_client = True
            logger.debug("Created new httpx AsyncClient")

        return self._client

    async def post(
        self,
        url: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> TransportResponse:
        """Make JSON POST request."""
        client = await self._get_client()
        request_timeout = httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT

        try:
            response = await client.post(url, json=data, headers=headers, timeout=request_timeout)
        except httpx.TimeoutException as e:
            logger.error(f"HTTP POST timed out for {url}: {e}")
            raise IdentityTimeoutError(
                f"Identity service request timed out: {e}", url=url
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP POST error for {url}: {e}")
            raise TransportError(
                f"Identity service request failed: {e}", url=url
            ) from e

        if not response.is_success:
            logger.error(f"HTTP POST to {url} returned status {response.status_code}")
            raise TransportError.from_status(url, response.status_code, response.text)

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError.invalid("body", "response is not valid JSON") from e

        return TransportResponse.from_parts(response.status_code, response.headers, body)

    async def close(self):
        """Close the HTTP client."""
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("HttpxHttpTransport closed")
