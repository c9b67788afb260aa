"""HTTP transport protocol contract."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ..value_objects import TransportResponse


@runtime_checkable
class HttpTransportProtocol(Protocol):
    """Protocol for the HTTP transport used for identity exchanges.

    Defines ONLY the contract for issuing a JSON POST.
    TLS, connection pooling and network-level retries belong to
    implementations.
    """

    async def post(
        self,
        url: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> TransportResponse:
        """Send a JSON POST request.

        Args:
            url: Target URL
            data: JSON-serializable request body
            headers: Extra request headers
            timeout: Per-request timeout in seconds, None for the default

        Returns:
            Response of a successful (2xx) request

        Raises:
            TransportError: On network failure or non-success status
            IdentityTimeoutError: If the request timed out
            MalformedResponseError: If the body is not JSON
        """
        ...

    async def close(self) -> None:
        """Release connections held by the transport."""
        ...
