"""Identity service transport failures."""

from typing import Optional

from .base import KeystoneAuthError


class TransportError(KeystoneAuthError):
    """Exception raised when the identity service cannot be reached.

    Covers network failures and non-success HTTP statuses. Never retried
    by the authenticator.
    """

    def __init__(
        self,
        message: str = "Identity service request failed",
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        response_excerpt: Optional[str] = None
    ) -> None:
        """Initialize transport error.

        Args:
            message: Human-readable error message
            url: URL of the failed request
            status_code: HTTP status if a response was received
            response_excerpt: Beginning of the response body for debugging
        """
        self.url = url
        self.status_code = status_code
        self.response_excerpt = response_excerpt

        super().__init__(
            message,
            details={
                'url': url,
                'status_code': status_code,
                'response_excerpt': response_excerpt
            }
        )

    @property
    def is_http_error(self) -> bool:
        """Check if the server answered with an error status."""
        return self.status_code is not None

    @property
    def is_unauthorized(self) -> bool:
        """Check if the identity service rejected the credentials."""
        return self.status_code == 401

    @classmethod
    def from_status(
        cls,
        url: str,
        status_code: int,
        body: Optional[str] = None
    ) -> 'TransportError':
        """Create exception for a non-success HTTP status."""
        excerpt = body[:200] if body else None
        return cls(
            f"Identity service returned HTTP {status_code}",
            url=url,
            status_code=status_code,
            response_excerpt=excerpt
        )

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.url:
            return f"{base_msg} (url={self.url})"
        return base_msg


class IdentityTimeoutError(TransportError):
    """Raised when the identity exchange exceeds its timeout."""
    pass
