"""Malformed identity response exception."""

from typing import Optional

from .base import KeystoneAuthError


class MalformedResponseError(KeystoneAuthError):
    """Raised when the identity response lacks an expected header or field."""

    def __init__(
        self,
        message: str = "Malformed identity service response",
        *,
        field: Optional[str] = None
    ) -> None:
        self.field = field
        super().__init__(message, details={'field': field})

    @classmethod
    def missing(cls, field: str) -> 'MalformedResponseError':
        """Create exception for a missing header or body field."""
        return cls(f"Identity response is missing '{field}'", field=field)

    @classmethod
    def invalid(cls, field: str, reason: str) -> 'MalformedResponseError':
        """Create exception for a present but unusable field."""
        return cls(f"Identity response has invalid '{field}': {reason}", field=field)
