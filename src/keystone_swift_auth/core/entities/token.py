"""Scoped token entity with expiry tracking."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass(frozen=True)
class Token:
    """Project-scoped bearer token and the service URL resolved with it.

    Handles ONLY token representation and expiry arithmetic.
    Tokens are replaced on renewal, never mutated in place.
    """

    value: str
    expires_at: datetime
    url: str

    def __post_init__(self) -> None:
        """Validate token value and expiry."""
        if not self.value:
            raise ValueError("Token value cannot be empty")

        if not self.url:
            raise ValueError("Token service URL cannot be empty")

        if self.expires_at.tzinfo is None:
            raise ValueError("Token expiry must be timezone-aware")

    def remaining(self, now: Optional[datetime] = None) -> timedelta:
        """Time left before the token expires (negative once expired)."""
        now = now or datetime.now(timezone.utc)
        return self.expires_at - now

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at

    def expires_within(self, buffer: timedelta, now: Optional[datetime] = None) -> bool:
        """Check if the token expires before ``now + buffer``.

        Strict comparison: a token expiring exactly at the deadline is
        still considered usable.
        """
        now = now or datetime.now(timezone.utc)
        return now + buffer > self.expires_at

    def mask_for_logging(self) -> str:
        """Return masked token safe for logging."""
        if len(self.value) <= 16:
            return "***"
        return f"{self.value[:4]}...{self.value[-4:]}"

    def __str__(self) -> str:
        return f"Token({self.mask_for_logging()}, expires_at={self.expires_at.isoformat()})"

    def __repr__(self) -> str:
        return (
            f"Token(value='{self.mask_for_logging()}', "
            f"expires_at={self.expires_at!r}, url='{self.url}')"
        )
