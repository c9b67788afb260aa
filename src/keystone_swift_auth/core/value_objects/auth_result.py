"""Authentication result returned to callers."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class AuthResult:
    """Resolved storage URL and bearer token pair."""

    url: str
    token: str

    def as_dict(self) -> Dict[str, str]:
        return {"url": self.url, "token": self.token}

    def auth_headers(self) -> Dict[str, str]:
        """Headers for requests against the resolved service."""
        return {"X-Auth-Token": self.token}

    def __repr__(self) -> str:
        masked = "***" if len(self.token) <= 16 else f"{self.token[:4]}...{self.token[-4:]}"
        return f"AuthResult(url='{self.url}', token='{masked}')"
