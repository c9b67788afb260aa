"""Credentials value object for password-based Keystone v3 authentication."""

from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class Credentials:
    """Long-lived user credentials, immutable for the session.

    Handles ONLY credential representation and basic validation.
    Sourcing credentials (files, environment, vaults) is the caller's concern.
    """

    username: str
    password: str = field(repr=False)
    domain_id: str
    project_id: str
    auth_url: str
    region: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate required fields and normalize the identity URL."""
        required = {
            "username": self.username,
            "password": self.password,
            "domain_id": self.domain_id,
            "project_id": self.project_id,
            "auth_url": self.auth_url,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required credential fields: {', '.join(missing)}",
                details={"missing": missing}
            )

        if not self.auth_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                "Identity service URL must start with http:// or https://",
                details={"auth_url": self.auth_url}
            )

        # Frozen dataclass, so bypass __setattr__ for normalization
        object.__setattr__(self, "auth_url", self.auth_url.rstrip("/"))
        if not self.region:
            object.__setattr__(self, "region", None)

    @property
    def tokens_url(self) -> str:
        """Identity token issuance endpoint."""
        return f"{self.auth_url}/auth/tokens"
