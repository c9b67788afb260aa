"""
Settings for keystone-swift-auth.

Reads OpenStack-style ``OS_*`` credentials and ``KEYSTONE_*`` tuning knobs
from the environment or a ``.env`` file. The authenticator itself only
consumes Credentials; settings are a convenience for wiring it up.
"""
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.value_objects import Credentials


class KeystoneSettings(BaseSettings):
    """Identity service credentials and authenticator tuning."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # Credentials
    auth_url: str = Field(default="", validation_alias=AliasChoices("OS_AUTH_URL", "auth_url"))
    username: str = Field(default="", validation_alias=AliasChoices("OS_USERNAME", "username"))
    password: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("OS_PASSWORD", "password")
    )
    domain_id: str = Field(
        default="",
        validation_alias=AliasChoices("OS_DOMAIN_ID", "OS_USER_DOMAIN_ID", "domain_id")
    )
    project_id: str = Field(
        default="",
        validation_alias=AliasChoices("OS_PROJECT_ID", "OS_TENANT_ID", "project_id")
    )
    region: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("OS_REGION_NAME", "region")
    )

    # Authenticator tuning
    renewal_buffer_seconds: float = Field(
        default=10,
        validation_alias=AliasChoices("KEYSTONE_RENEWAL_BUFFER_SECONDS", "renewal_buffer_seconds")
    )
    timeout: float = Field(default=30, validation_alias=AliasChoices("KEYSTONE_TIMEOUT", "timeout"))
    verify_ssl: bool = Field(
        default=True,
        validation_alias=AliasChoices("KEYSTONE_VERIFY_SSL", "verify_ssl")
    )
    max_connections: int = Field(
        default=100,
        validation_alias=AliasChoices("KEYSTONE_MAX_CONNECTIONS", "max_connections")
    )
    single_flight: bool = Field(
        default=False,
        validation_alias=AliasChoices("KEYSTONE_SINGLE_FLIGHT", "single_flight")
    )

    @field_validator("renewal_buffer_seconds")
    @classmethod
    def validate_renewal_buffer(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Renewal buffer cannot be negative")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @field_validator("region")
    @classmethod
    def empty_region_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @property
    def renewal_buffer(self) -> timedelta:
        return timedelta(seconds=self.renewal_buffer_seconds)

    def to_credentials(self) -> Credentials:
        """Build Credentials; raises ConfigurationError when incomplete."""
        return Credentials(
            username=self.username,
            password=self.password.get_secret_value(),
            domain_id=self.domain_id,
            project_id=self.project_id,
            auth_url=self.auth_url,
            region=self.region
        )


@lru_cache()
def get_settings() -> KeystoneSettings:
    """Get cached settings instance."""
    return KeystoneSettings()
