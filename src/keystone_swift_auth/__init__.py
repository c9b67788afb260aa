"""keystone-swift-auth - Keystone v3 token lifecycle manager.

Exchanges password credentials for a project-scoped token, resolves the
object storage endpoint from the service catalog, and caches the token
until it is about to expire.

Usage:
    from keystone_swift_auth import Credentials, TokenAuthenticator, HttpxHttpTransport

    credentials = Credentials(
        username="demo", password="secret", domain_id="default",
        project_id="p1", auth_url="https://keystone.example/v3",
    )
    async with TokenAuthenticator(credentials, HttpxHttpTransport(), owns_transport=True) as auth:
        result = await auth.authenticate()
        headers = result.auth_headers()
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .core.entities import Token, Catalog, CatalogEntry, Endpoint, parse_catalog
from .core.value_objects import Credentials, AuthResult, TransportResponse
from .core.protocols import HttpTransportProtocol, TokenEventListener
from .core.exceptions import (
    KeystoneAuthError,
    ConfigurationError,
    TransportError,
    IdentityTimeoutError,
    CatalogResolutionError,
    MalformedResponseError,
    create_error_response,
)
from .application.services import (
    EndpointResolver,
    TokenAuthenticator,
    find_endpoint_url,
    resolve_with_fallback,
    parse_expiry,
)
from .config import KeystoneSettings, get_settings
from .infrastructure import HttpxHttpTransport, create_authenticator

__all__ = [
    "__version__",
    # Entities
    "Token",
    "Catalog",
    "CatalogEntry",
    "Endpoint",
    "parse_catalog",
    # Value objects
    "Credentials",
    "AuthResult",
    "TransportResponse",
    # Protocols
    "HttpTransportProtocol",
    "TokenEventListener",
    # Exceptions
    "KeystoneAuthError",
    "ConfigurationError",
    "TransportError",
    "IdentityTimeoutError",
    "CatalogResolutionError",
    "MalformedResponseError",
    "create_error_response",
    # Services
    "EndpointResolver",
    "TokenAuthenticator",
    "find_endpoint_url",
    "resolve_with_fallback",
    "parse_expiry",
    # Configuration
    "KeystoneSettings",
    "get_settings",
    # Infrastructure
    "HttpxHttpTransport",
    "create_authenticator",
]
