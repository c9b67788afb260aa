"""Application services: endpoint resolution and token authentication."""

from .endpoint_resolver import (
    EndpointResolver,
    find_endpoint_url,
    resolve_with_fallback,
    DEFAULT_SERVICE_NAMES,
    DEFAULT_INTERFACE,
)
from .token_authenticator import (
    TokenAuthenticator,
    parse_expiry,
    DEFAULT_RENEWAL_BUFFER,
    SUBJECT_TOKEN_HEADER,
)

__all__ = [
    "EndpointResolver",
    "find_endpoint_url",
    "resolve_with_fallback",
    "DEFAULT_SERVICE_NAMES",
    "DEFAULT_INTERFACE",
    "TokenAuthenticator",
    "parse_expiry",
    "DEFAULT_RENEWAL_BUFFER",
    "SUBJECT_TOKEN_HEADER",
]
