"""Application layer for keystone-swift-auth."""

from .services import EndpointResolver, TokenAuthenticator

__all__ = [
    "EndpointResolver",
    "TokenAuthenticator",
]
