"""Infrastructure layer: HTTP transport adapters and factories."""

from .adapters import HttpxHttpTransport
from .factories import create_authenticator, create_transport

__all__ = [
    "HttpxHttpTransport",
    "create_authenticator",
    "create_transport",
]
