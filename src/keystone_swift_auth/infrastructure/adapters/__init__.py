"""Infrastructure adapters for external systems."""

from .httpx_transport import HttpxHttpTransport

__all__ = [
    "HttpxHttpTransport",
]
