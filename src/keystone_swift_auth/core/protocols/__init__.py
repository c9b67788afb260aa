"""Protocol contracts for keystone-swift-auth."""

from .http_transport import HttpTransportProtocol
from .token_event_listener import TokenEventListener

__all__ = [
    "HttpTransportProtocol",
    "TokenEventListener",
]
