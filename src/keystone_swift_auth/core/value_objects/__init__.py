"""Value objects for keystone-swift-auth."""

from .credentials import Credentials
from .auth_result import AuthResult
from .transport_response import TransportResponse

__all__ = [
    "Credentials",
    "AuthResult",
    "TransportResponse",
]
