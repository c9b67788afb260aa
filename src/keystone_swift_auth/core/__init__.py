"""Core domain objects and contracts.

- entities/: Token and service catalog
- value_objects/: Credentials, AuthResult, TransportResponse
- exceptions/: error taxonomy
- protocols/: transport and observer contracts
"""

from .entities import Token, Catalog, CatalogEntry, Endpoint, parse_catalog
from .value_objects import Credentials, AuthResult, TransportResponse
from .protocols import HttpTransportProtocol, TokenEventListener

__all__ = [
    "Token",
    "Catalog",
    "CatalogEntry",
    "Endpoint",
    "parse_catalog",
    "Credentials",
    "AuthResult",
    "TransportResponse",
    "HttpTransportProtocol",
    "TokenEventListener",
]
