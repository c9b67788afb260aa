"""Domain entities for keystone-swift-auth."""

from .token import Token
from .catalog import Catalog, CatalogEntry, Endpoint, parse_catalog

__all__ = [
    "Token",
    "Catalog",
    "CatalogEntry",
    "Endpoint",
    "parse_catalog",
]
