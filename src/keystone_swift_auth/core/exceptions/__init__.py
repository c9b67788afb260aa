"""Exceptions for keystone-swift-auth.

Transport failures, catalog resolution failures and malformed responses
are kept distinct so callers can tell "could not reach the identity
service" apart from "the identity service has no usable endpoint".
"""

from .base import (
    KeystoneAuthError,
    ConfigurationError,
    create_error_response,
)
from .transport_error import TransportError, IdentityTimeoutError
from .catalog_resolution_error import CatalogResolutionError
from .malformed_response_error import MalformedResponseError

__all__ = [
    "KeystoneAuthError",
    "ConfigurationError",
    "create_error_response",
    "TransportError",
    "IdentityTimeoutError",
    "CatalogResolutionError",
    "MalformedResponseError",
]
