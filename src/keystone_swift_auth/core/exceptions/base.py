"""Base exceptions for keystone-swift-auth.

All exceptions inherit from KeystoneAuthError and carry an error code and
structured details so callers can log or serialize them consistently.
"""

from typing import Any, Dict, Optional


class KeystoneAuthError(Exception):
    """Base exception for all keystone-swift-auth errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(KeystoneAuthError):
    """Raised when credentials or settings are invalid."""
    pass


def create_error_response(exception: KeystoneAuthError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The keystone-swift-auth exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
