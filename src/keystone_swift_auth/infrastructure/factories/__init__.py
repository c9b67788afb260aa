"""Factories wiring configuration into authenticators."""

from .authenticator_factory import create_authenticator, create_transport

__all__ = [
    "create_authenticator",
    "create_transport",
]
