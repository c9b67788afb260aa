"""Authenticator factory wiring settings, transport and resolver."""

import logging
from typing import Optional, Sequence

from ...application.services import EndpointResolver, TokenAuthenticator, DEFAULT_SERVICE_NAMES
from ...config.settings import KeystoneSettings
from ...core.protocols import HttpTransportProtocol, TokenEventListener
from ..adapters import HttpxHttpTransport

logger = logging.getLogger(__name__)


def create_transport(settings: KeystoneSettings) -> HttpxHttpTransport:
    """Create the default httpx transport from settings."""
    return HttpxHttpTransport(
        timeout=settings.timeout,
        max_connections=settings.max_connections,
        verify_ssl=settings.verify_ssl
    )


def create_authenticator(
    settings: Optional[KeystoneSettings] = None,
    transport: Optional[HttpTransportProtocol] = None,
    service_names: Sequence[str] = DEFAULT_SERVICE_NAMES,
    listener: Optional[TokenEventListener] = None,
    **overrides
) -> TokenAuthenticator:
    """Create a TokenAuthenticator from settings.

    Args:
        settings: Settings instance, read from the environment when omitted
        transport: Transport to use; a new httpx transport is created
            (and owned by the authenticator) when omitted
        service_names: Primary service name followed by fallbacks
        listener: Optional observer for issuance events
        **overrides: Field overrides applied on top of the settings

    Returns:
        Configured authenticator

    Raises:
        ConfigurationError: If the credentials are incomplete
    """
    settings = settings or KeystoneSettings()
    if overrides:
        # Re-validate so overrides get the same coercion as environment values
        settings = KeystoneSettings.model_validate({**settings.model_dump(), **overrides})

    credentials = settings.to_credentials()
    owns_transport = transport is None
    transport = transport or create_transport(settings)

    logger.debug(f"Creating authenticator for services {list(service_names)}")

    return TokenAuthenticator(
        credentials=credentials,
        transport=transport,
        resolver=EndpointResolver(service_names),
        renewal_buffer=settings.renewal_buffer,
        single_flight=settings.single_flight,
        listener=listener,
        owns_transport=owns_transport
    )
