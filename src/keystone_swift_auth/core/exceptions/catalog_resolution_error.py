"""Service catalog resolution failure."""

from typing import Optional, Sequence

from .base import KeystoneAuthError


class CatalogResolutionError(KeystoneAuthError):
    """Exception raised when the catalog has no usable endpoint.

    The identity exchange itself succeeded; the account simply does not
    expose any of the requested services for this interface and region.
    """

    def __init__(
        self,
        message: str = "Service not found in catalog",
        *,
        service_names: Sequence[str] = (),
        interface: Optional[str] = None,
        region: Optional[str] = None,
        available_services: Sequence[str] = ()
    ) -> None:
        """Initialize catalog resolution error.

        Args:
            message: Human-readable error message
            service_names: Service names probed, in order
            interface: Interface-visibility tag requested
            region: Region requested, None when region was not constrained
            available_services: Service names present in the catalog
        """
        self.service_names = list(service_names)
        self.interface = interface
        self.region = region
        self.available_services = list(available_services)

        super().__init__(
            message,
            details={
                'service_names': self.service_names,
                'interface': interface,
                'region': region,
                'available_services': self.available_services,
            }
        )

    @classmethod
    def for_services(
        cls,
        service_names: Sequence[str],
        interface: str,
        region: Optional[str] = None,
        available_services: Sequence[str] = ()
    ) -> 'CatalogResolutionError':
        """Create exception after every candidate service name was probed."""
        names = " or ".join(service_names)
        message = f"could not find {names} service in catalog"
        if region:
            message += f" for interface '{interface}' in region '{region}'"
        else:
            message += f" for interface '{interface}'"

        return cls(
            message,
            service_names=service_names,
            interface=interface,
            region=region,
            available_services=available_services
        )
