"""Service catalog endpoint resolution."""

import logging
from typing import Optional, Sequence

from ...core.entities import Catalog
from ...core.exceptions import CatalogResolutionError

logger = logging.getLogger(__name__)

# Many OpenStack clouds expose Swift through Ceph radosgw under its own name
DEFAULT_SERVICE_NAMES = ("swift", "radosgw-swift")
DEFAULT_INTERFACE = "public"


class EndpointResolver:
    """Endpoint lookup over a service catalog.

    Handles ONLY catalog queries. Lookups are first-match-wins in catalog
    order; duplicate (interface, region) pairs are not detected.
    """

    def __init__(
        self,
        service_names: Sequence[str] = DEFAULT_SERVICE_NAMES,
        interface: str = DEFAULT_INTERFACE
    ):
        """Initialize endpoint resolver.

        Args:
            service_names: Primary service name followed by fallbacks
            interface: Interface-visibility tag to select
        """
        if not service_names:
            raise ValueError("At least one service name is required")

        self.service_names = tuple(service_names)
        self.interface = interface

    @staticmethod
    def find_endpoint_url(
        catalog: Catalog,
        service_name: str,
        interface: str,
        region: Optional[str] = None
    ) -> Optional[str]:
        """Find the URL of a service endpoint.

        Args:
            catalog: Parsed service catalog
            service_name: Exact catalog service name
            interface: Interface-visibility tag (public/internal/admin)
            region: Region to match; None or empty ignores the region

        Returns:
            Endpoint URL, or None when the service or endpoint is absent
        """
        entry = next((e for e in catalog if e.name == service_name), None)
        if entry is None:
            return None

        if region:
            endpoint = next(
                (ep for ep in entry.endpoints
                 if ep.interface == interface and ep.region == region),
                None
            )
        else:
            endpoint = next(
                (ep for ep in entry.endpoints if ep.interface == interface),
                None
            )

        return endpoint.url if endpoint else None

    def resolve(self, catalog: Catalog, region: Optional[str] = None) -> str:
        """Resolve the service URL, probing fallback service names in order.

        Args:
            catalog: Parsed service catalog
            region: Region to match, None for any region

        Returns:
            URL of the first service name that resolves

        Raises:
            CatalogResolutionError: If no service name resolves
        """
        for service_name in self.service_names:
            url = self.find_endpoint_url(catalog, service_name, self.interface, region)
            if url:
                if service_name != self.service_names[0]:
                    logger.info(f"Resolved endpoint using fallback service '{service_name}'")
                return url
            logger.debug(
                f"No {self.interface} endpoint for service '{service_name}' "
                f"(region={region or 'any'})"
            )

        raise CatalogResolutionError.for_services(
            self.service_names,
            self.interface,
            region=region,
            available_services=[entry.name for entry in catalog]
        )


def resolve_with_fallback(
    catalog: Catalog,
    service_names: Sequence[str] = DEFAULT_SERVICE_NAMES,
    interface: str = DEFAULT_INTERFACE,
    region: Optional[str] = None
) -> str:
    """Resolve a service URL trying each service name in order."""
    return EndpointResolver(service_names, interface).resolve(catalog, region)


find_endpoint_url = EndpointResolver.find_endpoint_url
