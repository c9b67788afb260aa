"""Service catalog entities returned with a Keystone v3 token."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from ..exceptions import MalformedResponseError

Catalog = Sequence["CatalogEntry"]


@dataclass(frozen=True)
class Endpoint:
    """One network endpoint of a catalog service."""

    interface: str
    region: Optional[str]
    url: str

    @classmethod
    def from_dict(cls, data: dict) -> Optional['Endpoint']:
        """Build endpoint from raw catalog JSON.

        Returns None for endpoints without a URL since they can never be
        resolved. Keystone reports both ``region`` and ``region_id``;
        ``region`` wins when present.
        """
        url = data.get("url")
        if not url:
            return None

        return cls(
            interface=data.get("interface", ""),
            region=data.get("region") or data.get("region_id"),
            url=url,
        )


@dataclass(frozen=True)
class CatalogEntry:
    """A named service and its endpoints, in catalog order."""

    name: str
    endpoints: Tuple[Endpoint, ...] = field(default_factory=tuple)
    type: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'CatalogEntry':
        if not isinstance(data, dict):
            raise MalformedResponseError.invalid(
                "token.catalog", "catalog entries must be objects"
            )

        raw_endpoints = data.get("endpoints")
        if raw_endpoints is None:
            raw_endpoints = []
        if not isinstance(raw_endpoints, list):
            raise MalformedResponseError.invalid(
                "token.catalog", "endpoints must be a list"
            )

        endpoints = []
        for raw in raw_endpoints:
            if not isinstance(raw, dict):
                raise MalformedResponseError.invalid(
                    "token.catalog", "endpoints must be objects"
                )
            endpoint = Endpoint.from_dict(raw)
            if endpoint is not None:
                endpoints.append(endpoint)

        return cls(
            name=data.get("name", ""),
            endpoints=tuple(endpoints),
            type=data.get("type"),
            id=data.get("id"),
        )


def parse_catalog(raw: Any) -> List[CatalogEntry]:
    """Parse the ``token.catalog`` list of an identity response.

    Args:
        raw: Decoded JSON value of ``token.catalog``

    Returns:
        Catalog entries in response order

    Raises:
        MalformedResponseError: If the catalog is not a list of objects
    """
    if not isinstance(raw, list):
        raise MalformedResponseError.invalid("token.catalog", "expected a list")

    return [CatalogEntry.from_dict(item) for item in raw]
