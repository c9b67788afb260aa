"""Pytest configuration and fixtures for keystone-swift-auth tests."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from keystone_swift_auth import Credentials, TransportResponse


class FakeClock:
    """Controllable timezone-aware clock."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


def swift_catalog(
    url: str = "https://swift.example/v1",
    name: str = "swift",
    region: str = "RegionOne"
) -> List[Dict[str, Any]]:
    """Catalog with one public endpoint for a single service."""
    return [
        {
            "name": name,
            "type": "object-store",
            "endpoints": [
                {"interface": "public", "region": region, "url": url},
            ],
        }
    ]


def identity_response(
    token: Optional[str] = "tok123",
    expires_at: str = "2099-01-01T00:00:00Z",
    catalog: Optional[List[Dict[str, Any]]] = None,
    top_level_expiry: bool = False
) -> TransportResponse:
    """Build an identity exchange response.

    Expiry goes to ``token.expires_at`` unless ``top_level_expiry`` is set.
    """
    token_body: Dict[str, Any] = {
        "catalog": swift_catalog() if catalog is None else catalog,
    }
    body: Dict[str, Any] = {"token": token_body}
    if top_level_expiry:
        body["expires_at"] = expires_at
    else:
        token_body["expires_at"] = expires_at

    headers = {"X-Subject-Token": token} if token else {}
    return TransportResponse(status_code=201, headers=headers, body=body)


def iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


@pytest.fixture
def credentials():
    """Credentials scoped to project p1 in domain d1."""
    return Credentials(
        username="demo",
        password="s3cret",
        domain_id="d1",
        project_id="p1",
        auth_url="https://keystone.example/v3/"
    )


@pytest.fixture
def regional_credentials():
    return Credentials(
        username="demo",
        password="s3cret",
        domain_id="d1",
        project_id="p1",
        auth_url="https://keystone.example/v3",
        region="RegionOne"
    )


@pytest.fixture
def clock():
    return FakeClock(datetime(2030, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def mock_transport():
    """Mock transport answering every exchange with the example response."""
    transport = AsyncMock()
    transport.post = AsyncMock(return_value=identity_response())
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def make_identity_response():
    """Builder for identity exchange responses."""
    return identity_response


@pytest.fixture
def make_catalog():
    """Builder for single-service catalogs."""
    return swift_catalog


@pytest.fixture
def to_iso():
    """Format an aware datetime the way Keystone does."""
    return iso
