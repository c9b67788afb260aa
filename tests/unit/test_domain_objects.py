"""Tests for tokens, credentials, expiry parsing and exceptions."""

from datetime import datetime, timedelta, timezone

import pytest

from keystone_swift_auth import (
    AuthResult,
    CatalogResolutionError,
    ConfigurationError,
    Credentials,
    MalformedResponseError,
    Token,
    TransportError,
    TransportResponse,
    create_error_response,
    parse_expiry,
)

NOW = datetime(2030, 1, 1, tzinfo=timezone.utc)


class TestToken:

    def make_token(self, seconds_left: float) -> Token:
        return Token(
            value="gAAAAABexampletokenvalue",
            expires_at=NOW + timedelta(seconds=seconds_left),
            url="https://swift.example/v1"
        )

    def test_expires_within_buffer(self):
        token = self.make_token(5)
        assert token.expires_within(timedelta(seconds=10), NOW)

    def test_not_expiring_outside_buffer(self):
        token = self.make_token(11)
        assert not token.expires_within(timedelta(seconds=10), NOW)

    def test_boundary_is_not_expiring(self):
        token = self.make_token(10)
        assert not token.expires_within(timedelta(seconds=10), NOW)

    def test_remaining_and_expired(self):
        token = self.make_token(30)
        assert token.remaining(NOW) == timedelta(seconds=30)
        assert not token.is_expired(NOW)
        assert token.is_expired(NOW + timedelta(seconds=30))

    def test_repr_masks_value(self):
        token = self.make_token(30)
        assert "gAAAAABexampletokenvalue" not in repr(token)
        assert "gAAAAABexampletokenvalue" not in str(token)
        assert token.mask_for_logging() == "gAAA...alue"

    def test_naive_expiry_rejected(self):
        with pytest.raises(ValueError):
            Token(value="t", expires_at=datetime(2030, 1, 1), url="u")

    def test_empty_value_rejected(self):
        with pytest.raises(ValueError):
            Token(value="", expires_at=NOW, url="u")

    def test_immutable(self):
        token = self.make_token(30)
        with pytest.raises(AttributeError):
            token.value = "other"


class TestParseExpiry:

    @pytest.mark.parametrize("value,expected", [
        ("2099-01-01T00:00:00Z", datetime(2099, 1, 1, tzinfo=timezone.utc)),
        ("2015-08-27T09:49:58.000000Z", datetime(2015, 8, 27, 9, 49, 58, tzinfo=timezone.utc)),
        ("2030-01-01T02:00:00+02:00", datetime(2030, 1, 1, tzinfo=timezone.utc)),
        ("2030-01-01T00:00:00", datetime(2030, 1, 1, tzinfo=timezone.utc)),
    ])
    def test_parses_iso8601(self, value, expected):
        parsed = parse_expiry(value)
        assert parsed == expected
        assert parsed.tzinfo is not None

    @pytest.mark.parametrize("value", ["", "soon", None, 1700000000])
    def test_invalid_values(self, value):
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_expiry(value)
        assert exc_info.value.field == "expires_at"


class TestCredentials:

    def test_auth_url_normalized(self):
        credentials = Credentials(
            username="u", password="p", domain_id="d", project_id="p1",
            auth_url="https://keystone.example/v3//"
        )
        assert credentials.tokens_url == "https://keystone.example/v3/auth/tokens"

    def test_password_not_in_repr(self):
        credentials = Credentials(
            username="u", password="hunter2", domain_id="d", project_id="p1",
            auth_url="https://keystone.example/v3"
        )
        assert "hunter2" not in repr(credentials)

    def test_empty_region_is_none(self):
        credentials = Credentials(
            username="u", password="p", domain_id="d", project_id="p1",
            auth_url="https://keystone.example/v3", region=""
        )
        assert credentials.region is None

    def test_missing_fields(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Credentials(username="", password="", domain_id="d", project_id="p1",
                        auth_url="https://keystone.example/v3")
        assert exc_info.value.details["missing"] == ["username", "password"]

    def test_invalid_auth_url(self):
        with pytest.raises(ConfigurationError):
            Credentials(username="u", password="p", domain_id="d", project_id="p1",
                        auth_url="keystone.example/v3")


class TestValueObjects:

    def test_transport_response_headers_case_insensitive(self):
        response = TransportResponse(status_code=201, headers={"X-Subject-Token": "t"}, body={})
        assert response.header("x-subject-token") == "t"
        assert response.header("X-SUBJECT-TOKEN") == "t"
        assert response.header("missing") is None

    def test_auth_result(self):
        result = AuthResult(url="https://swift.example/v1", token="averyveryverylongtoken")
        assert result.as_dict() == {"url": "https://swift.example/v1", "token": "averyveryverylongtoken"}
        assert result.auth_headers() == {"X-Auth-Token": "averyveryverylongtoken"}
        assert "averyveryverylongtoken" not in repr(result)


class TestExceptions:

    def test_error_response_shape(self):
        error = CatalogResolutionError.for_services(["swift", "radosgw-swift"], "public", "R1", ["nova"])
        response = create_error_response(error)

        assert response["error"]["code"] == "CatalogResolutionError"
        assert response["error"]["type"] == "CatalogResolutionError"
        assert response["error"]["details"]["available_services"] == ["nova"]
        assert "region 'R1'" in response["error"]["message"]

    def test_transport_error_from_status(self):
        error = TransportError.from_status("https://k/v3/auth/tokens", 503, "x" * 500)
        assert error.status_code == 503
        assert len(error.response_excerpt) == 200
        assert "url=https://k/v3/auth/tokens" in str(error)
        assert set(error.details) == {"url", "status_code", "response_excerpt"}

    def test_distinct_failure_types(self):
        assert not issubclass(CatalogResolutionError, TransportError)
        assert not issubclass(MalformedResponseError, TransportError)
