"""
Keystone v3 token authenticator with cached, on-demand renewal.

Exchanges password credentials for a project-scoped token, resolves the
object storage endpoint from the returned catalog and serves the cached
token until it is about to expire.
"""
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from ...core.entities import Token, parse_catalog
from ...core.exceptions import MalformedResponseError, ConfigurationError, IdentityTimeoutError
from ...core.protocols import HttpTransportProtocol, TokenEventListener
from ...core.value_objects import AuthResult, Credentials, TransportResponse
from .endpoint_resolver import EndpointResolver

logger = logging.getLogger(__name__)

SUBJECT_TOKEN_HEADER = "x-subject-token"
DEFAULT_RENEWAL_BUFFER = timedelta(seconds=10)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_expiry(value: Any) -> datetime:
    """Parse an ISO 8601 expiry timestamp into an aware datetime.

    A trailing ``Z`` means UTC. Naive timestamps are treated as UTC.

    Raises:
        MalformedResponseError: If the value is not an ISO 8601 string
    """
    if not isinstance(value, str) or not value:
        raise MalformedResponseError.invalid("expires_at", "expected an ISO 8601 string")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        expires_at = datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedResponseError.invalid("expires_at", str(e)) from e

    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at


class TokenAuthenticator:
    """
    Token cache and renewal state machine.

    Holds at most one Token. The cached token is replaced by assigning a
    fully built immutable value, so callers never see a partial token.
    Failed exchanges never touch the cached token.
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: HttpTransportProtocol,
        resolver: Optional[EndpointResolver] = None,
        renewal_buffer: timedelta = DEFAULT_RENEWAL_BUFFER,
        single_flight: bool = False,
        listener: Optional[TokenEventListener] = None,
        clock: Callable[[], datetime] = utc_now,
        owns_transport: bool = False
    ):
        """
        Initialize token authenticator.

        Args:
            credentials: User credentials and identity service URL
            transport: HTTP transport used for identity exchanges
            resolver: Endpoint resolver (defaults to swift, then radosgw-swift)
            renewal_buffer: Lead time before expiry that forces renewal
            single_flight: Share one in-flight renewal between concurrent callers
            listener: Optional observer for issuance events
            clock: Source of the current time (timezone-aware)
            owns_transport: Close the transport when the authenticator closes
        """
        if renewal_buffer < timedelta(0):
            raise ConfigurationError(
                "Renewal buffer cannot be negative",
                details={"renewal_buffer": renewal_buffer.total_seconds()}
            )

        self.credentials = credentials
        self.transport = transport
        self.resolver = resolver or EndpointResolver()
        self.renewal_buffer = renewal_buffer
        self.single_flight = single_flight
        self.listener = listener
        self._clock = clock
        self._owns_transport = owns_transport

        self._token: Optional[Token] = None
        self._inflight: Optional[asyncio.Task] = None

        logger.info(
            f"TokenAuthenticator initialized for {credentials.auth_url} "
            f"(project={credentials.project_id}, region={credentials.region or 'any'}, "
            f"single_flight={single_flight})"
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the transport if this authenticator owns it."""
        if self._owns_transport:
            await self.transport.close()

    @property
    def current_token(self) -> Optional[Token]:
        """Currently cached token, None before the first exchange."""
        return self._token

    def invalidate(self) -> None:
        """Drop the cached token so the next call re-authenticates."""
        if self._token is not None:
            logger.debug(f"Invalidating cached token {self._token.mask_for_logging()}")
        self._token = None

    def needs_renewal(self, now: Optional[datetime] = None) -> bool:
        """Check if the cached token is absent or inside the renewal buffer."""
        if self._token is None:
            return True
        return self._token.expires_within(self.renewal_buffer, now or self._clock())

    def build_auth_request(self) -> Dict[str, Any]:
        """Build the password-method, project-scoped identity request body."""
        credentials = self.credentials
        return {
            "auth": {
                "identity": {
                    "methods": ["password"],
                    "password": {
                        "user": {
                            "name": credentials.username,
                            "password": credentials.password,
                            "domain": {"id": credentials.domain_id}
                        }
                    }
                },
                "scope": {
                    "project": {
                        "id": credentials.project_id,
                        "domain": {"id": credentials.domain_id}
                    }
                }
            }
        }

    async def issue_new_token(self, timeout: Optional[float] = None) -> Token:
        """
        Exchange credentials for a new token.

        Does not touch the cached token.

        Args:
            timeout: Request timeout in seconds passed to the transport

        Returns:
            Newly issued token with its resolved service URL

        Raises:
            TransportError: If the identity service could not be reached
            MalformedResponseError: If the response lacks expected fields
            CatalogResolutionError: If no usable endpoint is in the catalog
        """
        logger.debug(f"Requesting new token from {self.credentials.tokens_url}")

        response = await self.transport.post(
            self.credentials.tokens_url,
            data=self.build_auth_request(),
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json"
            },
            timeout=timeout
        )

        return self._token_from_response(response)

    def _token_from_response(self, response: TransportResponse) -> Token:
        """Parse header and body of an identity response into a Token."""
        token_value = response.header(SUBJECT_TOKEN_HEADER)
        if not token_value:
            raise MalformedResponseError.missing(SUBJECT_TOKEN_HEADER)

        body = response.body
        if not isinstance(body, dict) or not isinstance(body.get("token"), dict):
            raise MalformedResponseError.missing("token")
        token_body = body["token"]

        if "catalog" not in token_body:
            raise MalformedResponseError.missing("token.catalog")
        catalog = parse_catalog(token_body["catalog"])

        expires = body.get("expires_at") or token_body.get("expires_at")
        if not expires:
            raise MalformedResponseError.missing("expires_at")
        expires_at = parse_expiry(expires)

        url = self.resolver.resolve(catalog, self.credentials.region)

        return Token(value=token_value, expires_at=expires_at, url=url)

    async def _renew(self, timeout: Optional[float]) -> Token:
        """Issue a token and cache it, notifying the listener."""
        try:
            token = await self.issue_new_token(timeout=timeout)
        except Exception as e:
            logger.error(f"Token issuance failed: {e}")
            self._notify("token_issue_failed", e)
            raise

        self._token = token
        logger.info(
            f"Issued token {token.mask_for_logging()} for {token.url}, "
            f"expires at {token.expires_at.isoformat()}"
        )
        self._notify("token_issued", token)
        return token

    async def _renew_shared(self, timeout: Optional[float]) -> Token:
        """Join the in-flight renewal, starting one if none is running."""
        task = self._inflight
        if task is None or task.done():
            task = asyncio.ensure_future(self._renew(timeout))
            self._inflight = task
            task.add_done_callback(self._clear_inflight)
        else:
            logger.debug("Waiting for in-flight token renewal")

        # Shield so a cancelled waiter does not cancel the exchange for the others
        if timeout is None:
            return await asyncio.shield(task)

        try:
            return await asyncio.wait_for(asyncio.shield(task), timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Gave up waiting for in-flight token renewal after {timeout}s")
            raise IdentityTimeoutError(
                f"Token renewal did not finish within {timeout}s",
                url=self.credentials.tokens_url
            ) from e

    def _clear_inflight(self, task: asyncio.Task) -> None:
        if self._inflight is task:
            self._inflight = None
        if not task.cancelled():
            # Mark the exception retrieved when every waiter went away
            task.exception()

    def _notify(self, event: str, payload: Any) -> None:
        if self.listener is None:
            return
        try:
            getattr(self.listener, event)(payload)
        except Exception as e:
            logger.warning(f"Token listener {event} callback failed: {e}")

    async def authenticate(self, timeout: Optional[float] = None) -> AuthResult:
        """
        Return a valid storage URL and token, renewing when needed.

        Renews when no token is cached or when ``now + renewal_buffer`` is
        strictly after the cached token's expiry. A token issued to fill an
        empty cache goes through the buffer check too, so it is renewed once
        more when it already expires inside the buffer.

        Args:
            timeout: Request timeout in seconds for a renewal exchange

        Returns:
            AuthResult with the resolved URL and bearer token
        """
        token = self._token
        if token is None:
            logger.debug("No cached token, authenticating")
            token = await self._renew_for_caller(timeout)

        if token.expires_within(self.renewal_buffer, self._clock()):
            logger.debug(
                f"Token {token.mask_for_logging()} expires within "
                f"{self.renewal_buffer.total_seconds()}s, renewing"
            )
            token = await self._renew_for_caller(timeout)

        return AuthResult(url=token.url, token=token.value)

    async def _renew_for_caller(self, timeout: Optional[float]) -> Token:
        if self.single_flight:
            return await self._renew_shared(timeout)
        return await self._renew(timeout)
