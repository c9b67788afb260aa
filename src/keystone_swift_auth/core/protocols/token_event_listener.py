"""Token lifecycle observer contract."""

from typing import Protocol, runtime_checkable

from ..entities import Token


@runtime_checkable
class TokenEventListener(Protocol):
    """Observer notified about token issuance.

    Listener errors are logged by the authenticator and never change the
    outcome of ``authenticate()``.
    """

    def token_issued(self, token: Token) -> None:
        """Called after a new token has been cached."""
        ...

    def token_issue_failed(self, error: Exception) -> None:
        """Called when an identity exchange failed."""
        ...
