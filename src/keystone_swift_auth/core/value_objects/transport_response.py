"""HTTP response value object handed back by transports."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and decoded JSON body of a successful request.

    Header names are stored lower-cased so lookups are case-insensitive.
    """

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        normalized = {str(k).lower(): v for k, v in dict(self.headers).items()}
        object.__setattr__(self, "headers", normalized)

    @classmethod
    def from_parts(
        cls,
        status_code: int,
        headers: Mapping[str, str],
        body: Any
    ) -> 'TransportResponse':
        return cls(status_code=status_code, headers=dict(headers.items()), body=body)

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())
