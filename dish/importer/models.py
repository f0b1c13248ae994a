"""Data models for request options and transport outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

# One hour, in seconds
REQUEST_TIMEOUT_SECONDS = 3600


class PostOutcome(str, Enum):
    """Classification of an upload attempt."""
    SUCCESS = "success"
    CONFLICT = "conflict"
    AUTH_FAILED = "auth_failed"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestOptions:
    """Options for a single HTTP request against DHIS2."""
    auth: str  # "username:password"
    method: str
    timeout: int = REQUEST_TIMEOUT_SECONDS
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def auth_tuple(self) -> tuple[str, str]:
        """Split the auth string into a (username, password) pair."""
        username, _, password = self.auth.partition(":")
        return username, password

    def with_headers(self, headers: dict[str, str]) -> RequestOptions:
        """Return a copy with the given headers merged in."""
        return RequestOptions(
            auth=self.auth,
            method=self.method,
            timeout=self.timeout,
            headers={**self.headers, **headers},
        )


@dataclass(frozen=True)
class FileWriteResult:
    """Result of writing a local JSON file."""
    path: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PostResult:
    """Structured result of a POST to DHIS2."""
    outcome: PostOutcome
    status_code: Optional[int] = None
    body: str = ""
    data: Any = None
    error: Optional[str] = None
    payload_write: Optional[FileWriteResult] = None
    output_write: Optional[FileWriteResult] = None

    @property
    def ok(self) -> bool:
        """True for success and conflict (treated as an idempotent import)."""
        return self.outcome in (PostOutcome.SUCCESS, PostOutcome.CONFLICT)


@dataclass(frozen=True)
class CountEntry:
    """A single key/count pair from a CountMap."""
    key: str
    val: int
