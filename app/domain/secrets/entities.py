"""
Domain entities for the secrets bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class SecretMethod(Enum):
    """Operation requested by the caller, keyed by HTTP verb."""

    READ = "GET"
    CREATE = "POST"
    UPDATE = "PUT"
    DELETE = "DELETE"

    @classmethod
    def from_http(cls, method: str) -> Optional["SecretMethod"]:
        """Return the operation for an HTTP method, or None if unsupported."""
        try:
            return cls(method.upper())
        except ValueError:
            return None


class OutcomeStatus(Enum):
    """Closed vocabulary of caller-visible store failure outcomes."""

    NOT_FOUND = "NotFound"
    ALREADY_EXISTS = "AlreadyExists"
    CONFLICT = "Conflict"
    INVALID_INPUT = "InvalidInput"
    FORBIDDEN = "Forbidden"
    UNAUTHORIZED = "Unauthorized"
    TIMEOUT = "Timeout"
    INTERNAL = "Internal"


class ResolutionFailureKind(Enum):
    """Why a namespace could not be resolved for a request."""

    MALFORMED_REQUEST = "malformed_request"
    UNAUTHORIZED = "unauthorized"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SecretRecord:
    """A named secret bound to exactly one namespace.

    The value fields are opaque: they are handed to the store as-is and
    never returned when listing.
    """

    name: str
    namespace: str = ""
    value: Optional[str] = None
    raw_value: Optional[bytes] = None

    def with_namespace(self, namespace: str) -> "SecretRecord":
        """Return a copy of this record bound to ``namespace``."""
        return replace(self, namespace=namespace)


@dataclass(frozen=True)
class SecretRequest:
    """Transport-neutral view of an incoming secrets request.

    Attributes:
        method: HTTP method as received (GET, POST, PUT, DELETE, ...).
        body: Raw request body; empty when none was sent.
        query_namespace: Value of the ``namespace`` query parameter, if any.
    """

    method: str
    body: bytes = b""
    query_namespace: Optional[str] = None


@dataclass(frozen=True)
class ResolvedNamespace:
    """The authoritative namespace for a single request."""

    name: str
    is_default: bool = False


@dataclass(frozen=True)
class ClassifiedOutcome:
    """A store failure mapped onto the stable outcome vocabulary."""

    status: OutcomeStatus
    reason: str
