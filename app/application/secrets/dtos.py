"""
Data Transfer Objects for the secrets application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.secrets.entities import SecretRecord


@dataclass(frozen=True)
class SaveSecretCommand:
    """Input DTO for creating or replacing a secret.

    Attributes:
        record: Decoded secret as sent by the caller.
        namespace: Resolved namespace. Takes precedence over
            ``record.namespace``.
    """

    record: SecretRecord
    namespace: str


@dataclass(frozen=True)
class ListSecretsQuery:
    """Input DTO for listing the secrets of a namespace.

    Attributes:
        namespace: Resolved namespace to list.
    """

    namespace: str


@dataclass(frozen=True)
class DeleteSecretCommand:
    """Input DTO for removing a secret.

    Attributes:
        namespace: Resolved namespace holding the secret.
        name: Name of the secret to delete.
    """

    namespace: str
    name: str


@dataclass(frozen=True)
class SecretItem:
    """Output DTO for a listed secret. Never carries the value.

    Attributes:
        name: Secret name.
        namespace: Namespace the secret belongs to.
    """

    name: str
    namespace: str


@dataclass(frozen=True)
class SecretResponse:
    """Output DTO of the dispatcher, ready to be rendered by a transport.

    Attributes:
        status_code: Numeric HTTP-style status.
        items: Listed secrets for successful reads, otherwise None.
        reason: Short diagnostic for failures, otherwise None.
    """

    status_code: int
    items: Optional[list[SecretItem]] = None
    reason: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status_code < 400
