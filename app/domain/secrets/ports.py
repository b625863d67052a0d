"""
Port interfaces (ABCs) for the secrets bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.secrets.entities import ClassifiedOutcome, SecretRecord


class SecretStore(ABC):
    """Port for the backend that owns persisted secrets.

    Implementations are expected to be safe for concurrent use.
    Failures are reported by raising; the caller classifies them.
    """

    @abstractmethod
    def list(self, namespace: str) -> list[str]:
        """Return the names of all secrets in a namespace."""
        raise NotImplementedError

    @abstractmethod
    def create(self, record: SecretRecord) -> None:
        """Persist a new secret. Fails if the name is already taken."""
        raise NotImplementedError

    @abstractmethod
    def replace(self, record: SecretRecord) -> None:
        """Overwrite an existing secret. Fails if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, namespace: str, name: str) -> None:
        """Remove a secret. Fails if it does not exist."""
        raise NotImplementedError


class NamespaceAuthorizer(ABC):
    """Port for the yes/no capability check on a namespace."""

    @abstractmethod
    def can_manage_secrets(self, namespace: str) -> bool:
        """Return True if secrets may be managed within ``namespace``."""
        raise NotImplementedError


class SecretDecoder(ABC):
    """Port for decoding request payloads into secret records."""

    @abstractmethod
    def decode(self, body: bytes) -> SecretRecord:
        """Decode a full secret record.

        Raises:
            MalformedSecretError: If the body is not a valid record or
                carries no name.
        """
        raise NotImplementedError

    @abstractmethod
    def extract_namespace(self, body: bytes) -> str:
        """Return the namespace declared in a payload, or "" if absent.

        Unlike ``decode`` this does not require a name.

        Raises:
            MalformedSecretError: If the body is not a JSON object.
        """
        raise NotImplementedError


class StoreErrorClassifier(ABC):
    """Port for mapping one store's error taxonomy onto outcomes."""

    @abstractmethod
    def classify(self, error: Exception) -> Optional[ClassifiedOutcome]:
        """Return the outcome for ``error``, or None if it is not recognized."""
        raise NotImplementedError
