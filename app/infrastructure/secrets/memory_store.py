"""
Adapter: In-memory secret store.

Implements SecretStore port.
Keeps secrets in a process-local dict. Used for development,
single-replica deployments and tests.
"""

import logging
import threading

from app.domain.secrets.entities import SecretRecord
from app.domain.secrets.errors import (
    InvalidSecretError,
    SecretAlreadyExistsError,
    SecretNotFoundError,
)
from app.domain.secrets.ports import SecretStore

logger = logging.getLogger(__name__)


class InMemorySecretStore(SecretStore):
    """Secret store backed by a dict keyed on (namespace, name).

    All access goes through a single lock. Errors raised are domain
    store errors, which carry their own outcome status.
    """

    def __init__(self) -> None:
        self._secrets: dict[tuple[str, str], SecretRecord] = {}
        self._lock = threading.Lock()

    def list(self, namespace: str) -> list[str]:
        """Return secret names in ``namespace``, sorted."""
        with self._lock:
            return sorted(name for ns, name in self._secrets if ns == namespace)

    def create(self, record: SecretRecord) -> None:
        self._validate(record)
        key = (record.namespace, record.name)
        with self._lock:
            if key in self._secrets:
                raise SecretAlreadyExistsError(record.namespace, record.name)
            self._secrets[key] = record

    def replace(self, record: SecretRecord) -> None:
        self._validate(record)
        key = (record.namespace, record.name)
        with self._lock:
            if key not in self._secrets:
                raise SecretNotFoundError(record.namespace, record.name)
            self._secrets[key] = record

    def delete(self, namespace: str, name: str) -> None:
        with self._lock:
            if self._secrets.pop((namespace, name), None) is None:
                raise SecretNotFoundError(namespace, name)

    def get(self, namespace: str, name: str) -> SecretRecord:
        """Return the stored record for ``namespace``/``name``."""
        with self._lock:
            try:
                return self._secrets[(namespace, name)]
            except KeyError:
                raise SecretNotFoundError(namespace, name) from None

    @staticmethod
    def _validate(record: SecretRecord) -> None:
        if not record.name:
            raise InvalidSecretError("name must not be empty")
        if not record.namespace:
            raise InvalidSecretError("namespace must not be empty")
