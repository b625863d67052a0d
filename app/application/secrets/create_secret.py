"""
Use case: Create a secret in the resolved namespace.

Input: SaveSecretCommand
Output: The record as handed to the store.
Side effects: Persists a new secret.
Failure cases: Any store error, propagated unclassified.
"""

import logging

from app.application.secrets.dtos import SaveSecretCommand
from app.domain.secrets.entities import SecretRecord
from app.domain.secrets.ports import SecretStore

logger = logging.getLogger(__name__)


class CreateSecretUseCase:
    """Creates a secret, overriding any namespace given in the payload."""

    def __init__(self, store: SecretStore) -> None:
        self._store = store

    def execute(self, command: SaveSecretCommand) -> SecretRecord:
        record = command.record.with_namespace(command.namespace)
        self._store.create(record)
        logger.info("Secret %s created in namespace=%s", record.name, record.namespace)
        return record
