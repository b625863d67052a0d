"""
Use case: Delete a secret from the resolved namespace.

Input: DeleteSecretCommand
Output: None
Side effects: Removes a stored secret.
Failure cases: Any store error, propagated unclassified.
"""

import logging

from app.application.secrets.dtos import DeleteSecretCommand
from app.domain.secrets.ports import SecretStore

logger = logging.getLogger(__name__)


class DeleteSecretUseCase:
    def __init__(self, store: SecretStore) -> None:
        self._store = store

    def execute(self, command: DeleteSecretCommand) -> None:
        self._store.delete(command.namespace, command.name)
        logger.info("Secret %s deleted from namespace=%s", command.name, command.namespace)
