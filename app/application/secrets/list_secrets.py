"""
Use case: List the secrets of a namespace.

Input: ListSecretsQuery (resolved namespace)
Output: list[SecretItem]
Side effects: None.
Failure cases: Any store error, propagated unclassified.
"""

import logging

from app.application.secrets.dtos import ListSecretsQuery, SecretItem
from app.domain.secrets.ports import SecretStore

logger = logging.getLogger(__name__)


class ListSecretsUseCase:
    """Lists secret names and binds each to the resolved namespace."""

    def __init__(self, store: SecretStore) -> None:
        self._store = store

    def execute(self, query: ListSecretsQuery) -> list[SecretItem]:
        """Run the list use case.

        Args:
            query: The namespace to list.

        Returns:
            One item per secret, all in ``query.namespace``.
        """
        names = self._store.list(query.namespace)
        logger.debug("Listed %d secrets in namespace=%s", len(names), query.namespace)
        return [SecretItem(name=name, namespace=query.namespace) for name in names]
