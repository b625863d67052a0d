"""
Adapter: Static namespace authorizer.

Implements NamespaceAuthorizer port.
Approves the namespaces listed in configuration.
"""

from typing import Iterable

from app.domain.secrets.ports import NamespaceAuthorizer


class StaticNamespaceAuthorizer(NamespaceAuthorizer):
    """Allows secret management only in a fixed set of namespaces."""

    def __init__(self, managed_namespaces: Iterable[str]) -> None:
        self._managed = frozenset(ns.strip() for ns in managed_namespaces if ns.strip())

    def can_manage_secrets(self, namespace: str) -> bool:
        return namespace in self._managed
