"""
Dependency injection for the secrets bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the secrets context.
"""

import logging
import threading
from functools import lru_cache

from sqlalchemy import create_engine

from app.application.secrets.dispatch_secret_request import (
    DispatchSecretRequestUseCase,
)
from app.core.config import settings
from app.domain.secrets.error_classifier import ChainedErrorClassifier
from app.domain.secrets.namespace_resolver import NamespaceResolver
from app.domain.secrets.ports import SecretStore, StoreErrorClassifier
from app.infrastructure.secrets.error_classifiers import (
    KindAwareErrorClassifier,
    SqlAlchemyErrorClassifier,
)
from app.infrastructure.secrets.memory_store import InMemorySecretStore
from app.infrastructure.secrets.namespace_authorizer import StaticNamespaceAuthorizer
from app.infrastructure.secrets.sql_store import SqlSecretStore
from app.interfaces.secrets.decoder import PydanticSecretDecoder

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
SQL_BACKEND = "sql"


def _build_store(backend: str) -> tuple[SecretStore, list[StoreErrorClassifier]]:
    """Return the store for a backend name with the classifiers for its errors."""
    if backend == MEMORY_BACKEND:
        return InMemorySecretStore(), [KindAwareErrorClassifier()]
    if backend == SQL_BACKEND:
        engine = create_engine(settings.secret_store_url, pool_pre_ping=True)
        return SqlSecretStore(engine), [
            SqlAlchemyErrorClassifier(),
            KindAwareErrorClassifier(),
        ]
    raise ValueError(f"Unknown secret store backend: {backend}")


_store_bundle_lock = threading.Lock()


@lru_cache(maxsize=1)
def _store_bundle() -> tuple[SecretStore, ChainedErrorClassifier]:
    store, classifiers = _build_store(settings.secret_store_backend)
    logger.info("Using %s secret store backend", settings.secret_store_backend)
    return store, ChainedErrorClassifier(classifiers)


def get_secret_store_bundle() -> tuple[SecretStore, ChainedErrorClassifier]:
    """Return the process-wide store and its matching error classifier.

    Sync dependencies run in the threadpool, so the first build is
    serialized: every request must share one store.
    """
    with _store_bundle_lock:
        return _store_bundle()


@lru_cache(maxsize=1)
def get_namespace_resolver() -> NamespaceResolver:
    """Build the namespace resolver from startup configuration."""
    return NamespaceResolver(
        default_namespace=settings.default_namespace,
        authorizer=StaticNamespaceAuthorizer(settings.managed_namespaces),
        decoder=PydanticSecretDecoder(),
    )


def get_dispatch_secret_request_use_case() -> DispatchSecretRequestUseCase:
    """Build DispatchSecretRequestUseCase with its infrastructure dependencies."""
    store, classifier = get_secret_store_bundle()
    return DispatchSecretRequestUseCase(
        resolver=get_namespace_resolver(),
        decoder=PydanticSecretDecoder(),
        store=store,
        classifier=classifier,
    )
