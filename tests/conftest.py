"""
Shared fixtures for the secrets test suite.

All fixtures build fresh in-memory collaborators, so no database
or network access is needed unless a test asks for the SQL store.
"""

import pytest
from fastapi.testclient import TestClient

from app.application.secrets.dispatch_secret_request import (
    DispatchSecretRequestUseCase,
)
from app.domain.secrets.error_classifier import ChainedErrorClassifier
from app.domain.secrets.namespace_resolver import NamespaceResolver
from app.infrastructure.secrets.error_classifiers import KindAwareErrorClassifier
from app.infrastructure.secrets.memory_store import InMemorySecretStore
from app.infrastructure.secrets.namespace_authorizer import StaticNamespaceAuthorizer
from app.interfaces.secrets.decoder import PydanticSecretDecoder
from app.interfaces.secrets.dependencies import get_dispatch_secret_request_use_case
from app.main import app
from app.shared.security.rate_limiting import limiter

DEFAULT_NAMESPACE = "openfaas-fn"
MANAGED_NAMESPACES = ("tenant-a", "tenant-b")


@pytest.fixture
def decoder() -> PydanticSecretDecoder:
    return PydanticSecretDecoder()


@pytest.fixture
def store() -> InMemorySecretStore:
    return InMemorySecretStore()


@pytest.fixture
def resolver(decoder: PydanticSecretDecoder) -> NamespaceResolver:
    """Resolver that manages the default namespace plus tenant-a and tenant-b."""
    return NamespaceResolver(
        default_namespace=DEFAULT_NAMESPACE,
        authorizer=StaticNamespaceAuthorizer(MANAGED_NAMESPACES),
        decoder=decoder,
    )


@pytest.fixture
def dispatcher(
    resolver: NamespaceResolver,
    decoder: PydanticSecretDecoder,
    store: InMemorySecretStore,
) -> DispatchSecretRequestUseCase:
    return DispatchSecretRequestUseCase(
        resolver=resolver,
        decoder=decoder,
        store=store,
        classifier=ChainedErrorClassifier([KindAwareErrorClassifier()]),
    )


@pytest.fixture
def client(dispatcher: DispatchSecretRequestUseCase):
    """TestClient wired to the in-memory dispatcher, rate limiting off."""
    app.dependency_overrides[get_dispatch_secret_request_use_case] = lambda: dispatcher
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        limiter.enabled = True
        app.dependency_overrides.clear()
