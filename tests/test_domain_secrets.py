"""
Tests for the secrets domain layer.

Tests entities, error classes, namespace resolution and error
classification in isolation. Ports are replaced by mocks.
"""

from unittest.mock import MagicMock

import pytest

from app.domain.secrets.entities import (
    ClassifiedOutcome,
    OutcomeStatus,
    ResolutionFailureKind,
    ResolvedNamespace,
    SecretMethod,
    SecretRecord,
    SecretRequest,
)
from app.domain.secrets.error_classifier import INTERNAL_OUTCOME, ChainedErrorClassifier
from app.domain.secrets.errors import (
    InvalidSecretError,
    MalformedSecretError,
    NamespaceResolutionError,
    SecretAlreadyExistsError,
    SecretNotFoundError,
    SecretStoreError,
)
from app.domain.secrets.namespace_resolver import (
    NOT_PERMITTED,
    UNMARSHAL_FAILURE,
    NamespaceResolver,
)
from app.domain.secrets.ports import NamespaceAuthorizer, SecretDecoder, StoreErrorClassifier

DEFAULT_NS = "openfaas-fn"


class TestSecretMethod:
    """Tests for mapping HTTP verbs onto secret operations."""

    @pytest.mark.parametrize(
        ("http_method", "expected"),
        [
            ("GET", SecretMethod.READ),
            ("post", SecretMethod.CREATE),
            ("PUT", SecretMethod.UPDATE),
            ("DELETE", SecretMethod.DELETE),
        ],
    )
    def test_supported_methods(self, http_method: str, expected: SecretMethod) -> None:
        """Supported HTTP methods map to secret methods."""
        assert SecretMethod.from_http(http_method) is expected

    @pytest.mark.parametrize("http_method", ["PATCH", "HEAD", "OPTIONS", ""])
    def test_unsupported_methods_map_to_none(self, http_method: str) -> None:
        """Other HTTP methods map to None."""
        assert SecretMethod.from_http(http_method) is None


class TestSecretRecord:
    """Tests for the SecretRecord entity."""

    def test_with_namespace_overrides_namespace_only(self) -> None:
        """with_namespace changes nothing but the namespace."""
        record = SecretRecord(name="db-pass", namespace="evil", value="s3cr3t")
        bound = record.with_namespace("tenant-a")
        assert bound == SecretRecord(name="db-pass", namespace="tenant-a", value="s3cr3t")

    def test_with_namespace_does_not_mutate_original(self) -> None:
        """with_namespace returns a copy."""
        record = SecretRecord(name="db-pass", namespace="evil")
        record.with_namespace("tenant-a")
        assert record.namespace == "evil"


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_error_message(self) -> None:
        """Not-found errors name the namespace and secret."""
        err = SecretNotFoundError("tenant-a", "db-pass")
        assert "tenant-a/db-pass" in err.message
        assert err.outcome_status is OutcomeStatus.NOT_FOUND

    def test_already_exists_error_status(self) -> None:
        """Already-exists errors carry their status."""
        assert SecretAlreadyExistsError("ns", "n").outcome_status is OutcomeStatus.ALREADY_EXISTS

    def test_invalid_secret_error_status(self) -> None:
        """Invalid-secret errors carry their status."""
        assert InvalidSecretError("bad").outcome_status is OutcomeStatus.INVALID_INPUT

    def test_base_store_error_is_internal(self) -> None:
        """A bare store error is internal."""
        assert SecretStoreError("boom").outcome_status is OutcomeStatus.INTERNAL

    def test_resolution_error_carries_kind(self) -> None:
        """Resolution errors expose their failure kind."""
        err = NamespaceResolutionError(ResolutionFailureKind.UNAUTHORIZED, "nope")
        assert err.kind is ResolutionFailureKind.UNAUTHORIZED
        assert str(err) == "nope"


def _resolver(
    managed: set[str] | None = None,
    body_namespace: str = "",
) -> tuple[NamespaceResolver, MagicMock, MagicMock]:
    authorizer = MagicMock(spec=NamespaceAuthorizer)
    authorizer.can_manage_secrets.side_effect = lambda ns: ns in (managed or set())
    decoder = MagicMock(spec=SecretDecoder)
    decoder.extract_namespace.return_value = body_namespace
    return NamespaceResolver(DEFAULT_NS, authorizer, decoder), authorizer, decoder


class TestNamespaceResolver:
    """Tests for the NamespaceResolver domain service."""

    def test_empty_default_namespace_rejected(self) -> None:
        """The default namespace must not be empty."""
        with pytest.raises(ValueError):
            NamespaceResolver("", MagicMock(spec=NamespaceAuthorizer), MagicMock(spec=SecretDecoder))

    def test_get_without_namespace_uses_default(self) -> None:
        """GET without a namespace resolves to the default."""
        resolver, authorizer, _ = _resolver()
        resolved = resolver.resolve(SecretRequest(method="GET"))
        assert resolved == ResolvedNamespace(name=DEFAULT_NS, is_default=True)
        authorizer.can_manage_secrets.assert_not_called()

    def test_get_uses_query_namespace(self) -> None:
        """GET reads the namespace from the query."""
        resolver, _, decoder = _resolver(managed={"tenant-a"})
        resolved = resolver.resolve(SecretRequest(method="GET", query_namespace="tenant-a"))
        assert resolved.name == "tenant-a"
        assert not resolved.is_default
        decoder.extract_namespace.assert_not_called()

    def test_get_ignores_body(self) -> None:
        """GET never inspects the body."""
        resolver, _, decoder = _resolver(managed={"tenant-a"}, body_namespace="tenant-a")
        resolved = resolver.resolve(SecretRequest(method="GET", body=b'{"namespace":"tenant-a"}'))
        assert resolved.name == DEFAULT_NS
        decoder.extract_namespace.assert_not_called()

    def test_write_uses_body_namespace(self) -> None:
        """Writes read the namespace from the body."""
        resolver, _, _ = _resolver(managed={"tenant-b"}, body_namespace="tenant-b")
        resolved = resolver.resolve(SecretRequest(method="POST", body=b"{}"))
        assert resolved.name == "tenant-b"

    def test_write_without_body_falls_back_to_query(self) -> None:
        """Writes without a body use the query namespace."""
        resolver, _, decoder = _resolver(managed={"tenant-a"})
        resolved = resolver.resolve(SecretRequest(method="DELETE", query_namespace="tenant-a"))
        assert resolved.name == "tenant-a"
        decoder.extract_namespace.assert_not_called()

    def test_explicit_default_namespace_skips_authorizer(self) -> None:
        """The default namespace is always manageable."""
        resolver, authorizer, _ = _resolver(body_namespace=DEFAULT_NS)
        resolved = resolver.resolve(SecretRequest(method="PUT", body=b"{}"))
        assert resolved.is_default
        authorizer.can_manage_secrets.assert_not_called()

    def test_unmanaged_namespace_is_unauthorized(self) -> None:
        """A refused namespace is unauthorized."""
        resolver, _, _ = _resolver(managed={"tenant-a"}, body_namespace="kube-system")
        with pytest.raises(NamespaceResolutionError) as exc_info:
            resolver.resolve(SecretRequest(method="POST", body=b"{}"))
        assert exc_info.value.kind is ResolutionFailureKind.UNAUTHORIZED
        assert exc_info.value.message == NOT_PERMITTED

    def test_unmanaged_query_namespace_is_unauthorized(self) -> None:
        """A refused query namespace is unauthorized."""
        resolver, _, _ = _resolver()
        with pytest.raises(NamespaceResolutionError) as exc_info:
            resolver.resolve(SecretRequest(method="GET", query_namespace="other"))
        assert exc_info.value.kind is ResolutionFailureKind.UNAUTHORIZED

    def test_undecodable_body_is_malformed(self) -> None:
        """An undecodable body is a malformed request."""
        resolver, _, decoder = _resolver()
        decoder.extract_namespace.side_effect = MalformedSecretError("not json")
        with pytest.raises(NamespaceResolutionError) as exc_info:
            resolver.resolve(SecretRequest(method="POST", body=b"{not json"))
        assert exc_info.value.kind is ResolutionFailureKind.MALFORMED_REQUEST
        assert exc_info.value.message == UNMARSHAL_FAILURE

    def test_authorizer_failure_is_unknown(self) -> None:
        """An authorizer error is an unknown failure."""
        resolver, authorizer, _ = _resolver(body_namespace="tenant-a")
        authorizer.can_manage_secrets.side_effect = RuntimeError("api down")
        with pytest.raises(NamespaceResolutionError) as exc_info:
            resolver.resolve(SecretRequest(method="POST", body=b"{}"))
        assert exc_info.value.kind is ResolutionFailureKind.UNKNOWN

    def test_unexpected_decoder_failure_is_unknown(self) -> None:
        """An unexpected decoder error is an unknown failure."""
        resolver, _, decoder = _resolver()
        decoder.extract_namespace.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad")
        with pytest.raises(NamespaceResolutionError) as exc_info:
            resolver.resolve(SecretRequest(method="POST", body=b"\xff"))
        assert exc_info.value.kind is ResolutionFailureKind.UNKNOWN

    def test_resolution_is_idempotent(self) -> None:
        """Resolving twice gives the same answer."""
        resolver, _, _ = _resolver(managed={"tenant-a"}, body_namespace="tenant-a")
        request = SecretRequest(method="PUT", body=b"{}")
        assert resolver.resolve(request) == resolver.resolve(request)

    def test_resolution_runs_for_unsupported_methods(self) -> None:
        """Resolution does not depend on the method."""
        resolver, _, _ = _resolver(body_namespace="elsewhere")
        with pytest.raises(NamespaceResolutionError):
            resolver.resolve(SecretRequest(method="PATCH", body=b"{}"))


class _StubClassifier(StoreErrorClassifier):
    def __init__(self, error_type: type[Exception], outcome: ClassifiedOutcome) -> None:
        self._error_type = error_type
        self._outcome = outcome

    def classify(self, error: Exception) -> ClassifiedOutcome | None:
        return self._outcome if isinstance(error, self._error_type) else None


class _BrokenClassifier(StoreErrorClassifier):
    def classify(self, error: Exception) -> ClassifiedOutcome | None:
        raise RuntimeError("classifier bug")


class TestChainedErrorClassifier:
    """Tests for the total store error classification."""

    def test_first_matching_classifier_wins(self) -> None:
        """The first classifier that answers decides."""
        not_found = ClassifiedOutcome(OutcomeStatus.NOT_FOUND, "NotFound")
        conflict = ClassifiedOutcome(OutcomeStatus.CONFLICT, "Conflict")
        chain = ChainedErrorClassifier(
            [_StubClassifier(KeyError, not_found), _StubClassifier(LookupError, conflict)]
        )
        assert chain.classify(KeyError("x")) == not_found
        assert chain.classify(IndexError("x")) == conflict

    def test_unrecognized_error_is_internal(self) -> None:
        """Errors nobody recognizes are internal."""
        chain = ChainedErrorClassifier([_StubClassifier(KeyError, INTERNAL_OUTCOME)])
        outcome = chain.classify(ValueError("boom"))
        assert outcome.status is OutcomeStatus.INTERNAL

    def test_empty_chain_is_internal(self) -> None:
        """An empty chain still classifies."""
        assert ChainedErrorClassifier([]).classify(Exception()) == INTERNAL_OUTCOME

    def test_broken_classifier_is_skipped(self) -> None:
        """A classifier that raises is skipped."""
        forbidden = ClassifiedOutcome(OutcomeStatus.FORBIDDEN, "Forbidden")
        chain = ChainedErrorClassifier(
            [_BrokenClassifier(), _StubClassifier(PermissionError, forbidden)]
        )
        assert chain.classify(PermissionError()) == forbidden
