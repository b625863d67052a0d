"""
Domain service: namespace resolution and authorization.

Decides, per request, which namespace a secrets operation targets and
whether secrets may be managed there. Runs ahead of method dispatch for
every request, so it must stay free of side effects.
"""

import logging

from app.domain.secrets.entities import (
    ResolutionFailureKind,
    ResolvedNamespace,
    SecretMethod,
    SecretRequest,
)
from app.domain.secrets.errors import MalformedSecretError, NamespaceResolutionError
from app.domain.secrets.ports import NamespaceAuthorizer, SecretDecoder

logger = logging.getLogger(__name__)

UNMARSHAL_FAILURE = "unable to unmarshal Secret request"
NOT_PERMITTED = "unable to manage secrets within the specified namespace"


class NamespaceResolver:
    """Resolves and authorizes the target namespace of a secrets request.

    The requested namespace comes from the ``namespace`` query parameter
    for reads and from the payload for writes. When none is given the
    configured default namespace applies. The default namespace is always
    manageable; any other one must be approved by the authorizer.

    Args:
        default_namespace: Process-wide fallback namespace. Fixed at
            construction time.
        authorizer: Capability check for non-default namespaces.
        decoder: Used to read the namespace declared in a payload.
    """

    def __init__(
        self,
        default_namespace: str,
        authorizer: NamespaceAuthorizer,
        decoder: SecretDecoder,
    ) -> None:
        if not default_namespace:
            raise ValueError("default_namespace must not be empty")
        self._default_namespace = default_namespace
        self._authorizer = authorizer
        self._decoder = decoder

    @property
    def default_namespace(self) -> str:
        return self._default_namespace

    def resolve(self, request: SecretRequest) -> ResolvedNamespace:
        """Return the namespace this request is allowed to act upon.

        Args:
            request: The incoming secrets request.

        Returns:
            The resolved namespace.

        Raises:
            NamespaceResolutionError: With kind MALFORMED_REQUEST when the
                payload cannot be read, UNAUTHORIZED when the namespace is
                not manageable, UNKNOWN for any other failure.
        """
        requested = self._requested_namespace(request)
        if not requested or requested == self._default_namespace:
            return ResolvedNamespace(name=self._default_namespace, is_default=True)

        try:
            allowed = self._authorizer.can_manage_secrets(requested)
        except Exception as exc:
            raise NamespaceResolutionError(
                ResolutionFailureKind.UNKNOWN,
                f"namespace lookup failed: {exc}",
            ) from exc

        if not allowed:
            logger.warning("Rejected secrets request for namespace=%s", requested)
            raise NamespaceResolutionError(
                ResolutionFailureKind.UNAUTHORIZED, NOT_PERMITTED
            )
        return ResolvedNamespace(name=requested)

    def _requested_namespace(self, request: SecretRequest) -> str:
        if SecretMethod.from_http(request.method) is SecretMethod.READ or not request.body:
            return (request.query_namespace or "").strip()

        try:
            return self._decoder.extract_namespace(request.body).strip()
        except MalformedSecretError as exc:
            raise NamespaceResolutionError(
                ResolutionFailureKind.MALFORMED_REQUEST, UNMARSHAL_FAILURE
            ) from exc
        except Exception as exc:
            raise NamespaceResolutionError(
                ResolutionFailureKind.UNKNOWN,
                f"namespace extraction failed: {exc}",
            ) from exc
