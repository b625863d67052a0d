"""
Use case: Handle one secrets request end to end.

Input: SecretRequest (method, raw body, optional query namespace)
Output: SecretResponse (status code, listed items or failure reason)
Side effects: At most one store call.
Failure cases: None raised. Every failure ends in a SecretResponse.

Flow: resolve namespace -> select operation by method -> decode payload
-> call the store -> classify any store failure.
"""

import logging
from typing import Optional

from app.application.secrets.create_secret import CreateSecretUseCase
from app.application.secrets.delete_secret import DeleteSecretUseCase
from app.application.secrets.dtos import (
    DeleteSecretCommand,
    ListSecretsQuery,
    SaveSecretCommand,
    SecretResponse,
)
from app.application.secrets.list_secrets import ListSecretsUseCase
from app.application.secrets.replace_secret import ReplaceSecretUseCase
from app.application.secrets.status_codes import (
    HTTP_200,
    HTTP_202,
    HTTP_400,
    RESOLUTION_FAILURE_CODES,
    status_code_for,
)
from app.domain.secrets.entities import SecretMethod, SecretRecord, SecretRequest
from app.domain.secrets.error_classifier import ChainedErrorClassifier
from app.domain.secrets.errors import MalformedSecretError, NamespaceResolutionError
from app.domain.secrets.namespace_resolver import NamespaceResolver
from app.domain.secrets.ports import SecretDecoder, SecretStore

logger = logging.getLogger(__name__)

UNSUPPORTED_METHOD = "unsupported method"

OPERATION_NAMES = {
    SecretMethod.READ: "list",
    SecretMethod.CREATE: "create",
    SecretMethod.UPDATE: "update",
    SecretMethod.DELETE: "delete",
}


class DispatchSecretRequestUseCase:
    """Routes a secrets request to list, create, replace or delete.

    Holds no per-request state, so one instance may serve concurrent
    requests as long as the store does.

    Args:
        resolver: Resolves and authorizes the target namespace.
        decoder: Decodes write payloads into secret records.
        store: The secret store backend.
        classifier: Maps store failures onto outcomes.
    """

    def __init__(
        self,
        resolver: NamespaceResolver,
        decoder: SecretDecoder,
        store: SecretStore,
        classifier: ChainedErrorClassifier,
    ) -> None:
        self._resolver = resolver
        self._decoder = decoder
        self._classifier = classifier
        self._list = ListSecretsUseCase(store)
        self._create = CreateSecretUseCase(store)
        self._replace = ReplaceSecretUseCase(store)
        self._delete = DeleteSecretUseCase(store)

    def execute(self, request: SecretRequest) -> SecretResponse:
        """Run the request and return the response to send back.

        Args:
            request: The incoming secrets request.

        Returns:
            The response for the transport layer to render.
        """
        try:
            resolved = self._resolver.resolve(request)
        except NamespaceResolutionError as exc:
            logger.warning(
                "Secret namespace resolution failed: kind=%s, %s",
                exc.kind.value,
                exc.message,
            )
            return SecretResponse(
                status_code=RESOLUTION_FAILURE_CODES[exc.kind],
                reason=exc.message,
            )

        method = SecretMethod.from_http(request.method)
        if method is None:
            logger.warning("Unsupported secrets method: %s", request.method)
            return SecretResponse(status_code=HTTP_400, reason=UNSUPPORTED_METHOD)

        record: Optional[SecretRecord] = None
        if method is not SecretMethod.READ:
            try:
                record = self._decoder.decode(request.body)
            except MalformedSecretError as exc:
                logger.warning("Secret unmarshal error: %s", exc.reason)
                return SecretResponse(status_code=HTTP_400, reason=exc.message)

        try:
            return self._perform(method, resolved.name, record)
        except Exception as exc:
            outcome = self._classifier.classify(exc)
            logger.warning(
                "Secret %s error reason: %s, %s",
                OPERATION_NAMES[method],
                outcome.reason,
                exc,
            )
            return SecretResponse(
                status_code=status_code_for(outcome.status),
                reason=outcome.reason,
            )

    def _perform(
        self, method: SecretMethod, namespace: str, record: Optional[SecretRecord]
    ) -> SecretResponse:
        """Make the single store call for this request."""
        if method is SecretMethod.READ:
            items = self._list.execute(ListSecretsQuery(namespace=namespace))
            return SecretResponse(status_code=HTTP_200, items=items)

        if method is SecretMethod.CREATE:
            self._create.execute(SaveSecretCommand(record=record, namespace=namespace))
        elif method is SecretMethod.UPDATE:
            self._replace.execute(SaveSecretCommand(record=record, namespace=namespace))
        else:
            self._delete.execute(
                DeleteSecretCommand(namespace=namespace, name=record.name)
            )
        return SecretResponse(status_code=HTTP_202)
