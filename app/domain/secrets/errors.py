"""
Domain-specific errors for the secrets bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the application and interface layers.
No framework imports allowed.
"""

from app.domain.secrets.entities import OutcomeStatus, ResolutionFailureKind


class SecretsDomainError(Exception):
    """Base error for all secrets domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NamespaceResolutionError(SecretsDomainError):
    """Raised when the target namespace of a request cannot be resolved.

    Callers branch on ``kind``; the message is for logs only.
    """

    def __init__(self, kind: ResolutionFailureKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class MalformedSecretError(SecretsDomainError):
    """Raised when a request body cannot be decoded into a secret record."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unable to decode secret: {reason}")
        self.reason = reason


class SecretStoreError(SecretsDomainError):
    """Base error for failures reported by a secret store.

    Every subclass declares the outcome it stands for, so any classifier
    can ask the error its kind without knowing the concrete store.
    """

    outcome_status = OutcomeStatus.INTERNAL


class SecretNotFoundError(SecretStoreError):
    """Raised when a secret does not exist in the given namespace."""

    outcome_status = OutcomeStatus.NOT_FOUND

    def __init__(self, namespace: str, name: str) -> None:
        super().__init__(f"Secret not found: {namespace}/{name}")
        self.namespace = namespace
        self.name = name


class SecretAlreadyExistsError(SecretStoreError):
    """Raised when creating a secret whose name is already taken."""

    outcome_status = OutcomeStatus.ALREADY_EXISTS

    def __init__(self, namespace: str, name: str) -> None:
        super().__init__(f"Secret already exists: {namespace}/{name}")
        self.namespace = namespace
        self.name = name


class InvalidSecretError(SecretStoreError):
    """Raised when a store rejects a secret record as invalid."""

    outcome_status = OutcomeStatus.INVALID_INPUT

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid secret: {reason}")
        self.reason = reason
