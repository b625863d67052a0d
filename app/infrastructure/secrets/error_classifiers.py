"""
Adapters: Store error classifiers.

Implement the StoreErrorClassifier port, one per error taxonomy.
Each returns None for errors it does not recognize so that
classifiers can be chained in front of the INTERNAL fallback.
"""

from typing import Optional

from sqlalchemy import exc as sa_exc

from app.domain.secrets.entities import ClassifiedOutcome, OutcomeStatus
from app.domain.secrets.ports import StoreErrorClassifier


class KindAwareErrorClassifier(StoreErrorClassifier):
    """Classifies errors that can be asked their kind.

    Any exception exposing an ``outcome_status`` attribute holding an
    OutcomeStatus qualifies, whatever store raised it.
    """

    def classify(self, error: Exception) -> Optional[ClassifiedOutcome]:
        status = getattr(error, "outcome_status", None)
        if not isinstance(status, OutcomeStatus):
            return None
        return ClassifiedOutcome(status=status, reason=status.value)


# Most specific first: IntegrityError and DataError are DBAPIError subclasses.
SQLALCHEMY_OUTCOMES: tuple[tuple[type[Exception], OutcomeStatus, str], ...] = (
    (sa_exc.NoResultFound, OutcomeStatus.NOT_FOUND, "NotFound"),
    (sa_exc.MultipleResultsFound, OutcomeStatus.CONFLICT, "Conflict"),
    (sa_exc.IntegrityError, OutcomeStatus.ALREADY_EXISTS, "AlreadyExists"),
    (sa_exc.DataError, OutcomeStatus.INVALID_INPUT, "InvalidInput"),
    (sa_exc.TimeoutError, OutcomeStatus.TIMEOUT, "Timeout"),
    (sa_exc.SQLAlchemyError, OutcomeStatus.INTERNAL, "DatabaseError"),
)


class SqlAlchemyErrorClassifier(StoreErrorClassifier):
    """Classifies SQLAlchemy exceptions raised by SqlSecretStore."""

    def classify(self, error: Exception) -> Optional[ClassifiedOutcome]:
        for error_type, status, reason in SQLALCHEMY_OUTCOMES:
            if isinstance(error, error_type):
                return ClassifiedOutcome(status=status, reason=reason)
        return None
