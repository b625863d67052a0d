"""
Domain service: store error classification.

Maps arbitrary store failures onto the closed OutcomeStatus vocabulary.
Store-specific rules are plugged in as StoreErrorClassifier instances;
this service only guarantees that classification is total.
"""

import logging
from typing import Iterable

from app.domain.secrets.entities import ClassifiedOutcome, OutcomeStatus
from app.domain.secrets.ports import StoreErrorClassifier

logger = logging.getLogger(__name__)

INTERNAL_OUTCOME = ClassifiedOutcome(
    status=OutcomeStatus.INTERNAL, reason="InternalError"
)


class ChainedErrorClassifier:
    """Asks each registered classifier in turn; the first answer wins.

    Errors no classifier recognizes degrade to ``INTERNAL``, so callers
    never see an unclassified failure.
    """

    def __init__(self, classifiers: Iterable[StoreErrorClassifier]) -> None:
        self._classifiers = tuple(classifiers)

    def classify(self, error: Exception) -> ClassifiedOutcome:
        """Return the outcome for a store error. Never raises."""
        for classifier in self._classifiers:
            try:
                outcome = classifier.classify(error)
            except Exception:
                logger.debug(
                    "Classifier %s failed on %s",
                    type(classifier).__name__,
                    type(error).__name__,
                    exc_info=True,
                )
                continue
            if outcome is not None:
                return outcome
        return INTERNAL_OUTCOME
