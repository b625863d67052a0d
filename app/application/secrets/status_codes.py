"""
Status codes returned by the secrets dispatcher.

Classified store outcomes are translated through a single table so that
every operation reports the same failure the same way.
"""

from app.domain.secrets.entities import OutcomeStatus, ResolutionFailureKind

HTTP_200 = 200
HTTP_202 = 202
HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500
HTTP_504 = 504

OUTCOME_STATUS_CODES: dict[OutcomeStatus, int] = {
    OutcomeStatus.NOT_FOUND: HTTP_404,
    OutcomeStatus.ALREADY_EXISTS: HTTP_409,
    OutcomeStatus.CONFLICT: HTTP_409,
    OutcomeStatus.INVALID_INPUT: HTTP_422,
    OutcomeStatus.FORBIDDEN: HTTP_403,
    OutcomeStatus.UNAUTHORIZED: HTTP_401,
    OutcomeStatus.TIMEOUT: HTTP_504,
    OutcomeStatus.INTERNAL: HTTP_500,
}

RESOLUTION_FAILURE_CODES: dict[ResolutionFailureKind, int] = {
    ResolutionFailureKind.MALFORMED_REQUEST: HTTP_400,
    ResolutionFailureKind.UNAUTHORIZED: HTTP_401,
    ResolutionFailureKind.UNKNOWN: HTTP_400,
}


def status_code_for(status: OutcomeStatus) -> int:
    """Return the HTTP status for a classified store outcome."""
    return OUTCOME_STATUS_CODES.get(status, HTTP_500)
