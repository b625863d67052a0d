"""
FastAPI router for the secrets bounded context.

A single route accepts every secrets operation; the HTTP method selects
the operation inside the dispatcher use case. No business logic here.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from app.application.secrets.dispatch_secret_request import (
    DispatchSecretRequestUseCase,
)
from app.application.secrets.dtos import SecretResponse
from app.application.secrets.status_codes import HTTP_200, HTTP_400
from app.core.config import settings
from app.domain.secrets.entities import SecretRequest
from app.interfaces.secrets.dependencies import get_dispatch_secret_request_use_case
from app.interfaces.secrets.schemas import ErrorResponse, SecretItemSchema
from app.shared.errors.handlers import error_response
from app.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["secrets"])

# PATCH is routed here on purpose: unsupported verbs are answered by the
# dispatcher (400 after namespace resolution) rather than by a 405.
SECRET_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]

BODY_TOO_LARGE = "request body too large"


def _too_large(size: int) -> bool:
    if size > settings.max_request_size_bytes:
        logger.warning("Secret request body too large: %d bytes", size)
        return True
    return False


def render_secret_response(result: SecretResponse) -> Response:
    """Translate a dispatcher result into an HTTP response."""
    if result.status_code == HTTP_200:
        items = [
            SecretItemSchema(name=item.name, namespace=item.namespace).model_dump()
            for item in result.items or []
        ]
        return JSONResponse(status_code=HTTP_200, content=items)
    if result.is_success:
        return Response(status_code=result.status_code)
    return error_response(result.status_code, result.reason)


@router.api_route(
    "/secrets",
    methods=SECRET_METHODS,
    response_model=None,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Manage secrets",
    description=(
        "GET lists secrets, POST creates, PUT replaces and DELETE removes a "
        "secret in the resolved namespace."
    ),
)
@limiter.limit(settings.rate_limit_default)
async def handle_secrets(
    request: Request,
    use_case: DispatchSecretRequestUseCase = Depends(
        get_dispatch_secret_request_use_case
    ),
) -> Response:
    """Resolve the namespace and run the requested secrets operation."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and _too_large(int(declared)):
        return error_response(HTTP_400, BODY_TOO_LARGE)

    # Chunked bodies carry no length header.
    body = await request.body()
    if _too_large(len(body)):
        return error_response(HTTP_400, BODY_TOO_LARGE)

    secret_request = SecretRequest(
        method=request.method,
        body=body,
        query_namespace=request.query_params.get("namespace"),
    )
    result = await run_in_threadpool(use_case.execute, secret_request)
    return render_secret_response(result)
