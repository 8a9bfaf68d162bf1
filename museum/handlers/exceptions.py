"""Uniform failure payloads.

Every failure leaves the API as ``{"success": false, "error": <message>}``.
Domain errors map to a status by family; anything unexpected is logged
and reported as a 500 with its message.
"""

import structlog
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from museum.domain.errors import (
    DomainError,
    DomainValidationError,
    NotFoundError,
    UnauthorizedError,
    UpstreamFailureError,
)

logger = structlog.get_logger(__name__)

_DOMAIN_STATUS = (
    (DomainValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (UpstreamFailureError, status.HTTP_502_BAD_GATEWAY),
)


def failure(message: str, status_code: int, code: str | None = None) -> Response:
    body = {"success": False, "error": message}
    if code:
        body["code"] = code
    return Response(body, status=status_code)


def _domain_status(exc: DomainError) -> int:
    for family, status_code in _DOMAIN_STATUS:
        if isinstance(exc, family):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _flatten(detail) -> str:
    if isinstance(detail, dict):
        return "; ".join(f"{field}: {_flatten(value)}" for field, value in detail.items())
    if isinstance(detail, list):
        return " ".join(_flatten(item) for item in detail)
    return str(detail)


def museum_exception_handler(exc, context):
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DomainError):
        status_code = _domain_status(exc)
        logger.info(
            "request.rejected",
            view=view_name,
            code=exc.code.value,
            status_code=status_code,
        )
        return failure(exc.message, status_code, exc.code.value)

    if isinstance(exc, exceptions.ValidationError):
        return failure(_flatten(exc.detail), status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST")

    response = exception_handler(exc, context)
    if response is not None:
        return failure(_flatten(response.data.get("detail", response.data)), response.status_code)

    logger.exception("request.failed", view=view_name)
    return failure(str(exc) or "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)
