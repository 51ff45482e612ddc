import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from stockmonitor.core.exceptions import ErrorCodes, StockMonitorError

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """
    DRF exception handler that gives every error body a ``status`` code.

    Domain errors answer with their own ``http_status``; Django model
    validation errors become per-field 400 responses.
    """
    if isinstance(exc, StockMonitorError):
        body = {
            "status": exc.code,
            "detail": exc.message,
            "errors": exc.errors,
            **exc.extra,
        }
        if exc.http_status >= 500:
            logger.error(f"Request failed: {exc}")
        return Response(body, status=exc.http_status)

    if isinstance(exc, DjangoValidationError):
        errors = exc.message_dict if hasattr(exc, "error_dict") else {"non_field_errors": exc.messages}
        return Response(
            {"status": ErrorCodes.INVALID, "errors": errors},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response.data = {"status": ErrorCodes.UNAUTHORIZED, "detail": response.data.get("detail")}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {"status": ErrorCodes.INVALID, "errors": response.data}
    return response
