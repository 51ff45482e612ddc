from http import HTTPStatus

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions

from stockmonitor.core.api import exception_handler
from stockmonitor.core.exceptions import (
    DeliveryError,
    MissingCredentialsError,
    StockMonitorError,
)


def test_domain_error_body():
    error = StockMonitorError("Broken", errors=["a: b"], code="broken", extra={"hint": 1})

    response = exception_handler(error, {})

    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.data == {"status": "broken", "detail": "Broken", "errors": ["a: b"], "hint": 1}


def test_configuration_and_delivery_statuses():
    missing = exception_handler(MissingCredentialsError(["EMAIL_USER"]), {})
    delivery = exception_handler(DeliveryError("owner@example.com", "timed out"), {})

    assert missing.status_code == HTTPStatus.SERVICE_UNAVAILABLE
    assert missing.data["errors"] == ["EMAIL_USER: missing"]
    assert delivery.status_code == HTTPStatus.BAD_GATEWAY
    assert delivery.data["status"] == "delivery_failed"


def test_django_validation_error():
    response = exception_handler(DjangoValidationError({"name": ["Required"]}), {})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.data == {"status": "invalid", "errors": {"name": ["Required"]}}


def test_drf_validation_error():
    response = exception_handler(exceptions.ValidationError({"quantity": ["Too small"]}), {})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.data["status"] == "invalid"
    assert "quantity" in response.data["errors"]


def test_not_authenticated():
    response = exception_handler(exceptions.NotAuthenticated(), {})

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.data["status"] == "unauthorized"


def test_error_str():
    error = StockMonitorError("Broken", errors=["x"], code="broken")
    assert str(error) == "StockMonitorError: Broken - Errors: x [Code: broken]"


def test_unhandled_exception_passes_through():
    assert exception_handler(KeyError("boom"), {}) is None
