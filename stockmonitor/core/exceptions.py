from typing import Any, Dict, List, Optional


class ErrorCodes:
    """Centralized error code constants"""
    UNAUTHORIZED = "unauthorized"
    INVALID = "invalid"
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_IN_USE = "product_in_use"
    INSUFFICIENT_STOCK = "insufficient_stock"
    SALE_WRITE_FAILED = "sale_write_failed"
    PARTIAL_WRITE = "partial_write"
    MISSING_CREDENTIALS = "missing_credentials"
    DELIVERY_FAILED = "delivery_failed"


class StockMonitorError(Exception):
    """
    Base exception for every domain failure.

    ``http_status`` is the status the API layer answers with; ``extra`` is
    merged into the error response body.
    """
    http_status = 500
    default_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.code = code or self.default_code
        self.extra = extra or {}

    def __str__(self):
        error_details = f" - Errors: {', '.join(self.errors)}" if self.errors else ""
        code_details = f" [Code: {self.code}]" if self.code else ""
        return f"{self.__class__.__name__}: {self.message}{error_details}{code_details}"


class ConfigurationError(StockMonitorError):
    """Raised when the process is not configured for an operation."""
    http_status = 503


class MissingCredentialsError(ConfigurationError):
    """Raised when the mail relay account or password is not set."""
    default_code = ErrorCodes.MISSING_CREDENTIALS

    def __init__(self, missing: List[str]):
        super().__init__(
            message="Mail relay credentials are not configured",
            errors=[f"{name}: missing" for name in missing],
        )
        self.missing = missing


class DeliveryError(StockMonitorError):
    """Raised when the mail relay rejects or fails to deliver a message."""
    http_status = 502
    default_code = ErrorCodes.DELIVERY_FAILED

    def __init__(self, recipient: str, reason: str):
        super().__init__(
            message=f"Could not deliver alert to {recipient}",
            errors=[reason],
        )
        self.recipient = recipient
