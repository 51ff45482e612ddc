from typing import List, Optional

from stockmonitor.core.exceptions import ErrorCodes, StockMonitorError


class ProductServiceError(StockMonitorError):
    """Base exception for product operations."""


class ProductNotFoundError(ProductServiceError):
    """Raised when a requested product doesn't exist for the acting user."""
    http_status = 404
    default_code = ErrorCodes.PRODUCT_NOT_FOUND

    def __init__(self, product_id, errors: Optional[List[str]] = None):
        super().__init__(
            message=f"Product {product_id} not found",
            errors=errors or [f"product_id={product_id}: error=not_found"],
        )
        self.product_id = product_id


class InvalidProductDataError(ProductServiceError):
    """Raised when product data fails validation."""
    http_status = 400
    default_code = ErrorCodes.INVALID

    def __init__(self, message: str = "Invalid product data", errors: Optional[List[str]] = None):
        super().__init__(message=message, errors=errors or [message])


class ProductInUseError(ProductServiceError):
    """Raised when deleting a product that recorded sales still reference."""
    http_status = 409
    default_code = ErrorCodes.PRODUCT_IN_USE

    def __init__(self, product_id, sale_count: int):
        super().__init__(
            message=f"Product {product_id} has {sale_count} recorded sale(s) and cannot be deleted",
            errors=[f"product_id={product_id}: sales={sale_count}"],
        )
