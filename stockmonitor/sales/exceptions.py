from typing import List, Optional

from stockmonitor.core.exceptions import ErrorCodes, StockMonitorError

from .constants import SaleState


class SaleError(StockMonitorError):
    """Base exception for sale recording; ``state`` is where the attempt ended."""
    state = SaleState.REJECTED


class InvalidSaleDataError(SaleError):
    """Raised when the sale request itself is malformed."""
    http_status = 400
    default_code = ErrorCodes.INVALID

    def __init__(self, message: str = "Invalid sale data", errors: Optional[List[str]] = None):
        super().__init__(message=message, errors=errors or [message])


class InsufficientStockError(SaleError):
    """Raised when a sale asks for more units than are in stock."""
    http_status = 409
    default_code = ErrorCodes.INSUFFICIENT_STOCK

    def __init__(self, product_id, requested: int, available: int):
        super().__init__(
            message=f"Only {available} items in stock!",
            errors=[f"product_id={product_id}: requested={requested}, available={available}"],
            extra={"available": available},
        )
        self.requested = requested
        self.available = available


class SaleWriteError(SaleError):
    """Raised when the sale row could not be written; nothing was stored."""
    state = SaleState.SALE_WRITE_FAILED
    default_code = ErrorCodes.SALE_WRITE_FAILED

    def __init__(self, product_id, reason: str):
        super().__init__(
            message="Error recording sale",
            errors=[f"product_id={product_id}: {reason}"],
        )


class PartialWriteError(SaleError):
    """
    Raised when the sale row was written but the stock update was not.

    The stored stock count is stale and needs manual reconciliation.
    """
    state = SaleState.STOCK_WRITE_FAILED
    default_code = ErrorCodes.PARTIAL_WRITE

    def __init__(self, sale_id, product_id, reason: str):
        super().__init__(
            message=(
                f"Sale {sale_id} was recorded but the stock of product {product_id} "
                "was not updated; reconcile manually"
            ),
            errors=[reason],
            extra={"sale_id": str(sale_id), "product_id": str(product_id)},
        )
        self.sale_id = sale_id
        self.product_id = product_id
