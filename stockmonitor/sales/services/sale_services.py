import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from djmoney.money import Money

from stockmonitor.products.constants import PriceLimits
from stockmonitor.products.exceptions import ProductNotFoundError
from stockmonitor.products.models import Product
from stockmonitor.products.selectors import get_product
from stockmonitor.products.services import decrement_stock
from stockmonitor.products.validators import validate_positive_quantity

from ..constants import SaleState
from ..exceptions import (
    InsufficientStockError,
    InvalidSaleDataError,
    PartialWriteError,
    SaleWriteError,
)
from ..models import Sale

logger = logging.getLogger(__name__)


def record_sale(*, user, product_id, quantity: int) -> Sale:
    """
    Record a sale and take the sold units out of stock.

    The sale row and the stock decrement are two separate writes. A request
    for more units than are in stock is rejected before either write.

    Args:
        user: Acting user; must own the product
        product_id: Product to sell
        quantity: Positive number of units

    Returns:
        The stored Sale, with ``sale.product`` reflecting the new stock level

    Raises:
        InvalidSaleDataError: Quantity is not a positive integer
        ProductNotFoundError: No such product for this user
        InsufficientStockError: Quantity exceeds current stock
        SaleWriteError: The sale row could not be stored (nothing written)
        PartialWriteError: The sale row is stored but stock was not updated
    """
    _log_state(product_id, SaleState.VALIDATING)
    try:
        validate_positive_quantity(quantity)
    except ValidationError as e:
        _log_state(product_id, SaleState.REJECTED)
        raise InvalidSaleDataError(errors=[f"quantity: {m}" for m in e.messages])

    try:
        product = get_product(user, product_id)
    except ProductNotFoundError:
        _log_state(product_id, SaleState.REJECTED)
        raise

    if quantity > product.stock_quantity:
        _log_state(product_id, SaleState.REJECTED)
        raise InsufficientStockError(product.pk, quantity, product.stock_quantity)

    total_price = product.price * quantity

    _log_state(product.pk, SaleState.WRITING_SALE)
    try:
        with transaction.atomic():
            sale = Sale.objects.create(
                owner=user,
                product=product,
                quantity=quantity,
                total_price=total_price,
                profit=calculate_profit(product, quantity, total_price),
            )
    except DatabaseError as e:
        _log_state(product.pk, SaleState.SALE_WRITE_FAILED)
        logger.error(f"Sale write failed for product {product.pk}: {str(e)}", exc_info=True)
        raise SaleWriteError(product.pk, str(e))

    _log_state(product.pk, SaleState.WRITING_STOCK)
    try:
        with transaction.atomic():
            decremented = decrement_stock(product.pk, quantity)
    except DatabaseError as e:
        _raise_partial_write(sale, product, str(e))

    if not decremented:
        _raise_partial_write(sale, product, "stock changed before it could be decremented")

    product.refresh_from_db(fields=['stock_quantity', 'updated_at'])
    _log_state(product.pk, SaleState.COMPLETE)
    logger.info(
        f"Recorded sale {sale.id}: {quantity} x {product.name} "
        f"for {total_price}, {product.stock_quantity} left"
    )
    return sale


def calculate_profit(product: Product, quantity: int, total_price: Money) -> Optional[Money]:
    """Sale total minus the lot cost of the units sold, when the cost is known"""
    unit_cost = product.unit_cost
    if unit_cost is None or unit_cost.currency != total_price.currency:
        return None
    profit = total_price - unit_cost * quantity
    return Money(profit.amount.quantize(PriceLimits.QUANTUM), profit.currency)

# -- Private Helpers -- #

def _raise_partial_write(sale: Sale, product: Product, reason: str) -> None:
    _log_state(product.pk, SaleState.STOCK_WRITE_FAILED)
    logger.critical(
        f"Sale {sale.id} recorded but stock of product {product.pk} not decremented "
        f"by {sale.quantity}: {reason}. Manual reconciliation required."
    )
    raise PartialWriteError(sale.id, product.pk, reason)


def _log_state(product_id, state: SaleState) -> None:
    logger.debug(f"Sale attempt for product {product_id}: {state.label}")
