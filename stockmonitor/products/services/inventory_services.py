import logging

from django.db.models import F
from django.utils import timezone

from ..models import Product
from ..validators import validate_positive_quantity

logger = logging.getLogger(__name__)


def decrement_stock(product_id, quantity: int) -> bool:
    """
    Take ``quantity`` units out of a product's stock.

    The decrement is a single conditional UPDATE, so stock can never go
    below zero even when two sales race for the same units.

    Returns:
        True when the stock was decremented, False when the product is gone
        or no longer holds ``quantity`` units.

    Raises:
        ValidationError: For a non-positive quantity
        DatabaseError: When the store rejects the write
    """
    validate_positive_quantity(quantity)

    updated = Product.objects.filter(
        pk=product_id,
        stock_quantity__gte=quantity
    ).update(
        stock_quantity=F('stock_quantity') - quantity,
        updated_at=timezone.now()
    )

    if not updated:
        logger.warning(f"Stock decrement of {quantity} skipped for product {product_id}")
    return bool(updated)
