import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from djmoney.money import Money

from ..exceptions import InvalidProductDataError, ProductInUseError, ProductNotFoundError
from ..models import Product
from ..signals import product_saved
from ..validators import validate_editable_fields, validate_non_negative_amount

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'name',
    'category',
    'price',
    'stock_quantity',
    'expiry_date',
    'low_stock_threshold',
    'expiry_alert_days',
    'procurement_price',
)
MONEY_FIELDS = ('price', 'procurement_price')

# ──────────────────────────────────────────────────
# Product Management Services (Product)
# ──────────────────────────────────────────────────

@transaction.atomic
def create_product(*, owner, **fields: Any) -> Product:
    """Create a product owned by ``owner``; the lot size starts at the stock quantity"""
    cleaned = _clean_fields(fields)

    product = Product(owner=owner, **cleaned)
    product.lot_size = product.stock_quantity
    _full_clean(product)
    product.save()

    logger.info(f"Created product {product.id} for user {owner.pk}")
    _announce_saved(product, created=True)
    return product


@transaction.atomic
def update_product(*, owner, product_id, **fields: Any) -> Product:
    """Update product details; ownership never changes"""
    cleaned = _clean_fields(fields)

    try:
        product = Product.objects.select_for_update().owned_by(owner).get(pk=product_id)
    except (Product.DoesNotExist, ValidationError):
        raise ProductNotFoundError(product_id)

    for field, value in cleaned.items():
        setattr(product, field, value)
    if 'stock_quantity' in cleaned:
        product.lot_size = product.stock_quantity

    _full_clean(product)
    product.save()

    logger.info(f"Updated product {product.id} fields: {', '.join(sorted(cleaned))}")
    _announce_saved(product, created=False)
    return product


@transaction.atomic
def delete_product(*, owner, product_id) -> None:
    """Delete a product that no sale references"""
    try:
        product = Product.objects.owned_by(owner).get(pk=product_id)
    except (Product.DoesNotExist, ValidationError):
        raise ProductNotFoundError(product_id)

    sale_count = product.sales.count()
    if sale_count:
        raise ProductInUseError(product_id, sale_count)

    product.delete()
    logger.info(f"Deleted product {product_id} for user {owner.pk}")

# -- Private Helpers -- #

def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Reject unknown fields and coerce money amounts"""
    try:
        validate_editable_fields(fields, EDITABLE_FIELDS)
    except ValidationError as e:
        raise InvalidProductDataError(errors=e.messages)

    cleaned = dict(fields)
    for name in MONEY_FIELDS:
        if name in cleaned:
            cleaned[name] = _as_money(cleaned[name], name)
    if cleaned.get('category') is None and 'category' in cleaned:
        cleaned['category'] = ''
    return cleaned


def _as_money(value, name: str):
    if value is None or value == '':
        if name == 'price':
            raise InvalidProductDataError(errors=[f"{name}: required"])
        return None
    if isinstance(value, Money):
        amount = value
    else:
        try:
            amount = Money(Decimal(str(value)), settings.DEFAULT_CURRENCY)
        except (InvalidOperation, ValueError):
            raise InvalidProductDataError(errors=[f"{name}: not a valid amount"])
    try:
        validate_non_negative_amount(amount, name)
    except ValidationError as e:
        raise InvalidProductDataError(errors=[f"{name}: {m}" for m in e.messages])
    return amount


def _full_clean(product: Product) -> None:
    try:
        product.full_clean(exclude=['owner'])
    except ValidationError as e:
        errors = [
            f"{field}: {message}"
            for field, messages in e.message_dict.items()
            for message in messages
        ]
        raise InvalidProductDataError(errors=errors)


def _announce_saved(product: Product, *, created: bool) -> None:
    transaction.on_commit(
        lambda: product_saved.send(sender=Product, product=product, created=created)
    )
