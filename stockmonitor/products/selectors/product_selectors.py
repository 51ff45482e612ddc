from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from ..exceptions import ProductNotFoundError
from ..models import Product


def get_product(owner, product_id) -> Product:
    """Retrieve one of the owner's products"""
    try:
        return Product.objects.owned_by(owner).get(pk=product_id)
    except (Product.DoesNotExist, ValidationError):
        raise ProductNotFoundError(product_id)


def list_products(owner) -> QuerySet:
    """All of the owner's products, newest first"""
    return Product.objects.owned_by(owner).order_by('-created_at')


def list_in_stock_products(owner) -> QuerySet:
    """Products that can still be sold, by name"""
    return Product.objects.owned_by(owner).in_stock().order_by('name')


def count_products(owner) -> int:
    return Product.objects.owned_by(owner).count()
