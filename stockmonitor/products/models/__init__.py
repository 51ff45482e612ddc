from .product import Product, ProductQuerySet

__all__ = [
    'Product',
    'ProductQuerySet',
]
