from .inventory_services import decrement_stock
from .product_services import create_product, delete_product, update_product

__all__ = [
    'create_product',
    'update_product',
    'delete_product',
    'decrement_stock',
]
