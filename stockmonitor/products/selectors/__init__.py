from .product_selectors import (
    count_products,
    get_product,
    list_in_stock_products,
    list_products,
)

__all__ = [
    'get_product',
    'list_products',
    'list_in_stock_products',
    'count_products',
]
