from .sale_selectors import count_sales, daily_sales_totals, list_recent_sales

__all__ = [
    'list_recent_sales',
    'count_sales',
    'daily_sales_totals',
]
