from .sale_services import calculate_profit, record_sale

__all__ = [
    'record_sale',
    'calculate_profit',
]
