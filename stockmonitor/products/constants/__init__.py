from .pricing_constants import PriceLimits
from .field_limits_constants import FieldLimits
from .inventory_constants import InventoryConstants

__all__ = [
    'PriceLimits',
    'FieldLimits',
    'InventoryConstants',
]
