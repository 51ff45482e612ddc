class InventoryConstants:
    """Inventory management constants"""

    LOW_STOCK_THRESHOLD = 50  # Default low stock warning threshold
    EXPIRY_ALERT_DAYS = 20    # Default days before expiry to start alerting
    DEFAULT_STOCK = 0         # Default stock quantity for new items
