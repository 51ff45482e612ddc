from decimal import Decimal


class PriceLimits:
    """General pricing constraints"""
    DECIMALS = 2          # Decimal places
    MAX_DIGITS = 14       # Max digits allowed
    MIN_VALUE = Decimal('0.00')  # Prices may be zero, never negative
    QUANTUM = Decimal('0.01')
