# stockmonitor/products/validators.py
from decimal import Decimal
from typing import Iterable

from django.core.exceptions import ValidationError


def validate_non_negative_int(value: int, name: str = "Value") -> None:
    """Validate that a count-like value is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be a whole number")
    if value < 0:
        raise ValidationError(f"{name} cannot be negative")


def validate_positive_quantity(quantity: int) -> None:
    """Validate a quantity to move out of stock."""
    validate_non_negative_int(quantity, "Quantity")
    if quantity == 0:
        raise ValidationError("Quantity must be positive")


def validate_non_negative_amount(amount, name: str = "Price") -> None:
    """Validate a money amount (Money or Decimal) is not negative."""
    value = getattr(amount, 'amount', amount)
    if Decimal(value) < 0:
        raise ValidationError(f"{name} cannot be negative")


def validate_editable_fields(fields: Iterable[str], allowed: Iterable[str]) -> None:
    """Reject attempts to write fields the catalog does not expose."""
    unknown = sorted(set(fields) - set(allowed))
    if unknown:
        raise ValidationError(f"Unknown or read-only product fields: {', '.join(unknown)}")
