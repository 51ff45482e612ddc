from typing import Optional

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _
from djmoney.models.fields import MoneyField
from djmoney.models.validators import MinMoneyValidator
from djmoney.money import Money

from stockmonitor.core.models import BaseModel
from ..constants import (
    FieldLimits,
    InventoryConstants,
    PriceLimits,
)


class ProductQuerySet(models.QuerySet):
    def owned_by(self, user):
        return self.filter(owner=user)

    def in_stock(self):
        return self.filter(stock_quantity__gt=0)


class Product(BaseModel):
    """Stocked item with pricing, expiry and alert settings"""
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='products',
        editable=False,
        verbose_name=_("Owner")
    )
    name = models.CharField(
        _("Name"),
        max_length=FieldLimits.PRODUCT_NAME,
        db_index=True
    )
    category = models.CharField(
        _("Category"),
        max_length=FieldLimits.CATEGORY_NAME,
        blank=True
    )
    price = MoneyField(
        _("Unit Price"),
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        default_currency=settings.DEFAULT_CURRENCY,
        validators=[MinMoneyValidator(0)]
    )
    stock_quantity = models.PositiveIntegerField(
        _("Stock Quantity"),
        default=InventoryConstants.DEFAULT_STOCK
    )
    expiry_date = models.DateField(
        _("Expiry Date"),
        null=True,
        blank=True
    )
    low_stock_threshold = models.PositiveIntegerField(
        _("Low Stock Threshold"),
        default=InventoryConstants.LOW_STOCK_THRESHOLD
    )
    expiry_alert_days = models.PositiveIntegerField(
        _("Days Before Expiry Alert"),
        default=InventoryConstants.EXPIRY_ALERT_DAYS
    )
    procurement_price = MoneyField(
        _("Total Procurement Cost"),
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        default_currency=settings.DEFAULT_CURRENCY,
        null=True,
        blank=True,
        default=None,
        validators=[MinMoneyValidator(0)],
        help_text=_("Total price paid for the whole lot")
    )
    lot_size = models.PositiveIntegerField(
        _("Lot Size"),
        default=0,
        help_text=_("Quantity acquired in the current lot")
    )

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        indexes = [
            models.Index(fields=['owner', 'name']),
            models.Index(fields=['owner', 'stock_quantity']),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(stock_quantity__gte=0),
                name="non_negative_stock"
            )
        ]

    @property
    def unit_cost(self) -> Optional[Money]:
        """Procurement cost of one unit of the current lot, if known"""
        if self.procurement_price is None or not self.lot_size:
            return None
        return self.procurement_price / self.lot_size

    def __str__(self):
        return f"{self.name} ({self.stock_quantity} in stock)"
