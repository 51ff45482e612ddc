from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from djmoney.models.fields import MoneyField
from djmoney.models.validators import MinMoneyValidator

from stockmonitor.core.models import BaseModel
from stockmonitor.products.constants import PriceLimits
from stockmonitor.products.models import Product


class SaleQuerySet(models.QuerySet):
    def owned_by(self, user):
        return self.filter(owner=user)


class Sale(BaseModel):
    """
    One completed sale of a single product.

    Rows are written once by the sale recorder and never changed afterwards.
    """
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='sales',
        editable=False,
        verbose_name=_("Owner")
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name='sales',
        verbose_name=_("Product")
    )
    quantity = models.PositiveIntegerField(_("Quantity"))
    total_price = MoneyField(
        _("Total Price"),
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        default_currency=settings.DEFAULT_CURRENCY,
        validators=[MinMoneyValidator(0)],
        help_text=_("Unit price at the time of sale times quantity")
    )
    profit = MoneyField(
        _("Profit"),
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        default_currency=settings.DEFAULT_CURRENCY,
        null=True,
        blank=True,
        default=None,
        help_text=_("Empty when the product has no procurement cost")
    )
    sale_date = models.DateTimeField(
        _("Sale Date"),
        default=timezone.now,
        db_index=True
    )

    objects = SaleQuerySet.as_manager()

    class Meta:
        ordering = ['-sale_date']
        verbose_name = _("Sale")
        verbose_name_plural = _("Sales")
        indexes = [
            models.Index(fields=['owner', '-sale_date']),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="positive_sale_quantity"
            )
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product.name} ({self.total_price})"
