from django.db import models
from django.utils.translation import gettext_lazy as _


class SaleState(models.TextChoices):
    """Steps of one sale attempt; the last four are terminal"""
    IDLE = 'idle', _("Idle")
    VALIDATING = 'validating', _("Validating")
    WRITING_SALE = 'writing_sale', _("Writing Sale")
    WRITING_STOCK = 'writing_stock', _("Writing Stock")
    REJECTED = 'rejected', _("Rejected")
    COMPLETE = 'complete', _("Complete")
    SALE_WRITE_FAILED = 'sale_write_failed', _("Writing Sale Failed")
    STOCK_WRITE_FAILED = 'stock_write_failed', _("Writing Stock Failed After Sale")


class SaleDefaults:
    RECENT_SALES_LIMIT = 10   # Rows shown in the recent sales list
    CHART_DAYS = 7            # Days covered by the dashboard sales chart
