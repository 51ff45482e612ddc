from django.db import models
from django.utils.translation import gettext_lazy as _

from stockmonitor.products.constants import InventoryConstants


class AlertKind(models.TextChoices):
    LOW_STOCK = 'LOW_STOCK', _("Low Stock")
    EXPIRY = 'EXPIRY', _("Expiry")


class AlertStatus:
    """Outcome codes reported back to whoever triggered an alert check"""
    SENT = 'sent'
    NO_ALERT_NEEDED = 'no_alert_needed'
    ALREADY_CHECKED = 'already_checked'
    NO_RECIPIENT = 'no_recipient'


class AlertDefaults:
    """Per-product rule defaults, shared with the product model"""
    LOW_STOCK_THRESHOLD = InventoryConstants.LOW_STOCK_THRESHOLD
    EXPIRY_ALERT_DAYS = InventoryConstants.EXPIRY_ALERT_DAYS


class LegacyRuleConstants:
    """Fixed limits of the legacy batch check"""
    LOW_STOCK_THRESHOLD = 10
    EXPIRY_WINDOW_DAYS = 7


class RuleNames:
    LEGACY = 'legacy'
    CONFIGURABLE = 'configurable'
