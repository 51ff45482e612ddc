import logging

from django.conf import settings
from django.dispatch import receiver

from stockmonitor.core.exceptions import StockMonitorError
from stockmonitor.products.signals import product_saved

from .services import send_product_alert

logger = logging.getLogger(__name__)


@receiver(product_saved, dispatch_uid='alerts.product_saved_alert')
def alert_on_product_saved(sender, product, created, **kwargs):
    """
    Email the owner when a saved product is low on stock or expiring.

    Alert failures never undo the product write; they are logged and the
    save stands.
    """
    if not created and not settings.STOCK_ALERTS.get('ALERT_ON_PRODUCT_EDIT', True):
        return

    owner = product.owner
    if not owner.email:
        logger.warning(f"Product {product.pk} saved by user {owner.pk} without email, alert skipped")
        return

    try:
        result = send_product_alert(owner, product)
    except StockMonitorError as e:
        logger.error(f"Alert for product {product.pk} not sent: {str(e)}", exc_info=True)
        return

    logger.debug(f"Alert for product {product.pk}: {result.status}")
