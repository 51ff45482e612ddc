import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from django.db import transaction
from django.utils import timezone

from stockmonitor.products.selectors import list_products

from .composers import compose_batch_alert, compose_product_alert, summarize_alerts
from .constants import AlertStatus
from .dispatchers import NotificationDispatcher, get_dispatcher
from .models import AlertRun
from .types import Alert, ComposedAlert

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertResult:
    status: str
    message: str
    composed: Optional[ComposedAlert] = None

    @property
    def sent(self) -> bool:
        return self.status == AlertStatus.SENT

# ──────────────────────────────────────────────────
# Alert Triggers
# ──────────────────────────────────────────────────

def send_batch_alert(
    user,
    *,
    today: Optional[date] = None,
    rule=None,
    dispatcher: Optional[NotificationDispatcher] = None
) -> AlertResult:
    """
    Email the user one summary of all their low stock and expiring products.

    Raises:
        MissingCredentialsError: Mail relay not configured
        DeliveryError: Mail relay failed
    """
    today = today or timezone.localdate()
    composed = compose_batch_alert(list_products(user), today, rule)
    return _dispatch(composed, user, dispatcher)


def send_product_alert(
    user,
    product,
    *,
    today: Optional[date] = None,
    dispatcher: Optional[NotificationDispatcher] = None
) -> AlertResult:
    """
    Email the user about one product judged by its own alert settings.

    ``product`` is a saved ``Product`` or a ``ProductSnapshot`` of submitted
    form values.
    """
    today = today or timezone.localdate()
    composed = compose_product_alert(product, today)
    return _dispatch(composed, user, dispatcher)


def run_daily_alert_check(
    user,
    *,
    today: Optional[date] = None,
    force: bool = False,
    dispatcher: Optional[NotificationDispatcher] = None
) -> AlertResult:
    """
    Run the batch alert at most once per calendar day per user.

    The day is recorded only after the check finishes without error, so a
    failed delivery is retried on the next call.
    """
    today = today or timezone.localdate()

    with transaction.atomic():
        run, _ = AlertRun.objects.select_for_update().get_or_create(user=user)
        if run.has_run_on(today) and not force:
            logger.debug(f"Daily alert check already ran for user {user.pk} on {today}")
            return AlertResult(AlertStatus.ALREADY_CHECKED, "Alert check already ran today")

        result = send_batch_alert(user, today=today, dispatcher=dispatcher)

        run.last_run_on = today
        run.save(update_fields=['last_run_on', 'updated_at'])

    logger.info(f"Daily alert check for user {user.pk}: {result.status}")
    return result


def current_alerts(user, *, today: Optional[date] = None, rule=None) -> List[Alert]:
    """Alerts for the dashboard; nothing is sent"""
    return summarize_alerts(list_products(user), today or timezone.localdate(), rule)

# -- Private Helpers -- #

def _dispatch(composed: Optional[ComposedAlert], user, dispatcher) -> AlertResult:
    if composed is None:
        return AlertResult(AlertStatus.NO_ALERT_NEEDED, "No alerts needed")

    (dispatcher or get_dispatcher()).send(composed, user.email)
    return AlertResult(AlertStatus.SENT, "Alert email sent", composed)
