from datetime import timedelta

import pytest
from django.core import mail

from stockmonitor.alerts import services
from stockmonitor.alerts.constants import AlertKind, AlertStatus
from stockmonitor.alerts.dispatchers import MailRelayConfig, NotificationDispatcher
from stockmonitor.alerts.evaluators import ConfigurableRule
from stockmonitor.alerts.models import AlertRun
from stockmonitor.alerts.services import (
    current_alerts,
    run_daily_alert_check,
    send_batch_alert,
    send_product_alert,
)
from stockmonitor.alerts.types import ProductSnapshot
from stockmonitor.core.exceptions import DeliveryError, MissingCredentialsError

pytestmark = pytest.mark.django_db


@pytest.fixture
def unconfigured_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher(MailRelayConfig(username="", password=""))


class TestSendBatchAlert:
    def test_sends_summary_to_owner(self, user, make_product, today):
        make_product(name="Gauze", stock_quantity=3)
        make_product(name="Insulin", stock_quantity=80, expiry_date=today + timedelta(days=5))

        result = send_batch_alert(user, today=today)

        assert result.status == AlertStatus.SENT
        assert result.sent
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == [user.email]
        assert mail.outbox[0].subject == "StockMonitor Alert: 1 Low Stock, 1 Expiring"

    def test_no_alert_needed(self, user, make_product, today):
        make_product(stock_quantity=300)

        result = send_batch_alert(user, today=today)

        assert result.status == AlertStatus.NO_ALERT_NEEDED
        assert mail.outbox == []

    def test_only_owned_products_are_checked(self, user, other_user, make_product, today):
        make_product(owner=other_user, name="Foreign", stock_quantity=1)

        assert send_batch_alert(user, today=today).status == AlertStatus.NO_ALERT_NEEDED

    def test_rule_can_be_chosen(self, user, make_product, today):
        make_product(stock_quantity=30)

        assert send_batch_alert(user, today=today).status == AlertStatus.NO_ALERT_NEEDED
        assert send_batch_alert(user, today=today, rule=ConfigurableRule()).status == AlertStatus.SENT

    def test_missing_credentials_propagates(self, user, make_product, today, unconfigured_dispatcher):
        make_product(stock_quantity=1)

        with pytest.raises(MissingCredentialsError):
            send_batch_alert(user, today=today, dispatcher=unconfigured_dispatcher)
        assert mail.outbox == []


class TestSendProductAlert:
    def test_snapshot_below_its_threshold(self, user, today):
        product = ProductSnapshot(name="Syringes", stock_quantity=30, low_stock_threshold=40)

        result = send_product_alert(user, product, today=today)

        assert result.status == AlertStatus.SENT
        assert mail.outbox[0].subject == "StockMonitor Alert: Syringes"

    def test_healthy_product(self, user, make_product, today):
        product = make_product(stock_quantity=300)

        result = send_product_alert(user, product, today=today)

        assert result.status == AlertStatus.NO_ALERT_NEEDED
        assert result.composed is None
        assert mail.outbox == []


class TestRunDailyAlertCheck:
    def test_runs_once_per_day(self, user, make_product, today):
        make_product(stock_quantity=1)

        first = run_daily_alert_check(user, today=today)
        second = run_daily_alert_check(user, today=today)

        assert first.status == AlertStatus.SENT
        assert second.status == AlertStatus.ALREADY_CHECKED
        assert len(mail.outbox) == 1
        assert AlertRun.objects.get(user=user).last_run_on == today

    def test_runs_again_next_day(self, user, make_product, today):
        make_product(stock_quantity=1)

        run_daily_alert_check(user, today=today)
        result = run_daily_alert_check(user, today=today + timedelta(days=1))

        assert result.status == AlertStatus.SENT
        assert len(mail.outbox) == 2

    def test_no_alert_still_marks_day(self, user, make_product, today):
        make_product(stock_quantity=300)

        assert run_daily_alert_check(user, today=today).status == AlertStatus.NO_ALERT_NEEDED
        assert AlertRun.objects.get(user=user).has_run_on(today)

    def test_force_ignores_previous_run(self, user, make_product, today):
        make_product(stock_quantity=1)

        run_daily_alert_check(user, today=today)
        result = run_daily_alert_check(user, today=today, force=True)

        assert result.status == AlertStatus.SENT
        assert len(mail.outbox) == 2

    def test_failed_delivery_is_not_marked(self, user, make_product, today, monkeypatch):
        make_product(stock_quantity=1)

        def fail_send(composed, user, dispatcher):
            raise DeliveryError(user.email, "relay down")

        monkeypatch.setattr(services, "_dispatch", fail_send)

        with pytest.raises(DeliveryError):
            run_daily_alert_check(user, today=today)

        assert not AlertRun.objects.filter(user=user, last_run_on=today).exists()


def test_current_alerts_sends_nothing(user, make_product, today):
    make_product(name="Gauze", stock_quantity=2)

    alerts = current_alerts(user, today=today)

    assert [a.kind for a in alerts] == [AlertKind.LOW_STOCK]
    assert list(alerts[0].items) == ["Gauze"]
    assert mail.outbox == []
