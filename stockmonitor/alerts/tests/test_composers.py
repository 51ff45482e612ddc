from datetime import date, timedelta
from decimal import Decimal

from stockmonitor.alerts.composers import (
    compose_batch_alert,
    compose_product_alert,
    summarize_alerts,
)
from stockmonitor.alerts.constants import AlertKind
from stockmonitor.alerts.evaluators import ConfigurableRule, LegacyFixedRule
from stockmonitor.alerts.types import ProductSnapshot

TODAY = date(2026, 3, 10)


class TestComposeBatchAlert:
    def test_nothing_to_report(self):
        products = [ProductSnapshot(name="Gauze", stock_quantity=200)]
        assert compose_batch_alert(products, TODAY, LegacyFixedRule()) is None

    def test_subject_and_body(self):
        products = [
            ProductSnapshot(name="Gauze", stock_quantity=4, category=""),
            ProductSnapshot(name="Insulin", stock_quantity=40, category="Medicine",
                            expiry_date=date(2026, 3, 15)),
            ProductSnapshot(name="Bandage", stock_quantity=200),
        ]
        composed = compose_batch_alert(products, TODAY, LegacyFixedRule())

        assert composed.subject == "StockMonitor Alert: 1 Low Stock, 1 Expiring"
        assert "Low Stock Items (&lt; 10)" in composed.html_body
        assert "Low Stock Items (< 10)" in composed.text_body
        assert "Expiring Soon (Next 7 Days)" in composed.text_body
        assert "Gauze (No Category) - Remaining: 4" in composed.text_body
        assert "Insulin (Medicine) - Expires: 2026-03-15" in composed.text_body
        assert "Bandage" not in composed.text_body

    def test_html_escapes_product_fields(self):
        products = [ProductSnapshot(name="<b>Bold</b>", stock_quantity=1)]
        composed = compose_batch_alert(products, TODAY, LegacyFixedRule())
        assert "<b>Bold</b>" not in composed.html_body
        assert "&lt;b&gt;Bold&lt;/b&gt;" in composed.html_body

    def test_alerts_one_per_bucket(self):
        products = [
            ProductSnapshot(name="A", stock_quantity=1),
            ProductSnapshot(name="B", stock_quantity=2),
        ]
        composed = compose_batch_alert(products, TODAY, LegacyFixedRule())
        assert len(composed.alerts) == 1
        assert composed.alerts[0].kind == AlertKind.LOW_STOCK
        assert composed.alerts[0].message == "2 items are running low on stock."
        assert composed.subject.endswith("2 Low Stock, 0 Expiring")

    def test_uses_given_rule(self):
        products = [ProductSnapshot(name="A", stock_quantity=30)]
        assert compose_batch_alert(products, TODAY, LegacyFixedRule()) is None
        assert compose_batch_alert(products, TODAY, ConfigurableRule()) is not None


class TestComposeProductAlert:
    def test_no_alert_needed(self):
        product = ProductSnapshot(name="Gloves", stock_quantity=500)
        assert compose_product_alert(product, TODAY) is None

    def test_low_stock_product(self):
        product = ProductSnapshot(
            name="Gloves",
            category="Supplies",
            price=Decimal("12.50"),
            stock_quantity=5,
            low_stock_threshold=10,
        )
        composed = compose_product_alert(product, TODAY)

        assert composed.subject == "StockMonitor Alert: Gloves"
        assert "LOW STOCK: 5 in stock, alert threshold 10" in composed.text_body
        assert "Price: 12.50" in composed.text_body
        assert "Supplies" in composed.html_body
        assert [a.kind for a in composed.alerts] == [AlertKind.LOW_STOCK]

    def test_expiring_product(self):
        product = ProductSnapshot(
            name="Vaccine",
            stock_quantity=500,
            expiry_date=TODAY + timedelta(days=20),
            expiry_alert_days=20,
        )
        composed = compose_product_alert(product, TODAY)

        assert "EXPIRING SOON: expires 2026-03-30, alert lead time 20 days" in composed.text_body
        assert "No Category" in composed.text_body
        assert [a.kind for a in composed.alerts] == [AlertKind.EXPIRY]


def test_summarize_alerts_messages():
    products = [
        ProductSnapshot(name="A", stock_quantity=1, expiry_date=TODAY),
        ProductSnapshot(name="B", stock_quantity=5),
    ]
    alerts = summarize_alerts(products, TODAY, LegacyFixedRule())

    assert [(a.kind, a.message) for a in alerts] == [
        (AlertKind.LOW_STOCK, "2 items are running low on stock."),
        (AlertKind.EXPIRY, "1 items are expiring soon."),
    ]
    assert list(alerts[0].items) == ["A", "B"]


def test_summarize_alerts_empty():
    assert summarize_alerts([], TODAY, LegacyFixedRule()) == []
