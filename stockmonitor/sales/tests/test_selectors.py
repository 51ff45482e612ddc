from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from djmoney.money import Money

from stockmonitor.sales.models import Sale
from stockmonitor.sales.selectors import count_sales, daily_sales_totals, list_recent_sales

pytestmark = pytest.mark.django_db


def at(year, month, day, hour=12) -> datetime:
    return datetime(year, month, day, hour, tzinfo=dt_timezone.utc)


@pytest.fixture
def make_sale(user, make_product):
    product = make_product(name="Gauze", stock_quantity=1000)

    def _make_sale(sale_date, total="20.00", owner=None, quantity=1) -> Sale:
        return Sale.objects.create(
            owner=owner or user,
            product=product,
            quantity=quantity,
            total_price=Money(Decimal(total), "INR"),
            sale_date=sale_date,
        )

    return _make_sale


def test_recent_sales_newest_first(user, make_sale):
    older = make_sale(at(2026, 3, 1))
    newest = make_sale(at(2026, 3, 9))
    middle = make_sale(at(2026, 3, 5))

    assert list(list_recent_sales(user)) == [newest, middle, older]
    assert list(list_recent_sales(user, limit=2)) == [newest, middle]
    assert list_recent_sales(user)[0].product.name == "Gauze"


def test_recent_sales_rejects_bad_limit(user):
    with pytest.raises(ValidationError):
        list_recent_sales(user, limit=0)


def test_count_sales_scoped_to_owner(user, other_user, make_sale):
    make_sale(at(2026, 3, 1))
    make_sale(at(2026, 3, 2), owner=other_user)

    assert count_sales(user) == 1
    assert count_sales(other_user) == 1


def test_daily_sales_totals(user, make_sale):
    make_sale(at(2026, 3, 1), total="500.00")
    make_sale(at(2026, 3, 4, hour=1), total="15.00")
    make_sale(at(2026, 3, 9), total="20.00")
    make_sale(at(2026, 3, 10, hour=8), total="25.50")
    make_sale(at(2026, 3, 10, hour=18), total="14.50")

    totals = daily_sales_totals(user, today=date(2026, 3, 10))

    assert [(row["date"], row["total"]) for row in totals] == [
        (date(2026, 3, 4), Decimal("15.00")),
        (date(2026, 3, 9), Decimal("20.00")),
        (date(2026, 3, 10), Decimal("40.00")),
    ]


def test_daily_sales_totals_rejects_bad_range(user):
    with pytest.raises(ValidationError):
        daily_sales_totals(user, days=0)
