from datetime import date
from decimal import Decimal

import pytest
from djmoney.money import Money
from rest_framework.test import APIClient

from stockmonitor.products.models import Product
from stockmonitor.users.models import User


@pytest.fixture
def user(db) -> User:
    return User.objects.create_user(email="owner@example.com", password="s3cret-pass")


@pytest.fixture
def other_user(db) -> User:
    return User.objects.create_user(email="someone-else@example.com", password="s3cret-pass")


@pytest.fixture
def api_client(user: User) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def anon_client() -> APIClient:
    return APIClient()


@pytest.fixture
def today() -> date:
    return date(2026, 3, 10)


@pytest.fixture
def make_product(user: User):
    """Insert a product row directly, skipping the catalog services and their signals"""

    def _make_product(owner=None, **fields) -> Product:
        fields.setdefault("name", "Paracetamol 500mg")
        fields.setdefault("category", "Medicine")
        fields.setdefault("stock_quantity", 100)
        price = fields.pop("price", Decimal("20.00"))
        fields["price"] = price if isinstance(price, Money) else Money(price, "INR")
        procurement_price = fields.pop("procurement_price", None)
        if procurement_price is not None and not isinstance(procurement_price, Money):
            procurement_price = Money(procurement_price, "INR")
        fields["procurement_price"] = procurement_price
        fields.setdefault("lot_size", fields["stock_quantity"])
        return Product.objects.create(owner=owner or user, **fields)

    return _make_product
