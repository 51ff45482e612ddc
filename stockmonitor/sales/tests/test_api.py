from decimal import Decimal
from http import HTTPStatus

import pytest
from django.db import DatabaseError
from django.urls import reverse

from stockmonitor.sales.models import Sale
from stockmonitor.sales.services import record_sale, sale_services

pytestmark = pytest.mark.django_db

URL = "/api/sales/"


def test_urls():
    assert reverse("api:sale-list") == URL


def test_unauthenticated(anon_client):
    assert anon_client.get(URL).status_code == HTTPStatus.UNAUTHORIZED


def test_record_sale(api_client, make_product):
    product = make_product(stock_quantity=10, price=Decimal("20.00"))

    response = api_client.post(URL, {"product_id": str(product.pk), "quantity": 3}, format="json")

    assert response.status_code == HTTPStatus.CREATED
    assert response.data["total_price"] == "60.00"
    assert response.data["product_name"] == product.name
    product.refresh_from_db()
    assert product.stock_quantity == 7


def test_insufficient_stock(api_client, make_product):
    product = make_product(stock_quantity=10)

    response = api_client.post(URL, {"product_id": str(product.pk), "quantity": 11}, format="json")

    assert response.status_code == HTTPStatus.CONFLICT
    assert response.data["status"] == "insufficient_stock"
    assert response.data["detail"] == "Only 10 items in stock!"
    assert response.data["available"] == 10
    assert not Sale.objects.exists()


@pytest.mark.parametrize("payload", [
    {"quantity": 1},
    {"product_id": "not-a-uuid", "quantity": 1},
    {"product_id": "1b4e28ba-2fa1-11d2-883f-0016d3cca427", "quantity": 0},
])
def test_invalid_payload(api_client, payload):
    response = api_client.post(URL, payload, format="json")

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.data["status"] == "invalid"


def test_unknown_product(api_client):
    payload = {"product_id": "1b4e28ba-2fa1-11d2-883f-0016d3cca427", "quantity": 1}

    response = api_client.post(URL, payload, format="json")

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.data["status"] == "product_not_found"


def test_partial_write_reports_sale_id(api_client, make_product, monkeypatch):
    product = make_product(stock_quantity=10)

    def broken_decrement(product_id, quantity):
        raise DatabaseError("connection lost")

    monkeypatch.setattr(sale_services, "decrement_stock", broken_decrement)

    response = api_client.post(URL, {"product_id": str(product.pk), "quantity": 2}, format="json")

    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.data["status"] == "partial_write"
    assert response.data["sale_id"] == str(Sale.objects.get().pk)


def test_recent_sales_limit(api_client, user, make_product):
    product = make_product(stock_quantity=100)
    for _ in range(12):
        record_sale(user=user, product_id=product.pk, quantity=1)

    assert len(api_client.get(URL).data) == 10
    assert len(api_client.get(URL, {"limit": 3}).data) == 3
    assert api_client.get(URL, {"limit": 0}).status_code == HTTPStatus.BAD_REQUEST


def test_recent_sales_only_own(api_client, other_user, make_product):
    product = make_product(owner=other_user, stock_quantity=5)
    record_sale(user=other_user, product_id=product.pk, quantity=1)

    assert api_client.get(URL).data == []
