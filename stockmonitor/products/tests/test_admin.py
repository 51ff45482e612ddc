from http import HTTPStatus

import pytest
from django.urls import reverse


@pytest.mark.parametrize("query", ["", "?stock_status=low", "?stock_status=out", "?expiry=week"])
def test_product_changelist(admin_client, make_product, query):
    make_product(stock_quantity=3)

    response = admin_client.get(reverse("admin:products_product_changelist") + query)

    assert response.status_code == HTTPStatus.OK


def test_sale_changelist_is_read_only(admin_client):
    assert admin_client.get(reverse("admin:sales_sale_changelist")).status_code == HTTPStatus.OK
    assert admin_client.get(reverse("admin:sales_sale_add")).status_code == HTTPStatus.FORBIDDEN


def test_alert_run_changelist(admin_client):
    assert admin_client.get(reverse("admin:alerts_alertrun_changelist")).status_code == HTTPStatus.OK
