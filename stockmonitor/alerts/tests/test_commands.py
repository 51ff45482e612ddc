from io import StringIO

import pytest
from django.apps import apps
from django.core import mail
from django.core.management import CommandError, call_command

from stockmonitor.alerts.dispatchers import MailRelayConfig
from stockmonitor.users.models import User

pytestmark = pytest.mark.django_db


def run_command(*args) -> str:
    out = StringIO()
    call_command("send_stock_alerts", *args, stdout=out)
    return out.getvalue()


def test_sends_to_each_user_with_products(user, other_user, make_product):
    make_product(stock_quantity=1)
    make_product(owner=other_user, stock_quantity=500)
    User.objects.create_user(email="no-products@example.com", password="s3cret-pass")

    output = run_command()

    assert [m.to for m in mail.outbox] == [[user.email]]
    assert f"{user.email}: alert email sent" in output
    assert f"{other_user.email}: no alerts needed" in output
    assert "no-products@example.com" not in output
    assert "Done: 1 sent, 0 failed" in output


def test_second_run_same_day_is_skipped(user, make_product):
    make_product(stock_quantity=1)

    run_command()
    output = run_command()

    assert "already checked today" in output
    assert len(mail.outbox) == 1


def test_force(user, make_product):
    make_product(stock_quantity=1)

    run_command()
    run_command("--force")

    assert len(mail.outbox) == 2


def test_missing_credentials_stops_command(user, make_product, monkeypatch):
    make_product(stock_quantity=1)
    monkeypatch.setattr(
        apps.get_app_config("alerts"), "relay_config", MailRelayConfig(username="", password="")
    )

    with pytest.raises(CommandError, match="credentials"):
        run_command()
