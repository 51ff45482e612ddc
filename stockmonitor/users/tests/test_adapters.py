from django.test import RequestFactory

from stockmonitor.users.adapters import AccountAdapter
from stockmonitor.users.models import User


def test_populate_username_leaves_username_empty(rf: RequestFactory):
    user = User(email="owner@example.com")

    AccountAdapter().populate_username(rf.get("/accounts/signup/"), user)

    assert user.username is None
